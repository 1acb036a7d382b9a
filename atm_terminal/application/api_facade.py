"""
API Facade - Unified interface for the ATM terminal.

Wires the inventory, the session state machine, the display, the stats
panel and the PIN service together, and routes keypad events through the
event queue.
"""

import asyncio
from typing import Any, Optional

from atm_terminal.core.interfaces import Display, PinVerifier, StatsPanel
from atm_terminal.core.value_objects import TerminalResult
from atm_terminal.domain.inventory import Inventory
from atm_terminal.domain.session_state_machine import SessionStateMachine
from atm_terminal.event_system import EventConsumer, EventPublisher, EventType
from atm_terminal.infrastructure.frontend import WebSocketStatsPanel
from atm_terminal.infrastructure.pin_service import HttpPinVerifier
from atm_terminal.infrastructure.settings import Settings, get_settings
from atm_terminal.infrastructure.terminal_screen import TerminalScreen
from atm_terminal.loggers import logger
from .terminal_service import TerminalService


class AtmTerminalFacade:
    """
    Facade for the ATM terminal.

    Collaborators left as None are built from the settings.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        verifier: Optional[PinVerifier] = None,
        display: Optional[Display] = None,
        stats_panel: Optional[StatsPanel] = None,
    ) -> None:
        """
        Initialize the terminal.

        Args:
            settings: Application settings (defaults to get_settings()).
            verifier: PIN verification service.
            display: Status display.
            stats_panel: Withdrawal statistics panel.
        """
        self._settings = settings or get_settings()
        cash = self._settings.cash
        keypad = self._settings.keypad
        services = self._settings.services

        self._inventory = Inventory(cash.stock)
        self._display = display or TerminalScreen(keypad.message_duration)
        self._state_machine = SessionStateMachine(
            self._inventory,
            verifier or HttpPinVerifier(services.pin_service_url, services.pin_service_timeout),
            overdraft_limit=self._settings.account.overdraft_limit,
            pin_length=keypad.pin_length,
            amount_length=keypad.amount_length,
        )
        self._service = TerminalService(
            self._state_machine,
            self._display,
            stats_panel or WebSocketStatsPanel(services.websocket_url),
            currency_symbol=cash.currency_symbol,
        )

        # Event system
        self._event_queue: asyncio.Queue = asyncio.Queue()
        self._event_publisher = EventPublisher(self._event_queue)
        self._event_consumer = EventConsumer(self._event_queue)

        self._last_result: Optional[TerminalResult] = None
        self._is_running = False

    @property
    def is_running(self) -> bool:
        """Check if key events are being processed."""
        return self._is_running

    @property
    def service(self) -> TerminalService:
        """Get the terminal service."""
        return self._service

    @property
    def last_result(self) -> Optional[TerminalResult]:
        """Get the result of the last processed key event."""
        return self._last_result

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def start(self) -> None:
        """Register key handlers, start consuming events and draw the screen."""
        if self._is_running:
            return

        self._event_consumer.register_handler(EventType.DIGIT, self._on_digit)
        self._event_consumer.register_handler(EventType.BACKSPACE, self._on_backspace)
        self._event_consumer.register_handler(EventType.CONFIRM, self._on_confirm)
        await self._event_consumer.start_consuming()

        self._service.render()
        self._is_running = True
        logger.info(
            f"Terminal started with {self._inventory.total_value()} in cash "
            f"({self._inventory.total_notes()} notes)"
        )

    async def stop(self) -> None:
        """Stop consuming events and cancel any pending screen revert."""
        if not self._is_running:
            return

        await self._event_consumer.stop_consuming()
        self._event_consumer.unregister_handler(EventType.DIGIT, self._on_digit)
        self._event_consumer.unregister_handler(EventType.BACKSPACE, self._on_backspace)
        self._event_consumer.unregister_handler(EventType.CONFIRM, self._on_confirm)
        self._display.close()

        self._is_running = False
        logger.info("Terminal stopped")

    # =========================================================================
    # Keypad
    # =========================================================================

    async def press_digit(self, digit: str) -> None:
        """Queue a digit key press."""
        await self._event_publisher.publish(EventType.DIGIT, digit=digit)

    async def press_backspace(self) -> None:
        """Queue a backspace key press."""
        await self._event_publisher.publish(EventType.BACKSPACE)

    async def press_confirm(self) -> None:
        """Queue a confirm key press."""
        await self._event_publisher.publish(EventType.CONFIRM)

    async def drain(self) -> None:
        """Wait until every queued key press has been processed."""
        await self._event_queue.join()

    async def _on_digit(self, event: dict[str, Any]) -> None:
        self._last_result = await self._service.press_digit(event.get("digit", ""))

    async def _on_backspace(self, event: dict[str, Any]) -> None:
        self._last_result = await self._service.press_backspace()

    async def _on_confirm(self, event: dict[str, Any]) -> None:
        self._last_result = await self._service.confirm()

    # =========================================================================
    # Status
    # =========================================================================

    def snapshot(self) -> dict[str, Any]:
        """
        Get the current state of the terminal.

        Returns:
            Dictionary with session, display and last result.
        """
        result = self._state_machine.to_dict()
        result["display"] = self._display.text
        result["showing_message"] = self._display.is_showing_message
        if self._last_result is not None:
            result["last_result"] = self._last_result.to_dict()
        return result
