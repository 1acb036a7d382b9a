"""
Terminal Service - Application service for keypad events.

Feeds key presses to the session state machine, turns every terminal
error into a transient display message, and pushes withdrawal statistics
to the stats panel.
"""

import asyncio
from typing import Optional

from atm_terminal.configs import CURRENCY_SYMBOL
from atm_terminal.core.exceptions import InputRejectedError, TerminalError
from atm_terminal.core.interfaces import Display, StatsPanel
from atm_terminal.core.value_objects import TerminalOutcome, TerminalResult
from atm_terminal.domain.session_state_machine import SessionStateMachine
from atm_terminal.loggers import logger


class TerminalService:
    """
    Application service for the terminal.

    Coordinates the session state machine with the display and the
    stats panel. Key events are processed one at a time.
    """

    def __init__(
        self,
        state_machine: SessionStateMachine,
        display: Display,
        stats_panel: Optional[StatsPanel] = None,
        currency_symbol: str = CURRENCY_SYMBOL,
    ) -> None:
        """
        Initialize the terminal service.

        Args:
            state_machine: Session state machine.
            display: Status display.
            stats_panel: Optional panel for withdrawal statistics.
            currency_symbol: Symbol printed before note values.
        """
        self._state_machine = state_machine
        self._display = display
        self._stats_panel = stats_panel
        self._currency_symbol = currency_symbol
        self._lock = asyncio.Lock()

    @property
    def state_machine(self) -> SessionStateMachine:
        """Get the session state machine."""
        return self._state_machine

    @property
    def display(self) -> Display:
        """Get the status display."""
        return self._display

    def render(self) -> None:
        """Show the current status text."""
        self._display.show(self._state_machine.status_text)

    async def press_digit(self, digit: str) -> TerminalResult:
        """
        Handle a digit key.

        Args:
            digit: Digit pressed.

        Returns:
            TerminalResult of the key press.
        """
        async with self._lock:
            if self._display.is_showing_message:
                return self._reject(InputRejectedError.insertion())
            try:
                self._state_machine.press_digit(digit)
            except TerminalError as e:
                return self._reject(e)

            self.render()
            return TerminalResult.accepted(TerminalOutcome.DIGIT_ACCEPTED)

    async def press_backspace(self) -> TerminalResult:
        """
        Handle the backspace key.

        Returns:
            TerminalResult of the key press.
        """
        async with self._lock:
            if self._display.is_showing_message:
                return self._reject(InputRejectedError.deletion())
            try:
                self._state_machine.backspace()
            except TerminalError as e:
                return self._reject(e)

            self.render()
            return TerminalResult.accepted(TerminalOutcome.DIGIT_REMOVED)

    async def confirm(self) -> TerminalResult:
        """
        Handle the confirm key.

        Returns:
            TerminalResult of the login or withdrawal attempt.
        """
        async with self._lock:
            try:
                result = await self._state_machine.confirm()
            except TerminalError as e:
                return self._reject(e)

            self._display.flash(result.message, self._state_machine.status_text)

            if result.outcome is TerminalOutcome.WITHDRAWAL_SUCCEEDED:
                await self._push_stats()

            return result

    def stats_lines(self) -> tuple[list[str], str]:
        """
        Build the stats panel lines for the logged-in account.

        Returns:
            Tuple of (one line per denomination, total line).
        """
        account = self._state_machine.account
        if account is None:
            return [], ""

        note_lines = [
            f"{self._currency_symbol}{denomination} notes: {count}"
            for denomination, count in account.withdrawn_notes.notes
        ]
        return note_lines, f"Total: {account.withdrawn_total}"

    async def _push_stats(self) -> None:
        """Send the cumulative withdrawal statistics to the stats panel."""
        if self._stats_panel is None:
            return
        note_lines, total_line = self.stats_lines()
        await self._stats_panel.update(note_lines, total_line)

    def _reject(self, error: TerminalError) -> TerminalResult:
        """Flash an error on the display and describe it as a result."""
        if isinstance(error, InputRejectedError):
            logger.debug(f"Input rejected: {error.message}")
        else:
            logger.warning(f"{error.code}: {error.message} {error.details or ''}".rstrip())

        self._display.flash(error.message, self._state_machine.status_text)
        return TerminalResult.failed(error)
