"""
Terminal screen - Status line with timed message overlays.

A flashed message stays on screen for a fixed duration, then the screen
reverts to the status text given with it. Only one message is shown at a
time; the revert is scheduled on the running asyncio loop.
"""

import asyncio
from typing import Callable, Optional

from atm_terminal.configs import MESSAGE_DURATION
from atm_terminal.loggers import logger


class TerminalScreen:
    """
    In-process display for the terminal.

    Attributes:
        message_duration: Seconds a flashed message stays on screen.
    """

    def __init__(
        self,
        message_duration: float = MESSAGE_DURATION,
        renderer: Optional[Callable[[str], None]] = None,
        text: str = "",
    ) -> None:
        """
        Initialize the screen.

        Args:
            message_duration: Seconds a flashed message stays on screen.
            renderer: Optional callback receiving every text rendered.
            text: Initial status text.
        """
        self.message_duration = message_duration
        self._renderer = renderer
        self._text = text
        self._revert_handle: Optional[asyncio.TimerHandle] = None

    @property
    def text(self) -> str:
        """Get the text currently rendered."""
        return self._text

    @property
    def is_showing_message(self) -> bool:
        """Check if a flashed message is on screen."""
        return self._revert_handle is not None

    def show(self, text: str) -> None:
        """Render a persistent status text."""
        self._render(text)

    def flash(self, message: str, revert_to: str) -> bool:
        """
        Show a message for ``message_duration`` seconds.

        Must be called from a running event loop.

        Args:
            message: Message to show.
            revert_to: Status text restored once the message expires.

        Returns:
            False if another message was already showing.
        """
        if self.is_showing_message:
            logger.debug(f"Message dropped, screen busy: {message}")
            return False

        loop = asyncio.get_running_loop()
        self._render(message)
        self._revert_handle = loop.call_later(self.message_duration, self._revert, revert_to)
        return True

    def close(self) -> None:
        """Cancel a pending revert."""
        if self._revert_handle is not None:
            self._revert_handle.cancel()
            self._revert_handle = None

    def _revert(self, text: str) -> None:
        self._revert_handle = None
        self._render(text)

    def _render(self, text: str) -> None:
        self._text = text
        if self._renderer:
            self._renderer(text)
