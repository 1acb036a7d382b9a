"""
Interfaces (Protocols) for the ATM terminal.

Defines contracts for the collaborators around the terminal core using
Python's Protocol for structural subtyping (duck typing with type hints).
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from .value_objects import PinVerification


# =============================================================================
# Authentication
# =============================================================================


@runtime_checkable
class PinVerifier(Protocol):
    """Protocol for the remote PIN verification service."""

    async def verify(self, pin: str) -> PinVerification:
        """
        Verify a PIN.

        Args:
            pin: PIN entered on the keypad.

        Returns:
            Verification with the starting balance when accepted.
        """
        ...


# =============================================================================
# Display Surfaces
# =============================================================================


@runtime_checkable
class Display(Protocol):
    """Protocol for the terminal's status display."""

    @property
    def text(self) -> str:
        """Get the text currently rendered."""
        ...

    @property
    def is_showing_message(self) -> bool:
        """Check if a transient message is on screen."""
        ...

    def show(self, text: str) -> None:
        """Render a persistent status text."""
        ...

    def flash(self, message: str, revert_to: str) -> bool:
        """
        Show a transient message, then revert to a status text.

        Args:
            message: Message to show.
            revert_to: Status text restored once the message expires.

        Returns:
            False if another message was already showing.
        """
        ...

    def close(self) -> None:
        """Cancel any pending revert."""
        ...


@runtime_checkable
class StatsPanel(Protocol):
    """Protocol for the panel showing what the user has withdrawn."""

    async def update(self, note_lines: Sequence[str], total_line: str) -> None:
        """
        Render cumulative withdrawal statistics.

        Args:
            note_lines: One display line per denomination.
            total_line: Display line with the cumulative total.
        """
        ...
