"""
Note Inventory - Cash held in the terminal's cassettes.

Tracks how many notes of each denomination are left and answers
cash-total queries.
"""

from __future__ import annotations

from typing import Any, Mapping

from atm_terminal.core.exceptions import InsufficientNotesError
from atm_terminal.core.value_objects import NoteBundle


class Inventory:
    """
    Mutable multiset of notes per denomination.

    The set of denominations is fixed at construction. Counts never go
    negative: notes only leave through ``take`` or ``dispense``.
    """

    def __init__(self, stock: Mapping[int, int]) -> None:
        """
        Initialize the inventory.

        Args:
            stock: Starting number of notes per denomination.

        Raises:
            ValueError: If the stock is empty, a denomination is not
                positive, or a count is negative.
        """
        if not stock:
            raise ValueError("Inventory needs at least one denomination")
        for denomination, count in stock.items():
            if denomination <= 0:
                raise ValueError(f"Denomination must be positive: {denomination}")
            if count < 0:
                raise ValueError(f"Note count cannot be negative: {count}")

        self._notes: dict[int, int] = dict(sorted(stock.items(), reverse=True))

    @property
    def denominations(self) -> tuple[int, ...]:
        """Get denominations, largest first."""
        return tuple(self._notes)

    @property
    def smallest_denomination(self) -> int:
        """Get the smallest note value."""
        return self.denominations[-1]

    def count(self, denomination: int) -> int:
        """Get the number of notes left of one denomination."""
        return self._notes.get(denomination, 0)

    def counts(self) -> dict[int, int]:
        """Get a copy of the denomination -> count mapping."""
        return dict(self._notes)

    def total_value(self) -> int:
        """Get the cash value of all notes left."""
        return sum(denomination * count for denomination, count in self._notes.items())

    def total_notes(self) -> int:
        """Get the number of notes left across all denominations."""
        return sum(self._notes.values())

    def is_empty(self) -> bool:
        """Check if no cash is left."""
        return self.total_value() == 0

    def has_at_least(self, amount: int) -> bool:
        """Check if the cash left covers an amount."""
        return amount <= self.total_value()

    def take(self, denomination: int) -> None:
        """
        Remove a single note.

        Args:
            denomination: Value of the note to remove.

        Raises:
            InsufficientNotesError: If no note of that value is left.
        """
        if self.count(denomination) <= 0:
            raise InsufficientNotesError(
                f"No {denomination} notes left",
                denomination=denomination,
            )
        self._notes[denomination] -= 1

    def dispense(self, bundle: NoteBundle) -> None:
        """
        Remove a whole bundle of notes, all or nothing.

        Args:
            bundle: Notes to remove.

        Raises:
            InsufficientNotesError: If any denomination runs short; no
                count is changed in that case.
        """
        for denomination, count in bundle.notes:
            if count > self.count(denomination):
                raise InsufficientNotesError(
                    f"Need {count} {denomination} notes, {self.count(denomination)} left",
                    denomination=denomination,
                )
        for denomination, count in bundle.notes:
            if count:
                self._notes[denomination] -= count

    def copy(self) -> Inventory:
        """Create an independent copy of the inventory."""
        return Inventory(self._notes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "notes": {str(denomination): count for denomination, count in self._notes.items()},
            "total_value": self.total_value(),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Inventory):
            return NotImplemented
        return self._notes == other._notes

    def __repr__(self) -> str:
        return f"Inventory({self._notes!r})"
