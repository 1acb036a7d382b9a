"""
Value Objects for the ATM terminal.

Immutable objects that represent values in the domain.
Value objects are compared by value, not by identity.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional

if TYPE_CHECKING:
    from .exceptions import TerminalError


# =============================================================================
# Enums
# =============================================================================


class TerminalOutcome(str, Enum):
    """Outcome signalled by a single key event."""

    DIGIT_ACCEPTED = "digit_accepted"
    DIGIT_REMOVED = "digit_removed"
    INPUT_REJECTED = "input_rejected"
    PIN_ACCEPTED = "pin_accepted"
    INVALID_PIN = "invalid_pin"
    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_BALANCE = "insufficient_balance"
    NON_DIVISIBLE_AMOUNT = "non_divisible_amount"
    INSUFFICIENT_CASH = "insufficient_cash"
    DENOMINATION_MISMATCH = "denomination_mismatch"
    WITHDRAWAL_SUCCEEDED = "withdrawal_succeeded"


# =============================================================================
# Note Bundle Value Object
# =============================================================================


@dataclass(frozen=True)
class NoteBundle:
    """
    Immutable multiset of notes, keyed by denomination.

    Notes are kept as ``(denomination, count)`` pairs ordered from the
    largest denomination to the smallest.

    Attributes:
        notes: Denomination/count pairs.
    """

    notes: tuple[tuple[int, int], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate denominations and counts."""
        for denomination, count in self.notes:
            if denomination <= 0:
                raise ValueError(f"Denomination must be positive: {denomination}")
            if count < 0:
                raise ValueError(f"Note count cannot be negative: {count}")

    @classmethod
    def from_counts(cls, counts: Mapping[int, int]) -> NoteBundle:
        """
        Create a bundle from a denomination -> count mapping.

        Args:
            counts: Number of notes per denomination.

        Returns:
            NoteBundle instance.
        """
        return cls(notes=tuple(sorted(counts.items(), reverse=True)))

    @classmethod
    def empty(cls, denominations: Iterable[int]) -> NoteBundle:
        """Create a bundle holding zero notes of every denomination."""
        return cls.from_counts({denomination: 0 for denomination in denominations})

    @property
    def denominations(self) -> tuple[int, ...]:
        """Get denominations, largest first."""
        return tuple(denomination for denomination, _ in self.notes)

    @property
    def total_value(self) -> int:
        """Get the cash value of the bundle."""
        return sum(denomination * count for denomination, count in self.notes)

    @property
    def note_count(self) -> int:
        """Get the number of notes in the bundle."""
        return sum(count for _, count in self.notes)

    def count(self, denomination: int) -> int:
        """Get the number of notes of one denomination."""
        return dict(self.notes).get(denomination, 0)

    def as_dict(self) -> dict[int, int]:
        """Get a denomination -> count mapping."""
        return dict(self.notes)

    def __add__(self, other: NoteBundle) -> NoteBundle:
        """Combine two bundles denomination by denomination."""
        if not isinstance(other, NoteBundle):
            return NotImplemented
        combined = self.as_dict()
        for denomination, count in other.notes:
            combined[denomination] = combined.get(denomination, 0) + count
        return NoteBundle.from_counts(combined)

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary with string keys for API responses."""
        return {str(denomination): count for denomination, count in self.notes}

    def __str__(self) -> str:
        parts = [f"{count}x{denomination}" for denomination, count in self.notes if count]
        return ", ".join(parts) or "no notes"


# =============================================================================
# PIN Verification Value Object
# =============================================================================


@dataclass(frozen=True)
class PinVerification:
    """
    Answer of the PIN verification service.

    Attributes:
        ok: Whether the PIN was accepted.
        balance: Starting balance of the account when accepted.
    """

    ok: bool
    balance: int = 0

    @classmethod
    def verified(cls, balance: int) -> PinVerification:
        """Create an accepted verification."""
        return cls(ok=True, balance=balance)

    @classmethod
    def rejected(cls) -> PinVerification:
        """Create a rejected verification."""
        return cls(ok=False)


# =============================================================================
# Terminal Result Value Object
# =============================================================================


@dataclass(frozen=True)
class TerminalResult:
    """
    Result of a key event processed by the terminal.

    Attributes:
        success: Whether the event was applied.
        outcome: What the event signalled.
        message: Human-readable message.
        amount: Withdrawn amount, for successful withdrawals.
        bundle: Notes dispensed, for successful withdrawals.
        details: Additional error details.
    """

    success: bool
    outcome: TerminalOutcome
    message: str = ""
    amount: int = 0
    bundle: Optional[NoteBundle] = None
    details: tuple[tuple[str, Any], ...] = field(default_factory=tuple)

    @classmethod
    def accepted(cls, outcome: TerminalOutcome, message: str = "") -> TerminalResult:
        """Create a result for input that was applied."""
        return cls(success=True, outcome=outcome, message=message)

    @classmethod
    def withdrawn(cls, amount: int, bundle: NoteBundle, message: str) -> TerminalResult:
        """Create a result for a successful withdrawal."""
        return cls(
            success=True,
            outcome=TerminalOutcome.WITHDRAWAL_SUCCEEDED,
            message=message,
            amount=amount,
            bundle=bundle,
        )

    @classmethod
    def failed(cls, error: TerminalError) -> TerminalResult:
        """Create a failed result from a terminal error."""
        return cls(
            success=False,
            outcome=error.outcome,
            message=error.message,
            details=tuple(error.details.items()),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API response."""
        result: dict[str, Any] = {
            "success": self.success,
            "outcome": self.outcome.value,
            "message": self.message,
        }
        if self.amount:
            result["amount"] = self.amount
        if self.bundle is not None:
            result["notes"] = self.bundle.to_dict()
        if self.details:
            result["details"] = dict(self.details)
        return result
