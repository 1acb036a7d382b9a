"""
Custom exceptions for the ATM terminal.

Provides a hierarchy of typed exceptions for better error handling
and more informative error messages. Every terminal error knows the
outcome it signals to the user.
"""

from typing import Any, ClassVar, Optional

from atm_terminal.configs import (
    MSG_DELETION_ERROR,
    MSG_DENOMINATION_MISMATCH,
    MSG_INSERTION_ERROR,
    MSG_INSUFFICIENT_BALANCE,
    MSG_INSUFFICIENT_CASH,
    MSG_INVALID_AMOUNT,
    MSG_NON_DIVISIBLE,
    MSG_PIN_INCORRECT,
)
from .value_objects import TerminalOutcome


class TerminalError(Exception):
    """Base exception for all terminal errors."""

    outcome: ClassVar[TerminalOutcome] = TerminalOutcome.INPUT_REJECTED

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            code: Optional error code for programmatic handling.
            details: Optional additional error details.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "outcome": self.outcome.value,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# Input Errors
# =============================================================================


class InputRejectedError(TerminalError):
    """Keypad input could not be applied to the buffer."""

    outcome = TerminalOutcome.INPUT_REJECTED

    @classmethod
    def insertion(cls) -> "InputRejectedError":
        """Buffer full, bad key, or a message is showing."""
        return cls(MSG_INSERTION_ERROR)

    @classmethod
    def deletion(cls) -> "InputRejectedError":
        """Buffer empty, or a message is showing."""
        return cls(MSG_DELETION_ERROR)


# =============================================================================
# Authentication Errors
# =============================================================================


class InvalidPinError(TerminalError):
    """The PIN verification service rejected the PIN."""

    outcome = TerminalOutcome.INVALID_PIN

    def __init__(self, message: str = MSG_PIN_INCORRECT, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class PinServiceError(TerminalError):
    """The PIN verification service could not be reached."""

    outcome = TerminalOutcome.INVALID_PIN


# =============================================================================
# Withdrawal Errors
# =============================================================================


class WithdrawalError(TerminalError):
    """Base exception for withdrawal errors."""

    pass


class InvalidAmountError(WithdrawalError):
    """Requested amount could not be parsed or is not positive."""

    outcome = TerminalOutcome.INVALID_AMOUNT

    def __init__(self, message: str = MSG_INVALID_AMOUNT, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class InsufficientBalanceError(WithdrawalError):
    """Requested amount exceeds balance plus overdraft."""

    outcome = TerminalOutcome.INSUFFICIENT_BALANCE

    def __init__(
        self,
        message: str = MSG_INSUFFICIENT_BALANCE,
        required: int = 0,
        available: int = 0,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.details["required"] = required
        self.details["available"] = available


class NonDivisibleAmountError(WithdrawalError):
    """Requested amount is not a multiple of the smallest note."""

    outcome = TerminalOutcome.NON_DIVISIBLE_AMOUNT

    def __init__(
        self,
        message: str = MSG_NON_DIVISIBLE,
        amount: int = 0,
        denomination: int = 0,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.details["amount"] = amount
        self.details["denomination"] = denomination


class InsufficientCashError(WithdrawalError):
    """Requested amount exceeds the cash held by the terminal."""

    outcome = TerminalOutcome.INSUFFICIENT_CASH

    def __init__(
        self,
        message: str = MSG_INSUFFICIENT_CASH,
        required: int = 0,
        available: int = 0,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.details["required"] = required
        self.details["available"] = available


class DenominationMismatchError(WithdrawalError):
    """The remaining notes cannot make up the requested amount."""

    outcome = TerminalOutcome.DENOMINATION_MISMATCH

    def __init__(
        self,
        message: str = MSG_DENOMINATION_MISMATCH,
        amount: int = 0,
        remaining: int = 0,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.details["amount"] = amount
        self.details["remaining"] = remaining


# =============================================================================
# Inventory Errors
# =============================================================================


class InsufficientNotesError(TerminalError):
    """No note of the requested denomination is left."""

    outcome = TerminalOutcome.DENOMINATION_MISMATCH

    def __init__(self, message: str, denomination: int = 0, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.details["denomination"] = denomination
