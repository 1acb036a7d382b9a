"""
Core module - Foundation layer with no external dependencies.

Contains:
- Exceptions
- Interfaces (Protocols)
- Value Objects
"""

from .exceptions import (
    TerminalError,
    InputRejectedError,
    InvalidPinError,
    PinServiceError,
    WithdrawalError,
    InvalidAmountError,
    InsufficientBalanceError,
    NonDivisibleAmountError,
    InsufficientCashError,
    DenominationMismatchError,
    InsufficientNotesError,
)
from .interfaces import (
    PinVerifier,
    Display,
    StatsPanel,
)
from .value_objects import (
    NoteBundle,
    PinVerification,
    TerminalOutcome,
    TerminalResult,
)


__all__ = [
    # Exceptions
    "TerminalError",
    "InputRejectedError",
    "InvalidPinError",
    "PinServiceError",
    "WithdrawalError",
    "InvalidAmountError",
    "InsufficientBalanceError",
    "NonDivisibleAmountError",
    "InsufficientCashError",
    "DenominationMismatchError",
    "InsufficientNotesError",
    # Interfaces
    "PinVerifier",
    "Display",
    "StatsPanel",
    # Value Objects
    "NoteBundle",
    "PinVerification",
    "TerminalOutcome",
    "TerminalResult",
]
