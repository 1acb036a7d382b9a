"""
Configuration module for the ATM terminal.

This module provides centralized constants for the cash cassettes, the
account rules, the keypad and the external services the terminal talks to.
"""

from typing import Final, Optional


# =============================================================================
# Cash Configuration
# =============================================================================

DENOMINATIONS: Final[tuple[int, ...]] = (20, 10, 5)

STARTING_NOTES: Final[dict[int, int]] = {
    20: 7,
    10: 15,
    5: 4,
}

CURRENCY_SYMBOL: Final[str] = "£"


# =============================================================================
# Account Configuration
# =============================================================================

OVERDRAFT_LIMIT: Final[int] = 100


# =============================================================================
# Keypad / Display Configuration
# =============================================================================

PIN_LENGTH: Final[int] = 4
AMOUNT_LENGTH: Final[int] = 5
MESSAGE_DURATION: Final[float] = 2.0  # seconds


# =============================================================================
# External Services Configuration
# =============================================================================

PIN_SERVICE_URL: Final[str] = "https://frontend-challenge.screencloud-michael.now.sh/api/pin/"
PIN_SERVICE_TIMEOUT: Final[float] = 5.0
WS_URL: Final[str] = "ws://localhost:8005/ws"
LOKI_URL: Final[Optional[str]] = None
LOG_FILE: Final[Optional[str]] = None


# =============================================================================
# Display Messages
# =============================================================================

MSG_INSERTION_ERROR: Final[str] = "No more can be inserted!!"
MSG_DELETION_ERROR: Final[str] = "No more can be deleted!!"
MSG_PIN_CORRECT: Final[str] = "PIN correct!"
MSG_PIN_INCORRECT: Final[str] = "PIN incorrect!"
MSG_WITHDRAWN: Final[str] = "Withdrawn: {amount}"
MSG_INSUFFICIENT_BALANCE: Final[str] = "Not enough in Account!"
MSG_INSUFFICIENT_CASH: Final[str] = "Not enough notes present!"
MSG_NON_DIVISIBLE: Final[str] = "Can't dispense that denomination!!"
MSG_DENOMINATION_MISMATCH: Final[str] = "Can't make up that amount from the notes left!"
MSG_INVALID_AMOUNT: Final[str] = "Invalid amount!"
