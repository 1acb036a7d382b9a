"""
Session State Machine - Drives a user session from PIN entry to withdrawals.

The session is either authenticating (collecting a PIN) or withdrawing
(collecting amounts). Each state carries its own keypad buffer. Errors are
raised as typed TerminalError subclasses; turning them into display
messages is left to the application layer.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional, Union

from atm_terminal.configs import (
    AMOUNT_LENGTH,
    MSG_PIN_CORRECT,
    MSG_WITHDRAWN,
    OVERDRAFT_LIMIT,
    PIN_LENGTH,
)
from atm_terminal.core.exceptions import (
    InputRejectedError,
    InsufficientBalanceError,
    InsufficientCashError,
    InvalidAmountError,
    InvalidPinError,
    NonDivisibleAmountError,
)
from atm_terminal.core.interfaces import PinVerifier
from atm_terminal.core.value_objects import TerminalOutcome, TerminalResult
from atm_terminal.loggers import logger
from .account import Account
from .allocator import allocate
from .inventory import Inventory


# =============================================================================
# Session States
# =============================================================================


class SessionStage(Enum):
    """Stages of a terminal session."""

    AUTHENTICATING = auto()  # Collecting the PIN
    WITHDRAWING = auto()     # Logged in, collecting amounts


@dataclass
class Authenticating:
    """Waiting for a PIN. ``buffer`` holds the digits typed so far."""

    buffer: str = ""

    stage = SessionStage.AUTHENTICATING


@dataclass
class Withdrawing:
    """Logged in. ``buffer`` holds the amount typed so far."""

    buffer: str = ""

    stage = SessionStage.WITHDRAWING


SessionState = Union[Authenticating, Withdrawing]


# =============================================================================
# Session State Machine
# =============================================================================


class SessionStateMachine:
    """
    State machine for a terminal session.

    Owns the keypad buffers, the account opened at login and the note
    inventory. Key events must be fed one at a time; ``confirm`` must
    complete before the next event is handled.
    """

    def __init__(
        self,
        inventory: Inventory,
        verifier: PinVerifier,
        overdraft_limit: int = OVERDRAFT_LIMIT,
        pin_length: int = PIN_LENGTH,
        amount_length: int = AMOUNT_LENGTH,
    ) -> None:
        """
        Initialize the state machine.

        Args:
            inventory: Notes loaded in the terminal.
            verifier: Service checking PINs.
            overdraft_limit: Overdraft granted to every account.
            pin_length: Maximum PIN digits.
            amount_length: Maximum amount digits.
        """
        if overdraft_limit < 0:
            raise ValueError("Overdraft limit cannot be negative")

        self._inventory = inventory
        self._verifier = verifier
        self._overdraft_limit = overdraft_limit
        self._capacity = {
            SessionStage.AUTHENTICATING: pin_length,
            SessionStage.WITHDRAWING: amount_length,
        }
        self._state: SessionState = Authenticating()
        self._account: Optional[Account] = None

    @property
    def state(self) -> SessionState:
        """Get the current session state."""
        return self._state

    @property
    def stage(self) -> SessionStage:
        """Get the current session stage."""
        return self._state.stage

    @property
    def buffer(self) -> str:
        """Get the digits typed in the current state."""
        return self._state.buffer

    @property
    def account(self) -> Optional[Account]:
        """Get the account, once logged in."""
        return self._account

    @property
    def inventory(self) -> Inventory:
        """Get the note inventory."""
        return self._inventory

    @property
    def is_authenticated(self) -> bool:
        """Check if a PIN has been verified."""
        return isinstance(self._state, Withdrawing)

    @property
    def status_text(self) -> str:
        """Render the persistent status line for the current state."""
        if isinstance(self._state, Authenticating):
            return "Pin: " + "*" * len(self._state.buffer)

        account = self._account
        text = (
            f"Balance: {account.available_to_withdraw} | "
            f"Amount to withdraw: {self._state.buffer}"
        )
        if account.in_overdraft:
            text = f"Overdraft: {account.overdraft_used} | {text}"
        return text

    # =========================================================================
    # Keypad Input
    # =========================================================================

    def press_digit(self, digit: str) -> str:
        """
        Append a digit to the active buffer.

        Args:
            digit: Single decimal digit.

        Returns:
            The buffer after the digit was added.

        Raises:
            InputRejectedError: If the key is not a digit or the buffer is full.
        """
        if len(digit) != 1 or digit not in string.digits:
            raise InputRejectedError.insertion()
        if len(self._state.buffer) >= self._capacity[self.stage]:
            raise InputRejectedError.insertion()

        self._state.buffer += digit
        return self._state.buffer

    def backspace(self) -> str:
        """
        Remove the last digit of the active buffer.

        Returns:
            The buffer after the digit was removed.

        Raises:
            InputRejectedError: If the buffer is empty.
        """
        if not self._state.buffer:
            raise InputRejectedError.deletion()

        self._state.buffer = self._state.buffer[:-1]
        return self._state.buffer

    async def confirm(self) -> TerminalResult:
        """
        Submit the active buffer.

        Authenticating: verify the PIN and log in.
        Withdrawing: validate the amount and dispense notes.
        The buffer is cleared whatever the outcome.

        Returns:
            TerminalResult for a successful login or withdrawal.

        Raises:
            TerminalError: For every rejected PIN or withdrawal.
        """
        entered = self._state.buffer
        self._state.buffer = ""

        if isinstance(self._state, Authenticating):
            return await self._login(entered)
        return self._withdraw(entered)

    # =========================================================================
    # Transitions
    # =========================================================================

    async def _login(self, pin: str) -> TerminalResult:
        """Verify a PIN and move to the withdrawing state."""
        logger.info(f"Verifying PIN ({len(pin)} digits)")

        verification = await self._verifier.verify(pin)
        if not verification.ok:
            logger.warning("PIN rejected")
            raise InvalidPinError()

        self._account = Account.open(
            verification.balance,
            self._overdraft_limit,
            self._inventory.denominations,
        )
        self._state = Withdrawing()

        logger.info(f"Logged in. Balance: {verification.balance}")
        return TerminalResult.accepted(TerminalOutcome.PIN_ACCEPTED, MSG_PIN_CORRECT)

    def _withdraw(self, entered: str) -> TerminalResult:
        """Validate an amount, allocate notes and record the withdrawal."""
        amount = int(entered) if entered else 0
        if amount <= 0:
            raise InvalidAmountError()

        account = self._account
        logger.info(f"Withdrawal requested: {amount}")

        if amount > account.available_to_withdraw:
            raise InsufficientBalanceError(
                required=amount,
                available=account.available_to_withdraw,
            )

        smallest = self._inventory.smallest_denomination
        if amount % smallest != 0:
            raise NonDivisibleAmountError(amount=amount, denomination=smallest)

        if not self._inventory.has_at_least(amount):
            raise InsufficientCashError(
                required=amount,
                available=self._inventory.total_value(),
            )

        allocation = allocate(amount, self._inventory)

        self._inventory.dispense(allocation.bundle)
        account.withdraw(allocation.bundle)

        logger.info(
            f"Dispensed {amount}: {allocation.bundle}. "
            f"Balance: {account.balance}, cash left: {self._inventory.total_value()}"
        )
        return TerminalResult.withdrawn(
            amount,
            allocation.bundle,
            MSG_WITHDRAWN.format(amount=amount),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert session state to dictionary for API responses."""
        result: dict[str, Any] = {
            "stage": self.stage.name.lower(),
            "status": self.status_text,
            "inventory": self._inventory.to_dict(),
        }
        if self._account is not None:
            result["account"] = self._account.to_dict()
        return result
