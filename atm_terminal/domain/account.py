"""
Account - Balance and withdrawal totals for the logged-in user.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from atm_terminal.core.value_objects import NoteBundle


@dataclass
class Account:
    """
    Account of the user in the current session.

    Created on a successful login and discarded with the session. The
    balance may go below zero, down to ``-overdraft_limit``.

    Attributes:
        balance: Current balance.
        overdraft_limit: Amount that may be withdrawn beyond a zero balance.
        initial_balance: Balance reported at login.
        withdrawn_total: Sum of everything withdrawn this session.
        withdrawn_notes: Every note handed out this session.
    """

    balance: int = 0
    overdraft_limit: int = 0
    initial_balance: int = 0
    withdrawn_total: int = 0
    withdrawn_notes: NoteBundle = field(default_factory=NoteBundle)

    def __post_init__(self) -> None:
        """Validate the overdraft limit."""
        if self.overdraft_limit < 0:
            raise ValueError("Overdraft limit cannot be negative")

    @classmethod
    def open(
        cls,
        balance: int,
        overdraft_limit: int,
        denominations: Iterable[int] = (),
    ) -> Account:
        """
        Open the account for a freshly verified user.

        Args:
            balance: Balance returned by the PIN service.
            overdraft_limit: Overdraft allowed for the session.
            denominations: Note values to track in the withdrawal totals.

        Returns:
            Account instance.
        """
        return cls(
            balance=balance,
            overdraft_limit=overdraft_limit,
            initial_balance=balance,
            withdrawn_notes=NoteBundle.empty(denominations),
        )

    @property
    def available_to_withdraw(self) -> int:
        """Get balance plus overdraft."""
        return self.balance + self.overdraft_limit

    @property
    def in_overdraft(self) -> bool:
        """Check if the balance is below zero."""
        return self.balance < 0

    @property
    def overdraft_used(self) -> int:
        """
        Get the overdraft figure shown on the status line.

        Computed as everything withdrawn minus the balance at login, the
        way the terminal has always displayed it. Zero while not in
        overdraft.
        """
        if not self.in_overdraft:
            return 0
        return self.withdrawn_total - self.initial_balance

    def withdraw(self, bundle: NoteBundle) -> None:
        """
        Record a bundle of notes handed to the user.

        The caller has already checked the bundle against
        ``available_to_withdraw``.

        Args:
            bundle: Notes dispensed.
        """
        amount = bundle.total_value
        self.balance -= amount
        self.withdrawn_total += amount
        self.withdrawn_notes = self.withdrawn_notes + bundle

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API responses."""
        result = {
            "balance": self.balance,
            "available": self.available_to_withdraw,
            "withdrawn_total": self.withdrawn_total,
            "withdrawn_notes": self.withdrawn_notes.to_dict(),
        }
        if self.in_overdraft:
            result["overdraft_used"] = self.overdraft_used
        return result
