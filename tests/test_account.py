"""
Unit tests for the session account.
"""

import pytest

from atm_terminal.core.value_objects import NoteBundle
from atm_terminal.domain.account import Account


DENOMINATIONS = (20, 10, 5)


class TestAccount:
    """Tests for Account."""

    def test_open(self):
        """Test opening an account at login."""
        account = Account.open(220, 100, DENOMINATIONS)
        assert account.balance == 220
        assert account.initial_balance == 220
        assert account.withdrawn_total == 0
        assert account.withdrawn_notes.as_dict() == {20: 0, 10: 0, 5: 0}

    def test_available_includes_overdraft(self):
        """Test balance plus overdraft."""
        assert Account.open(50, 100).available_to_withdraw == 150

    def test_withdraw_into_overdraft(self):
        """Test 140 from a balance of 50 with a 100 overdraft."""
        account = Account.open(50, 100, DENOMINATIONS)
        account.withdraw(NoteBundle.from_counts({20: 6, 10: 2, 5: 0}))

        assert account.balance == -90
        assert account.in_overdraft
        assert account.available_to_withdraw == 10
        assert account.overdraft_used == 90

    def test_withdraw_accumulates(self):
        """Test totals grow across withdrawals."""
        account = Account.open(300, 100, DENOMINATIONS)
        account.withdraw(NoteBundle.from_counts({20: 1, 5: 1}))
        account.withdraw(NoteBundle.from_counts({20: 1, 10: 1}))

        assert account.balance == 245
        assert account.withdrawn_total == 55
        assert account.withdrawn_notes.as_dict() == {20: 2, 10: 1, 5: 1}

    def test_overdraft_used_zero_when_in_credit(self):
        """Test no overdraft figure while the balance is positive."""
        account = Account.open(100, 100, DENOMINATIONS)
        account.withdraw(NoteBundle.from_counts({20: 1}))
        assert not account.in_overdraft
        assert account.overdraft_used == 0

    def test_overdraft_used_counts_from_initial_balance(self):
        """Test the overdraft figure across several withdrawals."""
        account = Account.open(20, 100, DENOMINATIONS)
        account.withdraw(NoteBundle.from_counts({20: 2}))
        account.withdraw(NoteBundle.from_counts({10: 1}))
        assert account.balance == -30
        assert account.overdraft_used == 50 - 20

    def test_negative_overdraft_raises(self):
        """Test that a negative overdraft limit raises error."""
        with pytest.raises(ValueError):
            Account.open(100, -1)

    def test_to_dict(self):
        """Test converting Account to dict."""
        account = Account.open(10, 100, DENOMINATIONS)
        account.withdraw(NoteBundle.from_counts({20: 1}))
        d = account.to_dict()
        assert d["balance"] == -10
        assert d["available"] == 90
        assert d["overdraft_used"] == 10
        assert d["withdrawn_notes"] == {"20": 1, "10": 0, "5": 0}
