"""
Unit tests for core value objects and exceptions.
"""

import pytest

from atm_terminal.core.exceptions import (
    DenominationMismatchError,
    InputRejectedError,
    InsufficientBalanceError,
    InvalidPinError,
    TerminalError,
    WithdrawalError,
)
from atm_terminal.core.value_objects import (
    NoteBundle,
    PinVerification,
    TerminalOutcome,
    TerminalResult,
)


# =============================================================================
# NoteBundle Tests
# =============================================================================


class TestNoteBundle:
    """Tests for NoteBundle value object."""

    def test_from_counts_orders_largest_first(self):
        """Test denominations are ordered descending."""
        bundle = NoteBundle.from_counts({5: 1, 20: 2, 10: 0})
        assert bundle.denominations == (20, 10, 5)
        assert bundle.notes == ((20, 2), (10, 0), (5, 1))

    def test_total_value_and_note_count(self):
        """Test cash value and number of notes."""
        bundle = NoteBundle.from_counts({20: 3, 10: 1, 5: 2})
        assert bundle.total_value == 80
        assert bundle.note_count == 6

    def test_count_missing_denomination(self):
        """Test counting a denomination not in the bundle."""
        bundle = NoteBundle.from_counts({20: 1})
        assert bundle.count(20) == 1
        assert bundle.count(50) == 0

    def test_empty(self):
        """Test an empty bundle keeps its denominations."""
        bundle = NoteBundle.empty((20, 10, 5))
        assert bundle.total_value == 0
        assert bundle.as_dict() == {20: 0, 10: 0, 5: 0}

    def test_addition_is_componentwise(self):
        """Test adding two bundles."""
        first = NoteBundle.from_counts({20: 1, 10: 2, 5: 0})
        second = NoteBundle.from_counts({20: 2, 5: 1})
        assert (first + second).as_dict() == {20: 3, 10: 2, 5: 1}

    def test_bundles_compare_by_value(self):
        """Test equality is by content."""
        assert NoteBundle.from_counts({20: 1, 5: 2}) == NoteBundle.from_counts({5: 2, 20: 1})

    def test_negative_count_raises(self):
        """Test that a negative count raises error."""
        with pytest.raises(ValueError):
            NoteBundle.from_counts({20: -1})

    def test_non_positive_denomination_raises(self):
        """Test that a zero denomination raises error."""
        with pytest.raises(ValueError):
            NoteBundle.from_counts({0: 1})

    def test_to_dict(self):
        """Test converting NoteBundle to dict."""
        bundle = NoteBundle.from_counts({20: 1, 5: 2})
        assert bundle.to_dict() == {"20": 1, "5": 2}

    def test_str(self):
        """Test NoteBundle string representation."""
        assert str(NoteBundle.from_counts({20: 4, 10: 2, 5: 0})) == "4x20, 2x10"
        assert str(NoteBundle.empty((20,))) == "no notes"


# =============================================================================
# PinVerification Tests
# =============================================================================


class TestPinVerification:
    """Tests for PinVerification value object."""

    def test_verified(self):
        """Test an accepted verification carries the balance."""
        verification = PinVerification.verified(250)
        assert verification.ok is True
        assert verification.balance == 250

    def test_rejected(self):
        """Test a rejected verification."""
        assert PinVerification.rejected().ok is False


# =============================================================================
# TerminalResult Tests
# =============================================================================


class TestTerminalResult:
    """Tests for TerminalResult value object."""

    def test_withdrawn(self):
        """Test creating a withdrawal result."""
        bundle = NoteBundle.from_counts({20: 1})
        result = TerminalResult.withdrawn(20, bundle, "Withdrawn: 20")
        assert result.success is True
        assert result.outcome is TerminalOutcome.WITHDRAWAL_SUCCEEDED
        assert result.bundle == bundle

    def test_failed_from_error(self):
        """Test creating a failed result from an error."""
        error = InsufficientBalanceError(required=500, available=320)
        result = TerminalResult.failed(error)
        assert result.success is False
        assert result.outcome is TerminalOutcome.INSUFFICIENT_BALANCE
        assert result.message == "Not enough in Account!"
        assert dict(result.details) == {"required": 500, "available": 320}

    def test_to_dict(self):
        """Test converting TerminalResult to dict."""
        bundle = NoteBundle.from_counts({20: 1, 5: 1})
        d = TerminalResult.withdrawn(25, bundle, "Withdrawn: 25").to_dict()
        assert d["success"] is True
        assert d["outcome"] == "withdrawal_succeeded"
        assert d["amount"] == 25
        assert d["notes"] == {"20": 1, "5": 1}


# =============================================================================
# Exception Tests
# =============================================================================


class TestExceptions:
    """Tests for custom exceptions."""

    def test_terminal_error(self):
        """Test TerminalError creation and to_dict."""
        error = TerminalError("Test error", code="TEST_001")
        assert error.message == "Test error"
        assert error.code == "TEST_001"

        d = error.to_dict()
        assert d["error"] == "TEST_001"
        assert d["message"] == "Test error"

    def test_code_defaults_to_class_name(self):
        """Test the default error code."""
        assert InvalidPinError().code == "InvalidPinError"

    def test_input_rejected_messages(self):
        """Test insertion and deletion rejections."""
        assert InputRejectedError.insertion().message == "No more can be inserted!!"
        assert InputRejectedError.deletion().message == "No more can be deleted!!"
        assert InputRejectedError.insertion().outcome is TerminalOutcome.INPUT_REJECTED

    def test_denomination_mismatch_is_withdrawal_error(self):
        """Test DenominationMismatchError is a WithdrawalError."""
        error = DenominationMismatchError(amount=30, remaining=10)
        assert isinstance(error, WithdrawalError)
        assert error.details == {"amount": 30, "remaining": 10}
