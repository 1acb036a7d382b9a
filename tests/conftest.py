"""
Pytest configuration for ATM terminal tests.

Adds the repository root to sys.path so that tests can import the
package without installing it, and provides shared fixtures.
"""

import sys
from pathlib import Path

import pytest


# Add the repository root to sys.path for proper imports
root_path = Path(__file__).parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))

from atm_terminal.core.value_objects import PinVerification  # noqa: E402
from atm_terminal.domain.inventory import Inventory  # noqa: E402
from atm_terminal.domain.session_state_machine import SessionStateMachine  # noqa: E402


STARTING_STOCK = {20: 7, 10: 15, 5: 4}


class FakePinVerifier:
    """PIN verifier answering from a fixed PIN -> balance table."""

    def __init__(self, accounts: dict[str, int]) -> None:
        self.accounts = accounts
        self.calls: list[str] = []

    async def verify(self, pin: str) -> PinVerification:
        self.calls.append(pin)
        if pin in self.accounts:
            return PinVerification.verified(self.accounts[pin])
        return PinVerification.rejected()


@pytest.fixture
def inventory():
    """Inventory loaded with the default starting stock."""
    return Inventory(STARTING_STOCK)


@pytest.fixture
def verifier():
    """Verifier accepting PIN 1111 with a balance of 220."""
    return FakePinVerifier({"1111": 220, "2222": 50})


@pytest.fixture
def state_machine(inventory, verifier):
    """Fresh session state machine with a 100 overdraft."""
    return SessionStateMachine(inventory, verifier, overdraft_limit=100)
