"""
Domain layer - Business logic and domain models.

Contains:
- Note inventory and allocation
- Account rules
- Session state machine
"""

from .account import Account
from .allocator import (
    Allocation,
    allocate,
)
from .inventory import Inventory
from .session_state_machine import (
    SessionStateMachine,
    SessionStage,
    SessionState,
    Authenticating,
    Withdrawing,
)


__all__ = [
    # Cash
    "Inventory",
    "Allocation",
    "allocate",
    # Account
    "Account",
    # Session
    "SessionStateMachine",
    "SessionStage",
    "SessionState",
    "Authenticating",
    "Withdrawing",
]
