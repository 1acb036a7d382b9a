"""
Note Allocator - Turns a withdrawal amount into a bundle of notes.

Works greedily from the largest note down. The first pass caps every
denomination at ``amount / total notes in the cassettes``; when that
leaves a remainder, a second uncapped pass makes up the shortfall with
whatever notes are left.
"""

from __future__ import annotations

from dataclasses import dataclass

from atm_terminal.core.exceptions import (
    DenominationMismatchError,
    InsufficientCashError,
    InvalidAmountError,
)
from atm_terminal.core.value_objects import NoteBundle
from .inventory import Inventory


@dataclass(frozen=True)
class Allocation:
    """
    Notes chosen for one withdrawal.

    Attributes:
        bundle: Notes to hand out.
        remaining: Inventory left once the bundle is handed out.
    """

    bundle: NoteBundle
    remaining: Inventory


def _greedy_pass(
    amount: int,
    inventory: Inventory,
    taken: dict[int, int],
    cap_amount: int = 0,
    cap_notes: int = 0,
) -> int:
    """
    Take notes largest first until nothing more fits.

    When ``cap_notes`` is set, a denomination stops once its count of
    taken notes reaches ``cap_amount / cap_notes``. The comparison is done
    on integers so the real-valued cap is honoured exactly.

    Returns:
        Amount still to make up.
    """
    for denomination in inventory.denominations:
        while amount >= denomination and inventory.count(denomination) > 0:
            if cap_notes and taken[denomination] * cap_notes >= cap_amount:
                break
            inventory.take(denomination)
            taken[denomination] += 1
            amount -= denomination
    return amount


def allocate(amount: int, inventory: Inventory) -> Allocation:
    """
    Choose the notes for a withdrawal.

    The given inventory is never modified; the notes are taken from a
    working copy returned as ``Allocation.remaining``.

    Args:
        amount: Amount to withdraw.
        inventory: Notes currently in the terminal.

    Returns:
        Allocation with the bundle and the inventory after dispensing.

    Raises:
        InvalidAmountError: If amount is not positive.
        InsufficientCashError: If amount exceeds the cash in the terminal.
        DenominationMismatchError: If the notes left cannot make up amount.
    """
    if amount <= 0:
        raise InvalidAmountError(f"Invalid withdrawal amount: {amount}")
    if not inventory.has_at_least(amount):
        raise InsufficientCashError(required=amount, available=inventory.total_value())

    working = inventory.copy()
    taken = {denomination: 0 for denomination in working.denominations}

    remaining = _greedy_pass(
        amount,
        working,
        taken,
        cap_amount=amount,
        cap_notes=working.total_notes(),
    )
    if remaining != 0:
        remaining = _greedy_pass(remaining, working, taken)

    if remaining != 0:
        raise DenominationMismatchError(amount=amount, remaining=remaining)

    return Allocation(bundle=NoteBundle.from_counts(taken), remaining=working)
