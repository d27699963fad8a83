"""Greedy transfer planning from net balances."""

import logging
from decimal import Decimal

from .models import Balance, SettlementAction
from .money import from_cents, is_settled, to_cents

logger = logging.getLogger(__name__)


def plan_transfers(
    balances: list[Balance], *, tolerance: Decimal = Decimal("0")
) -> list[SettlementAction]:
    """
    Match debtors with creditors to settle all balances.

    Steps:
    1. Drop balances within the tolerance band (already settled)
    2. Order debtors by largest debt and creditors by largest credit
    3. Repeatedly pay the current creditor from the current debtor,
       as much as both allow
    4. Move on from whichever side has been settled (possibly both)

    This is a heuristic that tends toward few transfers; it does not
    guarantee the minimum number. Equal balances keep their input order.

    Args:
        balances: Net balances, expected to sum to zero
        tolerance: Amounts within this distance from zero count as settled

    Returns:
        Ordered list of transfers

    Raises:
        ValueError: If tolerance is negative
    """
    if tolerance < 0:
        raise ValueError(f"Tolerance must not be negative, got {tolerance}")

    tolerance_cents = to_cents(tolerance)

    # Remaining amounts are tracked as mutable [participant_id, cents] pairs
    debtors = [
        [b.participant_id, to_cents(b.amount)]
        for b in balances
        if to_cents(b.amount) < -tolerance_cents
    ]
    creditors = [
        [b.participant_id, to_cents(b.amount)]
        for b in balances
        if to_cents(b.amount) > tolerance_cents
    ]
    debtors.sort(key=lambda entry: entry[1])
    creditors.sort(key=lambda entry: -entry[1])

    actions: list[SettlementAction] = []
    i = 0
    j = 0

    while i < len(debtors) and j < len(creditors):
        debtor = debtors[i]
        creditor = creditors[j]

        settled = min(-debtor[1], creditor[1])
        if settled > tolerance_cents:
            actions.append(
                SettlementAction(
                    from_id=debtor[0], to_id=creditor[0], amount=from_cents(settled)
                )
            )

        debtor[1] += settled
        creditor[1] -= settled

        if is_settled(debtor[1], tolerance_cents):
            i += 1
        if is_settled(creditor[1], tolerance_cents):
            j += 1

    leftover = debtors[i:] + creditors[j:]
    if leftover:
        logger.warning(
            "Balances do not sum to zero; left unsettled: "
            + ", ".join(f"{pid}={from_cents(cents)}" for pid, cents in leftover)
        )

    return actions
