"""Settlement engine: expenses -> balances -> transfers."""

import logging
from decimal import Decimal

from .balances import compute_balances
from .models import Expense, Participant, SettlementResult
from .planner import plan_transfers

logger = logging.getLogger(__name__)


def calculate_settlement(
    participants: list[Participant],
    expenses: list[Expense],
    *,
    strict: bool = True,
    tolerance: Decimal = Decimal("0"),
) -> SettlementResult:
    """
    Compute net balances and the transfer plan that settles them.

    This is a pure function: the same inputs always give the same result.

    Args:
        participants: Group members
        expenses: Shared expenses
        strict: Fault on unknown participant ids (see compute_balances)
        tolerance: Settled band around zero (see plan_transfers)

    Returns:
        Balances sorted largest creditor first, plus the ordered transfers
    """
    balances = compute_balances(participants, expenses, strict=strict)
    actions = plan_transfers(balances, tolerance=tolerance)

    logger.debug(
        f"Settled {len(expenses)} expenses among {len(balances)} participants "
        f"with {len(actions)} transfers"
    )

    return SettlementResult(
        balances=sorted(balances, key=lambda b: b.amount, reverse=True),
        actions=actions,
    )
