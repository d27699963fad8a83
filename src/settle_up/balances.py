"""Net balance computation from a list of shared expenses."""

import logging

from .exceptions import (
    DuplicateParticipantError,
    InvalidExpenseError,
    UnknownParticipantError,
)
from .models import Balance, Expense, Participant
from .money import from_cents, split_cents, to_cents

logger = logging.getLogger(__name__)


def compute_balances(
    participants: list[Participant],
    expenses: list[Expense],
    *,
    strict: bool = True,
) -> list[Balance]:
    """
    Compute each participant's signed net balance.

    The payer of an expense is credited the full amount and every involved
    participant is debited their share (the payer included, if involved).
    Expenses with no involved participants are skipped.

    Args:
        participants: Group members, each id unique
        expenses: Expenses to settle
        strict: Raise on ids outside the participant set instead of creating
                a balance entry for them

    Returns:
        One balance per participant, in participant order. In non-strict mode
        unknown ids follow, in the order they were first seen.

    Raises:
        DuplicateParticipantError: If a participant id is repeated
        InvalidExpenseError: If an expense amount is not positive
        UnknownParticipantError: If strict and an expense references an
                                 unknown participant
    """
    ledger: dict[str, int] = {}
    for participant in participants:
        if participant.id in ledger:
            raise DuplicateParticipantError(participant.id)
        ledger[participant.id] = 0

    known_ids = set(ledger)

    for expense in expenses:
        if expense.amount <= 0:
            raise InvalidExpenseError(
                expense.id,
                f"Expense {expense.id} ({expense.title!r}) must have a positive "
                f"amount, got {expense.amount}",
            )

        if not expense.involved_ids:
            logger.debug(f"Skipping expense {expense.id}: nobody is involved")
            continue

        _check_known(expense, known_ids, strict)

        amount_cents = to_cents(expense.amount)
        ledger[expense.payer_id] = ledger.get(expense.payer_id, 0) + amount_cents

        shares = split_cents(amount_cents, len(expense.involved_ids))
        for participant_id, share in zip(expense.involved_ids, shares):
            ledger[participant_id] = ledger.get(participant_id, 0) - share

    return [
        Balance(participant_id=participant_id, amount=from_cents(cents))
        for participant_id, cents in ledger.items()
    ]


def _check_known(expense: Expense, known_ids: set[str], strict: bool) -> None:
    """Fault or warn on ids that are not part of the group."""
    for participant_id in [expense.payer_id, *expense.involved_ids]:
        if participant_id in known_ids:
            continue
        if strict:
            raise UnknownParticipantError(participant_id, expense.id)
        logger.warning(
            f"Expense {expense.id} references unknown participant "
            f"{participant_id!r}; adding a balance entry for it"
        )
