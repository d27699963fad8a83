"""Spending statistics and the optional AI-written settlement summary.

Nothing in this module feeds back into the settlement itself: it only reads
participants, expenses and a finished SettlementResult.
"""

import logging
from decimal import Decimal
from typing import Any

from openai import OpenAIError

from .clients.openai_client import SummaryClient
from .config import Settings
from .exceptions import OpenAIAPIError
from .models import (
    Expense,
    Participant,
    ParticipantSpending,
    SettlementResult,
    SpendingStats,
)
from .money import divide_cents, from_cents, to_cents

logger = logging.getLogger(__name__)

UNKNOWN_NAME = "Unknown"

MISSING_KEY_MESSAGE = "Set OPENAI_API_KEY to enable the AI settlement summary."
EMPTY_SUMMARY_MESSAGE = "The AI could not produce a summary this time."
SUMMARY_ERROR_MESSAGE = "The AI summary failed. Please try again later."


def summarize_spending(
    participants: list[Participant], expenses: list[Expense]
) -> SpendingStats:
    """
    Compute total spend and per-participant spending figures.

    Expenses with nobody involved still count toward the total spend, but not
    toward anyone's involvement.

    Args:
        participants: Group members
        expenses: Shared expenses

    Returns:
        Spending statistics, including the top payer and the freeloader
        (most often involved, least paid)
    """
    paid: dict[str, int] = {p.id: 0 for p in participants}
    involved: dict[str, int] = {p.id: 0 for p in participants}

    total_cents = 0
    for expense in expenses:
        cents = to_cents(expense.amount)
        total_cents += cents
        if expense.payer_id in paid:
            paid[expense.payer_id] += cents
        for participant_id in expense.involved_ids:
            if participant_id in involved:
                involved[participant_id] += 1

    per_participant = [
        ParticipantSpending(
            participant_id=p.id,
            name=p.name,
            paid=from_cents(paid[p.id]),
            involved_count=involved[p.id],
        )
        for p in participants
    ]

    average_cents = (
        divide_cents(total_cents, len(participants)) if participants else 0
    )

    top_payer = max(per_participant, key=lambda s: s.paid, default=None)
    freeloader = max(
        (s for s in per_participant if s.involved_count > 0),
        key=lambda s: (s.involved_count, -s.paid),
        default=None,
    )

    return SpendingStats(
        total_spent=from_cents(total_cents),
        average_per_participant=from_cents(average_cents),
        per_participant=per_participant,
        top_payer_id=top_payer.participant_id
        if top_payer and top_payer.paid > 0
        else None,
        freeloader_id=freeloader.participant_id if freeloader else None,
    )


def build_report_context(
    participants: list[Participant],
    expenses: list[Expense],
    result: SettlementResult,
) -> dict[str, Any]:
    """Build the JSON-ready data handed to the summary writer, keyed by name."""
    names = {p.id: p.name for p in participants}

    def name_of(participant_id: str | None) -> str:
        if participant_id is None:
            return UNKNOWN_NAME
        return names.get(participant_id, UNKNOWN_NAME)

    stats = summarize_spending(participants, expenses)

    return {
        "participants": [p.name for p in participants],
        "expenses": [
            {
                "title": e.title,
                "amount": str(e.amount),
                "payer": name_of(e.payer_id),
                "involved_count": len(e.involved_ids),
            }
            for e in expenses
        ],
        "statistics": {
            "total_spent": str(stats.total_spent),
            "average_per_participant": str(stats.average_per_participant),
            "top_payer": name_of(stats.top_payer_id) if stats.top_payer_id else None,
            "freeloader": name_of(stats.freeloader_id)
            if stats.freeloader_id
            else None,
        },
        "settlement": {
            "balances": [
                {"name": name_of(b.participant_id), "net": str(b.amount)}
                for b in result.balances
            ],
            "actions": [
                {
                    "from": name_of(a.from_id),
                    "to": name_of(a.to_id),
                    "amount": str(a.amount),
                }
                for a in result.actions
            ],
        },
    }


def generate_summary(
    participants: list[Participant],
    expenses: list[Expense],
    result: SettlementResult,
    settings: Settings,
) -> str:
    """
    Produce a natural-language summary of a settlement.

    Never raises for API problems: a missing key, a network or service error,
    or an empty answer all turn into a short fallback message.

    Returns:
        Summary text, or a fallback message
    """
    if not settings.openai_api_key:
        return MISSING_KEY_MESSAGE

    context = build_report_context(participants, expenses, result)

    try:
        client = SummaryClient(
            api_key=settings.openai_api_key, model=settings.openai_model
        )
        return client.write_summary(context, language=settings.summary_language)
    except OpenAIAPIError as e:
        logger.warning(f"Summary unavailable: {e}")
        return EMPTY_SUMMARY_MESSAGE
    except OpenAIError as e:
        logger.error(f"OpenAI API error while writing summary: {e}")
        return SUMMARY_ERROR_MESSAGE


def format_transfer(
    from_name: str, to_name: str, amount: Decimal, currency_symbol: str = "$"
) -> str:
    """Copyable one-line description of a transfer."""
    return f"{from_name} pays {to_name} {currency_symbol}{amount:,.2f}"
