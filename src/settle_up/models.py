"""Pydantic domain models for settle-up."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

# ============================================================================
# Input Models
# ============================================================================


class Participant(BaseModel):
    """A member of the group sharing expenses."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str


class Expense(BaseModel):
    """A single shared expense.

    The payer does not have to be one of the involved participants: paying for
    something you don't share in is allowed. An expense with no involved
    participants has no effect on the settlement.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    amount: Decimal
    payer_id: str
    involved_ids: list[str] = Field(default_factory=list)
    date: datetime = Field(default_factory=datetime.now)


# ============================================================================
# Output Models
# ============================================================================


class Balance(BaseModel):
    """Net position of one participant after all expenses.

    Positive = is owed money (creditor), negative = owes money (debtor).
    """

    model_config = ConfigDict(frozen=True)

    participant_id: str
    amount: Decimal


class SettlementAction(BaseModel):
    """A recommended payment from a debtor to a creditor."""

    model_config = ConfigDict(frozen=True)

    from_id: str
    to_id: str
    amount: Decimal = Field(gt=0)


class SettlementResult(BaseModel):
    """Balances and the transfer plan produced by one settlement run."""

    model_config = ConfigDict(frozen=True)

    balances: list[Balance]
    actions: list[SettlementAction]

    def balance_for(self, participant_id: str) -> Decimal:
        """Get the net balance of a participant (zero if not present)."""
        for balance in self.balances:
            if balance.participant_id == participant_id:
                return balance.amount
        return Decimal("0.00")

    def total_transferred(self) -> Decimal:
        """Sum of all transfer amounts in the plan."""
        return sum((action.amount for action in self.actions), Decimal("0.00"))


# ============================================================================
# Report Models
# ============================================================================


class ParticipantSpending(BaseModel):
    """How much one participant paid and how often they were involved."""

    participant_id: str
    name: str
    paid: Decimal
    involved_count: int


class SpendingStats(BaseModel):
    """Aggregate spending figures for a group, used by the summary report."""

    total_spent: Decimal
    average_per_participant: Decimal
    per_participant: list[ParticipantSpending]
    top_payer_id: str | None = None
    freeloader_id: str | None = None
