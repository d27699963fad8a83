"""settle-up - Split shared group expenses and plan the transfers that settle them."""

__version__ = "0.1.0"

from .balances import compute_balances
from .config import Settings, load_settings
from .engine import calculate_settlement
from .models import (
    Balance,
    Expense,
    Participant,
    SettlementAction,
    SettlementResult,
)
from .planner import plan_transfers

__all__ = [
    "Settings",
    "load_settings",
    "Balance",
    "Expense",
    "Participant",
    "SettlementAction",
    "SettlementResult",
    "compute_balances",
    "plan_transfers",
    "calculate_settlement",
]
