"""Loading participants and expenses from a JSON document."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError, model_validator

from .exceptions import InputFileError
from .models import Expense, Participant

logger = logging.getLogger(__name__)


class SettlementInput(BaseModel):
    """A group snapshot: who is in it and what they spent.

    Expenses that omit `involved_ids` are split among every participant.
    """

    participants: list[Participant]
    expenses: list[Expense] = []

    @model_validator(mode="before")
    @classmethod
    def default_involved_to_everyone(cls, data: Any) -> Any:
        """Fill in missing involved_ids with all participant ids."""
        if not isinstance(data, dict):
            return data
        participants = data.get("participants")
        raw_expenses = data.get("expenses")
        if not isinstance(participants, list) or not isinstance(raw_expenses, list):
            return data

        everyone = [
            p.get("id") if isinstance(p, dict) else getattr(p, "id", None)
            for p in participants
        ]
        expenses = []
        for expense in raw_expenses:
            if isinstance(expense, dict) and expense.get("involved_ids") is None:
                expense = {**expense, "involved_ids": everyone}
            expenses.append(expense)

        return {**data, "expenses": expenses}


def parse_input(raw: str) -> SettlementInput:
    """
    Parse a JSON document into a SettlementInput.

    Raises:
        InputFileError: If the JSON is malformed or does not match the schema
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InputFileError(f"Input is not valid JSON: {e}") from e

    try:
        return SettlementInput.model_validate(data)
    except ValidationError as e:
        raise InputFileError(f"Invalid settlement input:\n{e}") from e


def load_input(path: Path) -> SettlementInput:
    """
    Read and parse a settlement input file.

    Args:
        path: Path to a JSON file

    Returns:
        Parsed participants and expenses

    Raises:
        InputFileError: If the file is missing, unreadable or invalid
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputFileError(f"Cannot read {path}: {e}") from e

    data = parse_input(raw)

    logger.info(
        f"Loaded {len(data.participants)} participants and "
        f"{len(data.expenses)} expenses from {path}"
    )

    return data
