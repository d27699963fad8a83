"""Custom exceptions for settle-up."""


class SettleUpError(Exception):
    """Base exception for all settle-up errors."""

    pass


class ConfigurationError(SettleUpError):
    """Raised when configuration is invalid or missing."""

    pass


class InputFileError(SettleUpError):
    """Raised when an input document cannot be read or parsed."""

    pass


class InvalidExpenseError(SettleUpError):
    """Raised when an expense has a non-positive amount."""

    def __init__(self, expense_id: str, message: str | None = None):
        self.expense_id = expense_id
        super().__init__(message or f"Expense {expense_id} has an invalid amount")


class UnknownParticipantError(SettleUpError):
    """Raised when an expense references a participant outside the group."""

    def __init__(self, participant_id: str, expense_id: str):
        self.participant_id = participant_id
        self.expense_id = expense_id
        super().__init__(
            f"Expense {expense_id} references unknown participant {participant_id!r}"
        )


class DuplicateParticipantError(SettleUpError):
    """Raised when two participants share the same id."""

    def __init__(self, participant_id: str):
        self.participant_id = participant_id
        super().__init__(f"Participant id {participant_id!r} is used more than once")


class APIError(SettleUpError):
    """Base class for API-related errors."""

    pass


class OpenAIAPIError(APIError):
    """Raised when the OpenAI API request fails or returns nothing usable."""

    pass
