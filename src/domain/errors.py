"""Domain error taxonomy.

Use cases translate these into failed ``OperationResult`` values; nothing
below the application layer catches them.
"""


class FinanceError(Exception):
    """Base class for errors reported back to the caller."""


class ValidationError(FinanceError):
    """Input violates one or more entity constraints."""

    def __init__(self, messages: list[str]) -> None:
        self.messages = list(messages)
        super().__init__(", ".join(self.messages))


class AccountNotFoundError(FinanceError):
    """A referenced account does not exist for the user."""

    def __init__(self, account_id: str | None) -> None:
        self.account_id = account_id
        super().__init__(f"Account does not exist: {account_id}")


class RecordNotFoundError(FinanceError):
    """A record to edit or delete does not exist for the user."""

    def __init__(self, kind: str, record_id: str) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} not found: {record_id}")


class ReferencedRecordError(FinanceError):
    """A record cannot be removed while other records depend on it."""


__all__ = [
    "FinanceError",
    "ValidationError",
    "AccountNotFoundError",
    "RecordNotFoundError",
    "ReferencedRecordError",
]
