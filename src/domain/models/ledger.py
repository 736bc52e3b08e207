"""Domain models for records that move account balances."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class ServiceLine:
    """Contracted service inside an income."""

    name: str
    amount: Decimal


@dataclass(frozen=True)
class Income:
    """Client payment credited to an account net of commission."""

    id: str
    date: date
    client: str
    country: str
    services_details: list[ServiceLine]
    amount_paid: Decimal
    payment_account: str
    responsible: str
    total_contracted_amount: Decimal
    commission_rate: Decimal
    commission_amount: Decimal
    amount_with_commission: Decimal
    remaining_balance: Decimal
    timestamp: datetime
    brand_name: str = ""
    observations: str = ""
    due_date: date | None = None
    status: str = "active"

    @property
    def services(self) -> list[str]:
        """Return the names of the contracted services."""
        return [line.name for line in self.services_details]


@dataclass(frozen=True)
class Expense:
    """Payment debited from an account."""

    id: str
    date: date
    expense_type: str
    category: str
    amount: Decimal
    payment_account: str
    timestamp: datetime
    responsible: str = ""
    observations: str = ""


@dataclass(frozen=True)
class Transaction:
    """Withdrawal from one account or transfer between two accounts."""

    id: str
    transaction_type: str
    date: date
    amount: Decimal
    timestamp: datetime
    account: str | None = None
    source_account: str | None = None
    destination_account: str | None = None
    observations: str = ""


@dataclass(frozen=True)
class ClientPayment:
    """Debt payment spread over a client's outstanding incomes."""

    id: str
    client_name: str
    date: date
    amount: Decimal
    timestamp: datetime
    account: str | None = None
    income_ids: list[str] = field(default_factory=list)


__all__ = [
    "ServiceLine",
    "Income",
    "Expense",
    "Transaction",
    "ClientPayment",
]
