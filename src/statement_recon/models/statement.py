"""Data models for parsed credit-card statements."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionType(Enum):
    """Export type of a transaction, derived from the sign of its amount."""

    PAYMENT = "Payment"  # Negative amounts (payments, credits)
    SALE = "Sale"  # Positive amounts (purchases)


@dataclass(frozen=True)
class Transaction:
    """
    A single statement transaction.

    Amounts are signed as printed on the statement: purchases are positive,
    payments and credits are negative.
    """

    amount: Decimal
    merchant_name: str
    date: date

    @property
    def type(self) -> TransactionType:
        """Payment if the amount is negative, otherwise Sale."""
        if self.amount < 0:
            return TransactionType.PAYMENT
        return TransactionType.SALE


@dataclass
class Statement:
    """
    Transactions of one billing period plus the declared balances
    used to confirm the parsed amounts.
    """

    transactions: list[Transaction] = field(default_factory=list)
    starting_balance: Decimal = Decimal("0.00")
    ending_balance: Decimal = Decimal("0.00")

    @property
    def transaction_total(self) -> Decimal:
        """Sum of all transaction amounts."""
        return sum((t.amount for t in self.transactions), Decimal("0"))


@dataclass(frozen=True)
class RawTransaction:
    """Unparsed fields of a transaction line, as captured by the scanner."""

    month: str
    day: str
    description: str
    amount: str
    line_number: int = 0


@dataclass
class RawStatement:
    """Raw tokens captured from a statement body, before any interpretation."""

    transactions: list[RawTransaction] = field(default_factory=list)
    year: Optional[str] = None
    previous_balance: Optional[str] = None
    new_balance: Optional[str] = None


@dataclass(frozen=True)
class ReconciliationResult:
    """Outcome of checking a statement against its declared balances."""

    computed_total: Decimal
    expected_total: Decimal
    ok: bool

    @property
    def difference(self) -> Decimal:
        """Computed total minus the declared ending balance."""
        return self.computed_total - self.expected_total
