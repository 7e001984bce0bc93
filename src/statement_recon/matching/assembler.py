"""
Statement assembly from raw scanner output.
Builds typed transactions, attaches balances and orders them by date.
"""

from decimal import Decimal
from typing import Callable, Optional
import logging

from ..models.statement import RawStatement, RawTransaction, Statement, Transaction
from ..parsers.fields import resolve_date, sanitize_amount
from ..utils.exceptions import StatementParseError

logger = logging.getLogger(__name__)

# Chooses the year token for one transaction given the statement-wide year
YearPolicy = Callable[[RawTransaction, Optional[str]], Optional[str]]


def statement_year_policy(raw: RawTransaction, statement_year: Optional[str]) -> Optional[str]:
    """
    Apply the statement-wide year to every transaction.

    Statements whose transactions cross a calendar year boundary
    (December entries on a January statement) are misdated by this policy.
    """
    return statement_year


class StatementAssembler:
    """Turns raw statement fields into a sorted, typed Statement."""

    def __init__(self, year_policy: YearPolicy = statement_year_policy):
        """
        Initialize the assembler.

        Args:
            year_policy: Year attribution for each transaction
        """
        self.year_policy = year_policy

    def assemble(self, raw: RawStatement) -> Statement:
        """
        Build a Statement from raw fields.

        The first bad amount or date aborts assembly.

        Args:
            raw: Output of the transaction extractor

        Returns:
            Statement with transactions ordered most recent first

        Raises:
            StatementParseError: If an amount, date or balance cannot be parsed
        """
        statement = Statement()

        for raw_txn in raw.transactions:
            statement.transactions.append(self._build_transaction(raw_txn, raw.year))

        statement.starting_balance = self._parse_balance("Previous Balance", raw.previous_balance)
        statement.ending_balance = self._parse_balance("New Balance", raw.new_balance)

        statement.transactions = sort_transactions(statement.transactions)
        logger.debug(
            f"Assembled {len(statement.transactions)} transactions, "
            f"starting balance {statement.starting_balance}, "
            f"ending balance {statement.ending_balance}"
        )
        return statement

    def _build_transaction(self, raw_txn: RawTransaction, statement_year: Optional[str]) -> Transaction:
        try:
            amount = sanitize_amount(raw_txn.amount)
        except StatementParseError as e:
            raise type(e)(f"Bad amount parse for {raw_txn.description!r}: {e}") from e

        try:
            txn_date = resolve_date(
                raw_txn.day, raw_txn.month, self.year_policy(raw_txn, statement_year)
            )
        except StatementParseError as e:
            raise type(e)(f"Bad date parse for {raw_txn.description!r}: {e}") from e

        return Transaction(amount=amount, merchant_name=raw_txn.description, date=txn_date)

    def _parse_balance(self, label: str, token: Optional[str]) -> Decimal:
        if token is None:
            # The extractor rejects statements without balance markers
            raise StatementParseError(f"No {label} value to parse")
        try:
            return sanitize_amount(token)
        except StatementParseError as e:
            raise type(e)(f"Error with {label}: {e}") from e


def sort_transactions(transactions: list[Transaction]) -> list[Transaction]:
    """
    Order transactions by date, most recent first.

    Only dates are compared; equal dates keep their scan order.
    """
    return sorted(transactions, key=lambda t: t.date, reverse=True)
