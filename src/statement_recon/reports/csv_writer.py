"""CSV export of reconciled statement transactions."""

from typing import TextIO
import csv
import logging

from ..config import OutputConfig
from ..models.statement import Statement, Transaction

logger = logging.getLogger(__name__)


def transaction_row(transaction: Transaction, date_format: str = "%m/%d/%Y") -> list[str]:
    """
    Render a transaction in the card issuer's CSV export layout.

    The amount sign is flipped: purchases are exported negative and
    payments positive.
    """
    formatted_date = transaction.date.strftime(date_format)
    return [
        transaction.type.value,  # Type
        formatted_date,  # Trans Date
        formatted_date,  # Post Date
        transaction.merchant_name,  # Description
        f"{-transaction.amount:.2f}",  # Amount
    ]


class CsvWriter:
    """Writes a header row followed by one row per transaction."""

    def __init__(self, config: OutputConfig):
        self.config = config

    def write(self, statement: Statement, stream: TextIO) -> int:
        """
        Write the statement's transactions, in their current order, to a stream.

        Args:
            statement: Reconciled statement
            stream: Text stream opened with newline=""

        Returns:
            Number of data rows written
        """
        writer = csv.writer(stream, delimiter=self.config.delimiter, lineterminator="\n")
        writer.writerow(self.config.headers)
        for transaction in statement.transactions:
            writer.writerow(transaction_row(transaction, self.config.date_format))
        stream.flush()

        logger.info(f"Wrote {len(statement.transactions)} transactions as CSV")
        return len(statement.transactions)
