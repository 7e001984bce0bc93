"""
Balance reconciliation for assembled statements.
Proves the parsed transactions agree with the declared balances.
"""

from decimal import InvalidOperation
import logging

from ..models.statement import ReconciliationResult, Statement
from ..parsers.fields import to_fixed
from ..utils.exceptions import ReconciliationMismatchError

logger = logging.getLogger(__name__)


class Reconciler:
    """Checks starting balance plus all transactions against the ending balance."""

    def reconcile(self, statement: Statement) -> ReconciliationResult:
        """
        Compute the statement total and compare it to the ending balance.

        Both sides are rounded to cents, half away from zero.

        Args:
            statement: Assembled statement

        Returns:
            Computed total, declared ending balance and whether they agree

        Raises:
            ReconciliationMismatchError: If the totals cannot be rounded to cents
        """
        try:
            computed = to_fixed(statement.starting_balance + statement.transaction_total)
            expected = to_fixed(statement.ending_balance)
        except InvalidOperation as e:
            raise ReconciliationMismatchError(
                f"Statement total exceeds supported precision: {e!r}"
            ) from e
        ok = computed == expected

        logger.debug(f"Reconciliation: computed {computed}, expected {expected}, ok={ok}")
        return ReconciliationResult(computed_total=computed, expected_total=expected, ok=ok)

    def verify(self, statement: Statement) -> ReconciliationResult:
        """
        Reconcile and reject a statement that does not balance.

        Raises:
            ReconciliationMismatchError: If the totals differ
        """
        result = self.reconcile(statement)
        if not result.ok:
            raise ReconciliationMismatchError(
                f"Reconciliation doesn't match: actual {result.computed_total}, "
                f"expected {result.expected_total} (difference {result.difference})"
            )
        logger.info(f"Statement reconciled at {result.computed_total}")
        return result
