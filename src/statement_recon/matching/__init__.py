"""Statement assembly and reconciliation."""

from .assembler import StatementAssembler, YearPolicy, sort_transactions, statement_year_policy
from .reconciler import Reconciler

__all__ = [
    "StatementAssembler",
    "YearPolicy",
    "sort_transactions",
    "statement_year_policy",
    "Reconciler",
]
