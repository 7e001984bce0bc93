"""Data models for statement parsing and reconciliation."""

from .statement import (
    Transaction,
    TransactionType,
    Statement,
    RawTransaction,
    RawStatement,
    ReconciliationResult,
)

__all__ = [
    "Transaction",
    "TransactionType",
    "Statement",
    "RawTransaction",
    "RawStatement",
    "ReconciliationResult",
]
