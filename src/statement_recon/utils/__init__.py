"""Utility modules."""

from .exceptions import (
    StatementReconError,
    ConfigurationError,
    TextExtractionError,
    StatementParseError,
    MissingBalanceMarkerError,
    MalformedMatchError,
    AmountParseError,
    DateResolutionError,
    DateFieldMissingError,
    DateParseError,
    ReconciliationMismatchError,
    ExportError,
)
from .logging_config import setup_logging

__all__ = [
    "StatementReconError",
    "ConfigurationError",
    "TextExtractionError",
    "StatementParseError",
    "MissingBalanceMarkerError",
    "MalformedMatchError",
    "AmountParseError",
    "DateResolutionError",
    "DateFieldMissingError",
    "DateParseError",
    "ReconciliationMismatchError",
    "ExportError",
    "setup_logging",
]
