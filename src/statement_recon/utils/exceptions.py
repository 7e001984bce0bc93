"""Custom exceptions for the statement reconciliation application."""


class StatementReconError(Exception):
    """Base exception for statement conversion errors."""

    pass


class ConfigurationError(StatementReconError):
    """Error in configuration."""

    pass


class TextExtractionError(StatementReconError):
    """Error obtaining the text body of a statement document."""

    pass


class StatementParseError(StatementReconError):
    """Error parsing the statement text."""

    pass


class MissingBalanceMarkerError(StatementParseError):
    """Previous Balance or New Balance marker not found."""

    pass


class MalformedMatchError(StatementParseError):
    """A transaction match yielded fewer capture groups than required."""

    pass


class AmountParseError(StatementParseError):
    """Amount token is not a valid number."""

    pass


class DateResolutionError(StatementParseError):
    """Transaction date could not be reconstructed."""

    pass


class DateFieldMissingError(DateResolutionError):
    """Day, month or year token is absent."""

    pass


class DateParseError(DateResolutionError):
    """Day, month or year token is not a valid integer or date."""

    pass


class ReconciliationMismatchError(StatementReconError):
    """Starting balance plus transactions does not equal the ending balance."""

    pass


class ExportError(StatementReconError):
    """Error writing the exported transactions."""

    pass
