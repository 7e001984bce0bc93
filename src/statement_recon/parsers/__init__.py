"""Parsers for statement text and its fields."""

from .fields import sanitize_amount, resolve_date, to_fixed
from .pdf_text import PdfTextExtractor
from .scanner import StatementPatterns, Token, TokenKind, TransactionExtractor

__all__ = [
    "sanitize_amount",
    "resolve_date",
    "to_fixed",
    "PdfTextExtractor",
    "StatementPatterns",
    "Token",
    "TokenKind",
    "TransactionExtractor",
]
