"""
Line-oriented scanner for credit-card statement text.
Turns the text body into a stream of typed tokens and folds them into
raw, uninterpreted statement fields.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional
import logging
import re

from ..config import ExtractionConfig
from ..models.statement import RawStatement, RawTransaction
from ..utils.exceptions import (
    ConfigurationError,
    MalformedMatchError,
    MissingBalanceMarkerError,
)

logger = logging.getLogger(__name__)

# month, day, description, amount
TRANSACTION_GROUP_COUNT = 4


class TokenKind(Enum):
    """Kind of statement line recognised by the scanner."""

    TRANSACTION = "transaction"
    PREVIOUS_BALANCE = "previous_balance"
    NEW_BALANCE = "new_balance"
    YEAR = "year"
    REGION_END = "region_end"


@dataclass(frozen=True)
class Token:
    """A recognised line (or line prefix) and its captured groups."""

    kind: TokenKind
    line_number: int
    text: str
    groups: tuple[Optional[str], ...] = ()


@dataclass(frozen=True)
class StatementPatterns:
    """Compiled statement patterns, built once and shared read-only."""

    transaction: re.Pattern[str]
    previous_balance: re.Pattern[str]
    new_balance: re.Pattern[str]
    year: re.Pattern[str]
    region_end_marker: str

    @classmethod
    def from_config(cls, config: ExtractionConfig) -> "StatementPatterns":
        """
        Compile the patterns named in the extraction configuration.

        Raises:
            ConfigurationError: If a pattern is not a valid regular expression
        """
        compiled = {}
        for name in ("transaction", "previous_balance", "new_balance", "year"):
            source = getattr(config, f"{name}_pattern")
            try:
                compiled[name] = re.compile(source)
            except re.error as e:
                raise ConfigurationError(f"Invalid {name} pattern {source!r}: {e}") from e

        return cls(region_end_marker=config.region_end_marker, **compiled)


class TransactionExtractor:
    """
    Scanner for the text dump of a credit-card statement.

    Transaction lines are only recognised before the region end marker
    (the rewards summary header); balance and year markers are recognised
    anywhere in the body.
    """

    def __init__(self, patterns: StatementPatterns):
        """
        Initialize the extractor.

        Args:
            patterns: Compiled statement patterns
        """
        self.patterns = patterns

    def tokenize(self, body: str) -> Iterator[Token]:
        """
        Scan the body line by line and yield recognised tokens.

        Args:
            body: Full statement text

        Yields:
            Tokens in line order
        """
        in_region = True
        marker = self.patterns.region_end_marker

        for line_number, line in enumerate(body.splitlines(), start=1):
            if in_region:
                scan_text = line
                position = line.find(marker) if marker else -1
                if position >= 0:
                    scan_text = line[:position]

                match = self.patterns.transaction.search(scan_text)
                if match:
                    yield Token(TokenKind.TRANSACTION, line_number, line, match.groups())

                if position >= 0:
                    logger.debug(f"Transaction region ends at line {line_number}")
                    in_region = False
                    yield Token(TokenKind.REGION_END, line_number, line)

            for kind, pattern in (
                (TokenKind.PREVIOUS_BALANCE, self.patterns.previous_balance),
                (TokenKind.NEW_BALANCE, self.patterns.new_balance),
                (TokenKind.YEAR, self.patterns.year),
            ):
                match = pattern.search(line)
                if match:
                    yield Token(kind, line_number, line, match.groups())

    def extract(self, body: str) -> RawStatement:
        """
        Collect raw transaction fields, the statement year and both balances.

        The first occurrence of each marker wins.

        Args:
            body: Full statement text

        Returns:
            Raw statement fields

        Raises:
            MalformedMatchError: If a match has fewer capture groups than needed
            MissingBalanceMarkerError: If either balance marker is absent
        """
        raw = RawStatement()
        match_count = 0

        for token in self.tokenize(body):
            if token.kind is TokenKind.TRANSACTION:
                if len(token.groups) < TRANSACTION_GROUP_COUNT:
                    raise MalformedMatchError(
                        f"Bad match for match no {match_count} (line {token.line_number}): "
                        f"expected {TRANSACTION_GROUP_COUNT} groups, got {len(token.groups)}"
                    )
                month, day, description, amount = token.groups[:TRANSACTION_GROUP_COUNT]
                raw.transactions.append(
                    RawTransaction(
                        month=month or "",
                        day=day or "",
                        description=description or "",
                        amount=amount or "",
                        line_number=token.line_number,
                    )
                )
                match_count += 1

            elif token.kind is TokenKind.YEAR and raw.year is None:
                raw.year = _first_group(token)

            elif token.kind is TokenKind.PREVIOUS_BALANCE and raw.previous_balance is None:
                raw.previous_balance = _first_group(token)

            elif token.kind is TokenKind.NEW_BALANCE and raw.new_balance is None:
                raw.new_balance = _first_group(token)

        logger.info(f"Found {match_count} matches")

        if raw.year is None and raw.transactions:
            logger.warning("No year-to-date marker found; transaction dates cannot be resolved")
        if raw.previous_balance is None:
            raise MissingBalanceMarkerError("Could not find starting balance (Previous Balance)")
        if raw.new_balance is None:
            raise MissingBalanceMarkerError("Could not find ending balance (New Balance)")

        return raw


def _first_group(token: Token) -> str:
    """Return the first captured group of a marker token."""
    if not token.groups or token.groups[0] is None:
        raise MalformedMatchError(
            f"Bad {token.kind.value} match on line {token.line_number}: no captured value"
        )
    return token.groups[0]
