"""Tests for the statement text scanner."""

import pytest

from statement_recon.config import ExtractionConfig
from statement_recon.models.statement import RawTransaction
from statement_recon.parsers.scanner import (
    StatementPatterns,
    TokenKind,
    TransactionExtractor,
)
from statement_recon.utils.exceptions import (
    ConfigurationError,
    MalformedMatchError,
    MissingBalanceMarkerError,
)

from .conftest import make_statement


class TestStatementPatterns:
    def test_compiles_defaults(self):
        patterns = StatementPatterns.from_config(ExtractionConfig())
        assert patterns.transaction.groups == 4
        assert patterns.region_end_marker == "Amount Rewards"

    def test_invalid_pattern(self):
        with pytest.raises(ConfigurationError, match="transaction"):
            StatementPatterns.from_config(ExtractionConfig(transaction_pattern="(unclosed"))

    def test_patterns_are_immutable(self):
        patterns = StatementPatterns.from_config(ExtractionConfig())
        with pytest.raises(AttributeError):
            patterns.region_end_marker = "other"


class TestTokenize:
    def test_token_stream_in_line_order(self, extractor, sample_statement):
        kinds = [token.kind for token in extractor.tokenize(sample_statement)]
        assert kinds == [
            TokenKind.PREVIOUS_BALANCE,
            TokenKind.NEW_BALANCE,
            TokenKind.TRANSACTION,
            TokenKind.TRANSACTION,
            TokenKind.TRANSACTION,
            TokenKind.TRANSACTION,
            TokenKind.REGION_END,
            TokenKind.YEAR,
        ]

    def test_tokens_carry_line_numbers(self, extractor):
        tokens = list(extractor.tokenize("header\n03/01 COFFEE SHOP 4.50\n"))
        assert len(tokens) == 1
        assert tokens[0].line_number == 2
        assert tokens[0].groups == ("03", "01", "COFFEE SHOP", "4.50")

    def test_prefix_of_marker_line_is_scanned(self, extractor):
        tokens = list(extractor.tokenize("03/01 COFFEE SHOP 4.50 Amount Rewards\n04/01 LATER 1.00\n"))
        assert [t.kind for t in tokens] == [TokenKind.TRANSACTION, TokenKind.REGION_END]
        assert tokens[0].groups[2] == "COFFEE SHOP"


class TestExtract:
    def test_extracts_raw_fields(self, extractor, sample_statement):
        raw = extractor.extract(sample_statement)

        assert raw.year == "2025"
        assert raw.previous_balance == "1,250.00"
        assert raw.new_balance == "1,050.45"
        assert raw.transactions[0] == RawTransaction(
            month="01",
            day="05",
            description="Payment Thank You-Mobile",
            amount="-1,250.00",
            line_number=11,
        )
        assert [t.description for t in raw.transactions] == [
            "Payment Thank You-Mobile",
            "AMAZON MKTPLACE PMTS",
            "COFFEE SHOP",
            "GROCERY STORE",
        ]

    def test_lines_after_region_end_are_ignored(self, extractor, sample_statement):
        raw = extractor.extract(sample_statement)
        assert all("REWARDS" not in t.description for t in raw.transactions)

    def test_whole_body_scanned_without_region_marker(self, extractor):
        body = make_statement(["03/01 COFFEE SHOP 4.50", "03/02 BAKERY 2.00"])
        raw = extractor.extract(body)
        assert len(raw.transactions) == 2

    def test_description_keeps_inner_numbers(self, extractor):
        body = make_statement(["03/01 STORE #123 SEATTLE WA 1,234.56"])
        raw = extractor.extract(body)
        assert raw.transactions[0].description == "STORE #123 SEATTLE WA"
        assert raw.transactions[0].amount == "1,234.56"

    def test_first_balance_marker_wins(self, extractor):
        body = make_statement([], previous="10.00") + "Previous Balance $99.00\n"
        assert extractor.extract(body).previous_balance == "10.00"

    def test_missing_year_is_not_an_error(self, extractor):
        raw = extractor.extract(make_statement(["03/01 COFFEE SHOP 4.50"], year=None))
        assert raw.year is None
        assert len(raw.transactions) == 1

    def test_missing_previous_balance(self, extractor):
        with pytest.raises(MissingBalanceMarkerError, match="starting balance"):
            extractor.extract(make_statement([], previous=None))

    def test_missing_new_balance(self, extractor):
        with pytest.raises(MissingBalanceMarkerError, match="ending balance"):
            extractor.extract(make_statement(["03/01 COFFEE SHOP 4.50"], new=None))

    def test_balance_marker_must_start_the_line(self, extractor):
        body = "Your New Balance $5.00\nPrevious Balance $5.00\n"
        with pytest.raises(MissingBalanceMarkerError):
            extractor.extract(body)

    def test_pattern_with_too_few_groups(self):
        patterns = StatementPatterns.from_config(
            ExtractionConfig(transaction_pattern=r"^(\d{1,2})/(\d{1,2}) (.*)")
        )
        extractor = TransactionExtractor(patterns)
        with pytest.raises(MalformedMatchError, match="match no 0"):
            extractor.extract(make_statement(["03/01 COFFEE SHOP 4.50"]))

    def test_balance_pattern_without_group(self):
        patterns = StatementPatterns.from_config(
            ExtractionConfig(new_balance_pattern=r"^New Balance")
        )
        with pytest.raises(MalformedMatchError):
            TransactionExtractor(patterns).extract(make_statement([]))
