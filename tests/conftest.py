"""Shared fixtures for statement conversion tests."""

import logging

import pytest

from statement_recon.config import ReconConfig
from statement_recon.parsers.scanner import StatementPatterns, TransactionExtractor
from statement_recon.pipeline import StatementConverter

# pdftotext -raw dump of a statement, trimmed to the parts the scanner reads.
# Previous 1,250.00 + (-1,250.00 + 45.20 + 4.50 + 1,000.75) = 1,050.45
SAMPLE_STATEMENT = """\
ACCOUNT SUMMARY
Previous Balance $1,250.00
Payment, Credits -$1,250.00
Purchases +$1,050.45
New Balance $1,050.45
Opening/Closing Date 12/11/24 - 01/10/25
ACCOUNT ACTIVITY
Date of
Transaction Merchant Name or Transaction Description $ Amount
PAYMENTS AND OTHER CREDITS
01/05 Payment Thank You-Mobile -1,250.00
PURCHASE
12/28 AMAZON MKTPLACE PMTS 45.20
01/03 COFFEE SHOP 4.50
01/10 GROCERY STORE 1,000.75
Date of
Transaction Merchant Name or Transaction Description $ Amount Rewards
01/02 REWARDS LINE THAT IS NOT A PURCHASE 99.99
2025 Totals Year-to-Date
Total fees charged in 2025 $0.00
"""


def make_statement(lines, previous="100.00", new="104.50", year="2023"):
    """Build a minimal statement body around transaction lines."""
    parts = []
    if previous is not None:
        parts.append(f"Previous Balance ${previous}")
    if new is not None:
        parts.append(f"New Balance ${new}")
    parts.extend(lines)
    if year is not None:
        parts.append(f"{year} Totals Year-to-Date")
    return "\n".join(parts) + "\n"


@pytest.fixture
def config():
    """Default configuration."""
    return ReconConfig()


@pytest.fixture
def extractor(config):
    """Extractor built from the default patterns."""
    return TransactionExtractor(StatementPatterns.from_config(config.extraction))


@pytest.fixture
def converter(config):
    """Converter built from the default configuration."""
    return StatementConverter(config)


@pytest.fixture
def sample_statement():
    return SAMPLE_STATEMENT


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Drop handlers installed by setup_logging so they don't leak across tests."""
    yield
    logger = logging.getLogger("statement_recon")
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
