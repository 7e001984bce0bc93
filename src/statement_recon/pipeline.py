"""
Statement conversion pipeline.
Raw text -> token scan -> typed statement -> reconciliation gate.
"""

from dataclasses import dataclass
from pathlib import Path
import logging

from .config import ReconConfig
from .matching.assembler import StatementAssembler, YearPolicy, statement_year_policy
from .matching.reconciler import Reconciler
from .models.statement import ReconciliationResult, Statement
from .parsers.pdf_text import PdfTextExtractor
from .parsers.scanner import StatementPatterns, TransactionExtractor

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """A statement that passed reconciliation, ready for export."""

    statement: Statement
    reconciliation: ReconciliationResult


class StatementConverter:
    """
    Runs the full conversion for one statement.

    Every stage raises on the first problem it finds; nothing is returned
    for a statement that fails to parse or reconcile.
    """

    def __init__(self, config: ReconConfig, year_policy: YearPolicy = statement_year_policy):
        """
        Initialize the converter. Patterns are compiled once here.

        Args:
            config: Application configuration
            year_policy: Year attribution for each transaction
        """
        self.config = config
        self.text_extractor = PdfTextExtractor(config.pdftotext)
        self.extractor = TransactionExtractor(StatementPatterns.from_config(config.extraction))
        self.assembler = StatementAssembler(year_policy)
        self.reconciler = Reconciler()

    def load_text(self, file_path: Path, text_input: bool = False) -> str:
        """Return the statement body, running pdftotext unless ``text_input``."""
        if text_input:
            return self.text_extractor.read_text(file_path)
        return self.text_extractor.extract(file_path)

    def parse_text(self, body: str) -> Statement:
        """Scan and assemble a statement without reconciling it."""
        raw = self.extractor.extract(body)
        return self.assembler.assemble(raw)

    def convert_text(self, body: str) -> ConversionResult:
        """
        Parse a statement body and require it to reconcile.

        Raises:
            StatementReconError: On any parse or reconciliation failure
        """
        statement = self.parse_text(body)
        reconciliation = self.reconciler.verify(statement)
        return ConversionResult(statement=statement, reconciliation=reconciliation)

    def convert_file(self, file_path: Path, text_input: bool = False) -> ConversionResult:
        """Load a statement document and convert it."""
        logger.info(f"Converting statement: {file_path}")
        return self.convert_text(self.load_text(file_path, text_input))
