"""
Text extraction for statement documents.
Wraps the external pdftotext utility; plain text dumps can be read directly.
"""

from pathlib import Path
import logging
import subprocess

from ..config import PdfToTextConfig
from ..utils.exceptions import TextExtractionError

logger = logging.getLogger(__name__)


class PdfTextExtractor:
    """Obtains the raw, page-break free text body of a statement."""

    def __init__(self, config: PdfToTextConfig):
        self.config = config

    def build_command(self, file_path: Path) -> list[str]:
        """Command line for extracting ``file_path`` to stdout."""
        return [self.config.command, *self.config.arguments, str(file_path), "-"]

    def extract(self, file_path: Path) -> str:
        """
        Run pdftotext on a statement PDF and return its full text.

        Args:
            file_path: Path to the statement PDF

        Returns:
            Text body of the document

        Raises:
            TextExtractionError: If the utility is missing or fails
        """
        command = self.build_command(file_path)
        logger.debug(f"Running: {' '.join(command)}")

        try:
            completed = subprocess.run(command, capture_output=True, check=False)
        except FileNotFoundError as e:
            raise TextExtractionError(
                f"Text extraction utility not found: {self.config.command}"
            ) from e

        if completed.returncode != 0:
            stderr = completed.stderr.decode(self.config.encoding, errors="replace").strip()
            raise TextExtractionError(
                f"{self.config.command} failed on {file_path} "
                f"(exit {completed.returncode}): {stderr}"
            )

        body = completed.stdout.decode(self.config.encoding, errors="replace")
        logger.info(f"Extracted {len(body)} characters from {file_path}")
        return body

    def read_text(self, file_path: Path) -> str:
        """
        Read an already extracted text dump.

        Raises:
            TextExtractionError: If the file cannot be read
        """
        try:
            with open(file_path, "r", encoding=self.config.encoding) as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise TextExtractionError(f"Failed to read text file {file_path}: {e}") from e
