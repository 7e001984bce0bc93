"""
Excel export of reconciled statement transactions.
Writes the CSV layout to a styled worksheet plus a balance summary sheet.
"""

from pathlib import Path
import logging

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Border, Side
from openpyxl.worksheet.worksheet import Worksheet

from ..config import OutputConfig
from ..models.statement import ReconciliationResult, Statement, TransactionType
from ..utils.exceptions import ExportError
from .csv_writer import transaction_row

logger = logging.getLogger(__name__)

# Style definitions
HEADER_FILL = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
HEADER_FONT = Font(color="FFFFFF", bold=True)
PAYMENT_FILL = PatternFill(start_color="C6EFCE", end_color="C6EFCE", fill_type="solid")
THIN_BORDER = Border(
    left=Side(style="thin"),
    right=Side(style="thin"),
    top=Side(style="thin"),
    bottom=Side(style="thin"),
)

AMOUNT_COLUMN = 5


class ExcelReportGenerator:
    """Generates an XLSX workbook from a reconciled statement."""

    def __init__(self, config: OutputConfig):
        self.config = config

    def generate_report(
        self,
        statement: Statement,
        result: ReconciliationResult,
        output_path: Path,
    ) -> Path:
        """
        Write the transactions and reconciliation summary to a workbook.

        Args:
            statement: Reconciled statement, transactions already sorted
            result: Outcome of reconciliation
            output_path: Path for output file

        Returns:
            Path to generated workbook

        Raises:
            ExportError: If the workbook cannot be saved
        """
        logger.info(f"Generating Excel workbook: {output_path}")

        wb = Workbook()

        # Remove default sheet
        if wb.active:
            wb.remove(wb.active)

        self._create_transactions_sheet(wb, statement)
        self._create_summary_sheet(wb, statement, result)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            wb.save(output_path)
        except OSError as e:
            raise ExportError(f"Failed to save workbook {output_path}: {e}") from e

        logger.info(f"Workbook saved: {output_path}")
        return output_path

    def _create_transactions_sheet(self, wb: Workbook, statement: Statement) -> None:
        """Create the transactions sheet in export row order."""
        ws = wb.create_sheet(self.config.sheet_name)

        for col, header in enumerate(self.config.headers, start=1):
            cell = ws.cell(row=1, column=col, value=header)
            cell.fill = HEADER_FILL
            cell.font = HEADER_FONT
            cell.border = THIN_BORDER

        for row_num, txn in enumerate(statement.transactions, start=2):
            row_data: list = transaction_row(txn, self.config.date_format)
            row_data[AMOUNT_COLUMN - 1] = float(-txn.amount)

            for col, value in enumerate(row_data, start=1):
                cell = ws.cell(row=row_num, column=col, value=value)
                cell.border = THIN_BORDER
                if txn.type is TransactionType.PAYMENT:
                    cell.fill = PAYMENT_FILL
            ws.cell(row=row_num, column=AMOUNT_COLUMN).number_format = "0.00"

        ws.freeze_panes = "A2"
        self._auto_fit_columns(ws)

    def _create_summary_sheet(
        self, wb: Workbook, statement: Statement, result: ReconciliationResult
    ) -> None:
        """Create the balance summary sheet."""
        ws = wb.create_sheet("Reconciliation")

        ws["A1"] = "Statement Reconciliation"
        ws["A1"].font = Font(size=16, bold=True)

        summary_data = [
            ("Transactions:", len(statement.transactions)),
            ("Previous Balance:", f"${statement.starting_balance:,.2f}"),
            ("Transaction Total:", f"${statement.transaction_total:,.2f}"),
            ("Computed Balance:", f"${result.computed_total:,.2f}"),
            ("New Balance:", f"${result.expected_total:,.2f}"),
            ("Status:", "Reconciled" if result.ok else "Mismatch"),
        ]

        for i, (label, value) in enumerate(summary_data, start=3):
            ws[f"A{i}"] = label
            ws[f"A{i}"].font = Font(bold=True)
            ws[f"B{i}"] = value

        ws.column_dimensions["A"].width = 22
        ws.column_dimensions["B"].width = 20

    def _auto_fit_columns(self, ws: Worksheet) -> None:
        """Auto-fit column widths based on content."""
        for column_cells in ws.columns:
            max_length = 0
            column = column_cells[0].column_letter

            for cell in column_cells:
                if cell.value is not None:
                    max_length = max(max_length, len(str(cell.value)))

            ws.column_dimensions[column].width = min(max_length + 2, 50)
