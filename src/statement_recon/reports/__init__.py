"""Exporters for reconciled statements."""

from .csv_writer import CsvWriter, transaction_row
from .excel_generator import ExcelReportGenerator

__all__ = ["CsvWriter", "transaction_row", "ExcelReportGenerator"]
