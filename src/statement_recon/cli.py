"""
Command-line interface for the credit-card statement converter.
"""

from pathlib import Path
from typing import Optional
import logging
import sys

import click
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import load_config, generate_default_config, ReconConfig
from .models.statement import ReconciliationResult, Statement
from .pipeline import StatementConverter
from .reports.csv_writer import CsvWriter
from .reports.excel_generator import ExcelReportGenerator
from .utils.exceptions import StatementReconError
from .utils.logging_config import setup_logging

# stdout carries the CSV export; diagnostics go to stderr
console = Console()
err_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
def main():
    """Credit-card statement to CSV converter with balance reconciliation."""
    pass


@main.command()
@click.argument("statement_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file (YAML)",
)
@click.option(
    "-o", "--output", type=click.Path(path_type=Path), help="Output file (default: stdout)"
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["csv", "xlsx"]),
    default=None,
    help="Output format (default from configuration: csv)",
)
@click.option(
    "--text-input",
    is_flag=True,
    help="STATEMENT_FILE is an already extracted text dump, skip pdftotext",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
def convert(
    statement_file: Path,
    config: Optional[Path],
    output: Optional[Path],
    output_format: Optional[str],
    text_input: bool,
    verbose: bool,
):
    """
    Convert a statement to CSV after checking it reconciles.

    STATEMENT_FILE: Path to the statement PDF
    """
    try:
        recon_config = load_config(config)
        _setup_logging(recon_config, verbose)

        output_format = output_format or recon_config.output.format
        if output_format == "xlsx" and output is None:
            raise click.UsageError("--output is required for xlsx format")

        converter = StatementConverter(recon_config)
        result = converter.convert_file(statement_file, text_input=text_input)

        if output_format == "xlsx":
            ExcelReportGenerator(recon_config.output).generate_report(
                statement=result.statement,
                result=result.reconciliation,
                output_path=output,
            )
        elif output is None:
            CsvWriter(recon_config.output).write(result.statement, sys.stdout)
        else:
            output.parent.mkdir(parents=True, exist_ok=True)
            with open(output, "w", newline="") as f:
                CsvWriter(recon_config.output).write(result.statement, f)

        if output is not None:
            err_console.print(
                f"[green]Exported {len(result.statement.transactions)} transactions: {output}[/green]"
            )

    except (StatementReconError, OSError) as e:
        err_console.print(f"Error: {e}", style="red", markup=False, highlight=False, soft_wrap=True)
        if verbose:
            err_console.print_exception()
        sys.exit(1)


@main.command()
@click.argument("statement_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-c", "--config", type=click.Path(exists=True, path_type=Path))
@click.option("--text-input", is_flag=True, help="STATEMENT_FILE is an already extracted text dump")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
def parse(statement_file: Path, config: Optional[Path], text_input: bool, verbose: bool):
    """
    Parse a statement and display its transactions and reconciliation.

    STATEMENT_FILE: Path to the statement PDF
    """
    try:
        recon_config = load_config(config)
        _setup_logging(recon_config, verbose)

        converter = StatementConverter(recon_config)
        statement = converter.parse_text(converter.load_text(statement_file, text_input))
        result = converter.reconciler.reconcile(statement)

    except StatementReconError as e:
        err_console.print(
            f"Error parsing statement: {e}", style="red", markup=False, highlight=False, soft_wrap=True
        )
        sys.exit(1)

    _display_transactions(statement, statement_file.name, recon_config.output.date_format)
    _display_reconciliation(statement, result)

    if not result.ok:
        sys.exit(1)


@main.command("init-config")
@click.option(
    "-o", "--output", type=click.Path(path_type=Path), default=Path("config.yaml")
)
def init_config(output: Path):
    """Generate a sample configuration file."""
    generate_default_config(output)
    console.print(f"[green]Configuration file generated: {output}[/green]")


def _setup_logging(config: ReconConfig, verbose: bool) -> None:
    """Configure logging from the config file, -v forcing DEBUG."""
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, config.logging.level.upper(), logging.INFO)
    log_file = Path(config.logging.file) if config.logging.file else None
    setup_logging(level, log_file=log_file, log_format=config.logging.format)


def _display_transactions(statement: Statement, filename: str, date_format: str) -> None:
    """Display parsed transactions in console."""
    table = Table(title=f"Statement Transactions: {filename}")
    table.add_column("Date")
    table.add_column("Type")
    table.add_column("Description")
    table.add_column("Amount", justify="right")

    for txn in statement.transactions:
        table.add_row(
            txn.date.strftime(date_format),
            txn.type.value,
            txn.merchant_name[:40] + "..." if len(txn.merchant_name) > 40 else txn.merchant_name,
            f"${txn.amount:,.2f}",
        )

    console.print(table)
    console.print(f"\nTotal transactions: {len(statement.transactions)}")


def _display_reconciliation(statement: Statement, result: ReconciliationResult) -> None:
    """Display reconciliation summary in console."""
    table = Table(title="Reconciliation Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Previous Balance", f"${statement.starting_balance:,.2f}")
    table.add_row("Transaction Total", f"${statement.transaction_total:,.2f}")
    table.add_row("Computed Balance", f"${result.computed_total:,.2f}")
    table.add_row("New Balance", f"${result.expected_total:,.2f}")
    table.add_row("Difference", f"${result.difference:,.2f}")
    table.add_row("Status", "[green]Reconciled[/green]" if result.ok else "[red]Mismatch[/red]")

    console.print(table)


if __name__ == "__main__":
    main()
