"""Tests for statement assembly and ordering."""

from datetime import date
from decimal import Decimal

import pytest

from statement_recon.matching.assembler import StatementAssembler, sort_transactions
from statement_recon.models.statement import (
    RawStatement,
    RawTransaction,
    Transaction,
    TransactionType,
)
from statement_recon.utils.exceptions import (
    AmountParseError,
    DateFieldMissingError,
    DateParseError,
)


def raw_statement(*transactions, year="2023", previous="100.00", new="104.50"):
    return RawStatement(
        transactions=list(transactions),
        year=year,
        previous_balance=previous,
        new_balance=new,
    )


def txn(month, day, description="MERCHANT", amount="1.00"):
    return RawTransaction(month=month, day=day, description=description, amount=amount)


class TestStatementAssembler:
    def test_builds_typed_transactions(self):
        statement = StatementAssembler().assemble(
            raw_statement(txn("03", "01", "COFFEE SHOP", "4.50"))
        )

        assert statement.transactions == [
            Transaction(amount=Decimal("4.50"), merchant_name="COFFEE SHOP", date=date(2023, 3, 1))
        ]
        assert statement.starting_balance == Decimal("100.00")
        assert statement.ending_balance == Decimal("104.50")

    def test_sorts_most_recent_first(self):
        statement = StatementAssembler().assemble(
            raw_statement(txn("1", "1"), txn("3", "1"), txn("2", "1"))
        )
        assert [t.date for t in statement.transactions] == [
            date(2023, 3, 1),
            date(2023, 2, 1),
            date(2023, 1, 1),
        ]

    def test_equal_dates_keep_scan_order(self):
        statement = StatementAssembler().assemble(
            raw_statement(txn("3", "1", "FIRST"), txn("3", "2", "LATER"), txn("3", "1", "SECOND"))
        )
        assert [t.merchant_name for t in statement.transactions] == ["LATER", "FIRST", "SECOND"]

    def test_statement_year_applies_to_every_transaction(self):
        statement = StatementAssembler().assemble(
            raw_statement(txn("12", "28"), txn("01", "03"), year="2025")
        )
        # December entries on a January statement land in the statement year
        assert [t.date for t in statement.transactions] == [date(2025, 12, 28), date(2025, 1, 3)]

    def test_custom_year_policy(self):
        def previous_year_for_december(raw, statement_year):
            if raw.month == "12":
                return str(int(statement_year) - 1)
            return statement_year

        statement = StatementAssembler(previous_year_for_december).assemble(
            raw_statement(txn("12", "28"), txn("01", "03"), year="2025")
        )
        assert [t.date for t in statement.transactions] == [date(2025, 1, 3), date(2024, 12, 28)]

    def test_bad_amount_aborts(self):
        assembler = StatementAssembler()
        with pytest.raises(AmountParseError, match="COFFEE SHOP"):
            assembler.assemble(raw_statement(txn("3", "1"), txn("3", "2", "COFFEE SHOP", "4..50")))

    def test_missing_year_aborts(self):
        with pytest.raises(DateFieldMissingError):
            StatementAssembler().assemble(raw_statement(txn("3", "1"), year=None))

    def test_invalid_date_aborts(self):
        with pytest.raises(DateParseError):
            StatementAssembler().assemble(raw_statement(txn("2", "30")))

    def test_no_transactions_needs_no_year(self):
        statement = StatementAssembler().assemble(raw_statement(year=None, new="100.00"))
        assert statement.transactions == []

    def test_bad_balance_aborts(self):
        with pytest.raises(AmountParseError, match="New Balance"):
            StatementAssembler().assemble(raw_statement(new="1.2.3"))


class TestTransaction:
    def test_type_from_sign(self):
        payment = Transaction(amount=Decimal("-10.00"), merchant_name="PAYMENT", date=date(2023, 1, 1))
        sale = Transaction(amount=Decimal("0.00"), merchant_name="ZERO", date=date(2023, 1, 1))
        assert payment.type is TransactionType.PAYMENT
        assert sale.type is TransactionType.SALE

    def test_transactions_are_immutable(self):
        t = Transaction(amount=Decimal("1.00"), merchant_name="X", date=date(2023, 1, 1))
        with pytest.raises(AttributeError):
            t.amount = Decimal("2.00")


def test_sort_transactions_descending():
    transactions = [
        Transaction(amount=Decimal("1.00"), merchant_name=str(d), date=d)
        for d in (date(2023, 1, 1), date(2023, 3, 1), date(2023, 2, 1))
    ]
    assert [t.date for t in sort_transactions(transactions)] == [
        date(2023, 3, 1),
        date(2023, 2, 1),
        date(2023, 1, 1),
    ]
