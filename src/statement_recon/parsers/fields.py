"""
Field-level parsing for statement tokens.
Normalizes monetary amounts and reconstructs transaction dates.
"""

from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union

from ..utils.exceptions import (
    AmountParseError,
    DateFieldMissingError,
    DateParseError,
)


def to_fixed(value: Union[Decimal, int, str], places: int = 2) -> Decimal:
    """
    Round a value to a fixed number of decimal places, half away from zero.

    Args:
        value: Value to round
        places: Number of decimal places

    Returns:
        Rounded Decimal
    """
    exponent = Decimal(1).scaleb(-places)
    return Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


def sanitize_amount(token: str) -> Decimal:
    """
    Normalize a textual monetary amount.

    Comma thousands separators are stripped and the result is rounded to
    cents, so "1,234.5" becomes Decimal("1234.50") and "-12.345" becomes
    Decimal("-12.35"). Applying it to its own output is a no-op.

    Args:
        token: Amount as printed on the statement

    Returns:
        Amount as a 2-place Decimal

    Raises:
        AmountParseError: If the token is not a valid number
    """
    cleaned = token.replace(",", "").strip()
    try:
        amount = Decimal(cleaned)
    except InvalidOperation as e:
        raise AmountParseError(f"Invalid amount: {token!r}") from e

    if not amount.is_finite():
        raise AmountParseError(f"Invalid amount: {token!r}")

    try:
        return to_fixed(amount)
    except InvalidOperation as e:
        raise AmountParseError(f"Amount out of range: {token!r}") from e


def resolve_date(
    day: Optional[str], month: Optional[str], year: Optional[str]
) -> date:
    """
    Build a calendar date from separately captured tokens.

    Args:
        day: Day of month token
        month: Month token
        year: Four digit year token

    Returns:
        Python date object

    Raises:
        DateFieldMissingError: If any token is absent
        DateParseError: If a token is not an integer or the date is invalid
    """
    missing = [
        name
        for name, token in (("day", day), ("month", month), ("year", year))
        if token is None or not token.strip()
    ]
    if missing:
        raise DateFieldMissingError(f"Missing date field(s): {', '.join(missing)}")

    try:
        d = int(day)
        m = int(month)
        y = int(year)
    except ValueError as e:
        raise DateParseError(f"Invalid date fields {month}/{day}/{year}: {e}") from e

    try:
        return date(y, m, d)
    except ValueError as e:
        raise DateParseError(f"Invalid date {month}/{day}/{year}: {e}") from e
