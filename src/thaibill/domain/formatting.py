"""Thai locale formatting for numbers and dates.

`format_number` renders amounts as fixed-point strings with thousands
separators. `format_date_thai` renders a calendar date with the Thai month
name and the Buddhist-era year.
"""

import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext

from thaibill.domain.errors import InvalidDateError

BUDDHIST_ERA_OFFSET = 543
MAX_DECIMALS = 100

THAI_MONTHS = (
    "มกราคม",
    "กุมภาพันธ์",
    "มีนาคม",
    "เมษายน",
    "พฤษภาคม",
    "มิถุนายน",
    "กรกฎาคม",
    "สิงหาคม",
    "กันยายน",
    "ตุลาคม",
    "พฤศจิกายน",
    "ธันวาคม",
)

# Matches each boundary followed by a multiple of three digits up to the end
# of the digit run.
_THOUSANDS_RE = re.compile(r"\B(?=(\d{3})+(?!\d))")


def format_number(value: int | float | Decimal, decimals: int = 2) -> str:
    """Format a number as fixed-point text with thousands separators.

    The exact value is rounded half away from zero to `decimals` places and a
    comma is inserted every three digits of the integer part. The fractional
    part is never separated.

    Args:
        value: The number to format.
        decimals: Number of fractional digits (0 to 100).

    Returns:
        str: The formatted number, e.g. `"1,234,567.50"`. Non-finite values
        render as `"NaN"`, `"Infinity"` or `"-Infinity"`.

    Raises:
        ValueError: If `decimals` is outside 0..100.

    Example:
        >>> format_number(1234567.5)
        '1,234,567.50'
    """
    if not 0 <= decimals <= MAX_DECIMALS:
        raise ValueError(f"decimals must be between 0 and {MAX_DECIMALS}")

    number = Decimal(value)
    if number.is_nan():
        return "NaN"
    if number.is_infinite():
        return "-Infinity" if number.is_signed() else "Infinity"
    if number.is_zero():
        number = abs(number)

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + decimals + 2)
        fixed = number.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)

    text = f"{fixed:f}"
    sign, digits = ("-", text[1:]) if text.startswith("-") else ("", text)
    integer, point, fraction = digits.partition(".")
    return f"{sign}{_THOUSANDS_RE.sub(',', integer)}{point}{fraction}"


def format_date_thai(value: str | date) -> str:
    """Convert a Gregorian date to the Thai Buddhist-era format.

    Args:
        value: An ISO-8601 date or date-time string, or a `date`/`datetime`.
            Calendar fields are used as written, without time-zone conversion.

    Returns:
        str: `"<day> <Thai month> <BE year>"`, e.g. `"15 มกราคม 2567"`.

    Raises:
        InvalidDateError: If `value` cannot be parsed as a date.
    """
    parsed = _parse_date(value)
    month = THAI_MONTHS[parsed.month - 1]
    return f"{parsed.day} {month} {parsed.year + BUDDHIST_ERA_OFFSET}"


def _parse_date(value: str | date) -> date:
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateError(value)
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise InvalidDateError(value) from e
