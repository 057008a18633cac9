"""Conversions between minor-unit amounts and their display forms.

Amounts live in integer cents everywhere inside the package. Display strings
use a comma as the decimal separator (``3900`` is shown as ``"39,00"``).
"""

import re
from decimal import Decimal

from hub3_codec.exceptions import AmountFormatError

MINOR_UNITS_PER_MAJOR = 100

_NOT_DIGIT_OR_COMMA = re.compile(r"[^0-9,]")


def format_amount(minor: int) -> str:
    """Render cents as ``"whole,cents"``: ``3900 -> "39,00"``."""
    sign = "-" if minor < 0 else ""
    whole, cents = divmod(abs(minor), MINOR_UNITS_PER_MAJOR)
    return f"{sign}{whole},{cents:02d}"


def parse_amount(display: str) -> int:
    """Parse a typed amount into cents.

    Everything except digits and commas is discarded. With a comma, the text
    before it is whole euros and the first two digits after it are cents
    (``"39,5" -> 3950``). Without one, the digits are whole euros
    (``"39" -> 3900``).
    """
    cleaned = _NOT_DIGIT_OR_COMMA.sub("", display)
    if "," in cleaned:
        parts = cleaned.split(",")
        whole = parts[0] or "0"
        cents = (parts[1] or "00").ljust(2, "0")[:2]
        return int(whole + cents)
    return int(cleaned or "0") * MINOR_UNITS_PER_MAJOR


def to_minor_units(value: Decimal) -> int:
    """Convert a major-unit Decimal to cents.

    Raises
    ------
    AmountFormatError
        If ``value`` has a fraction of a cent or is not finite.
    """
    if not value.is_finite():
        raise AmountFormatError(f"Amount {value} is not a finite number")
    minor = value * MINOR_UNITS_PER_MAJOR
    if minor != minor.to_integral_value():
        raise AmountFormatError(f"Amount {value} has more than two decimal places")
    return int(minor)


def from_minor_units(minor: int) -> Decimal:
    """Convert cents to a major-unit Decimal with two decimal places."""
    return (Decimal(minor) / MINOR_UNITS_PER_MAJOR).quantize(Decimal("0.01"))
