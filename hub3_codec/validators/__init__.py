"""Check-digit validators for IBAN and OIB."""

from hub3_codec.validators.iban import (
    iban_check_digits,
    iban_to_integer,
    normalize_iban,
    validate_iban,
)
from hub3_codec.validators.oib import OibValidation, format_oib, oib_check_digit, validate_oib

__all__ = [
    "OibValidation",
    "format_oib",
    "iban_check_digits",
    "iban_to_integer",
    "normalize_iban",
    "oib_check_digit",
    "validate_iban",
    "validate_oib",
]
