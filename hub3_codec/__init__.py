"""HUB-3 payment barcode payload codec with IBAN and OIB validation."""

from hub3_codec.codec import encode, payload_length, transliterate, validate
from hub3_codec.config import CodecConfig, Hub3Config
from hub3_codec.exceptions import (
    AmountFormatError,
    ConfigurationError,
    Hub3Error,
    InvalidCharacterError,
    PaymentValidationError,
)
from hub3_codec.models import PaymentField, PaymentRecord, ValidationOutcome, Violation, ViolationKind
from hub3_codec.validators import OibValidation, validate_iban, validate_oib

__all__ = [
    "AmountFormatError",
    "CodecConfig",
    "ConfigurationError",
    "Hub3Config",
    "Hub3Error",
    "InvalidCharacterError",
    "OibValidation",
    "PaymentField",
    "PaymentRecord",
    "PaymentValidationError",
    "ValidationOutcome",
    "Violation",
    "ViolationKind",
    "encode",
    "payload_length",
    "transliterate",
    "validate",
    "validate_iban",
    "validate_oib",
]
