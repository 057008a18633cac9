"""Enumeration types for HUB-3 payment data."""

from enum import Enum


class PaymentField(str, Enum):
    """Named fields of a HUB-3 payment order.

    Declaration order is the reporting order for violations, not the
    payload order.
    """

    AMOUNT = "amount"
    PAYER_NAME = "payer-name"
    PAYER_ADDRESS = "payer-address"
    PAYER_CITY = "payer-city"
    RECEIVER_NAME = "receiver-name"
    RECEIVER_ADDRESS = "receiver-address"
    RECEIVER_CITY = "receiver-city"
    IBAN = "iban"
    PAYMENT_MODEL = "payment-model"
    REFERENCE_NUMBER = "reference-number"
    PURPOSE_CODE = "purpose-code"
    PAYMENT_DESCRIPTION = "payment-description"


class FieldType(str, Enum):
    TEXT = "TEXT"
    MINOR_UNITS = "MINOR_UNITS"
    CODE = "CODE"


class ViolationKind(str, Enum):
    MISSING = "missing"
    TOO_LONG = "too-long"
    INVALID_CHARS = "invalid-chars"
    INVALID = "invalid"


class OibFailure(str, Enum):
    LENGTH = "length"
    CHARSET = "charset"
    CHECKSUM = "checksum"
