"""Domain models for HUB-3 payment orders."""

from hub3_codec.models.codes import ACCEPTED_PAYMENT_MODELS, PAYMENT_MODELS, PURPOSE_CODES
from hub3_codec.models.enums import FieldType, OibFailure, PaymentField, ViolationKind
from hub3_codec.models.invoice import Invoice, InvoiceItem
from hub3_codec.models.payment import (
    FIELD_SPECS,
    FieldSpec,
    PaymentRecord,
    ValidationOutcome,
    Violation,
)

__all__ = [
    "ACCEPTED_PAYMENT_MODELS",
    "FIELD_SPECS",
    "FieldSpec",
    "FieldType",
    "Invoice",
    "InvoiceItem",
    "OibFailure",
    "PAYMENT_MODELS",
    "PURPOSE_CODES",
    "PaymentField",
    "PaymentRecord",
    "ValidationOutcome",
    "Violation",
    "ViolationKind",
]
