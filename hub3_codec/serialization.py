"""Dictionary and JSON mapping for payment records and invoices."""

from dataclasses import asdict, fields
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping

from hub3_codec.models.invoice import Invoice
from hub3_codec.models.payment import PaymentRecord

# Keys used by the legacy payment form and its saved history entries
LEGACY_KEYS = {
    "IBAN": "iban",
    "Primatelj": "receiver_name",
    "Iznos": "amount",
    "OpisPlacanja": "payment_description",
    "ModelPlacanja": "payment_model",
    "PozivNaBroj": "reference_number",
    "ImePlatitelja": "payer_name",
    "AdresaPlatitelja": "payer_address",
    "SjedistePlatitelja": "payer_city",
    "AdresaPrimatelja": "receiver_address",
    "SjedistePrimatelja": "receiver_city",
    "SifraNamjene": "purpose_code",
}

_RECORD_FIELDS = {f.name for f in fields(PaymentRecord)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, (datetime, date)):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple, set, frozenset)):
        return [serialize_value(v) for v in value]
    return value


def record_to_dict(record: PaymentRecord) -> dict[str, Any]:
    """Flat snake_case dict of a payment record."""
    return {f.name: serialize_value(getattr(record, f.name)) for f in fields(record)}


def invoice_to_dict(invoice: Invoice) -> dict[str, Any]:
    """Invoice as a dict, with its items as nested dicts."""
    return {key: serialize_value(value) for key, value in asdict(invoice).items()}


def record_from_dict(data: Mapping[str, Any]) -> PaymentRecord:
    """Build a PaymentRecord from stored or submitted data.

    Accepts snake_case attribute names as well as the legacy form keys.
    Unknown keys are ignored, and ``None`` becomes an empty string for text
    fields. Values are not checked here; that is the codec's job. A missing
    amount stays ``None`` so validation reports it.
    """
    values: dict[str, Any] = {}
    for key, value in data.items():
        name = LEGACY_KEYS.get(key, key)
        if name in _RECORD_FIELDS:
            values[name] = value

    for name in _RECORD_FIELDS - {"amount"}:
        if values.get(name) is None:
            values[name] = ""
    values.setdefault("amount", None)

    return PaymentRecord(**values)
