"""Sample data generators for payment records and invoices."""

from hub3_codec.generators.payment import (
    InvoiceGenerator,
    PaymentRecordGenerator,
    generate_iban,
    generate_oib,
)

__all__ = [
    "InvoiceGenerator",
    "PaymentRecordGenerator",
    "generate_iban",
    "generate_oib",
]
