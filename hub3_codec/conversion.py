"""Build payment records from invoices."""

from __future__ import annotations

from hub3_codec.models.invoice import Invoice
from hub3_codec.models.payment import PaymentRecord
from hub3_codec.validators.iban import normalize_iban
from hub3_codec.validators.oib import validate_oib

DEFAULT_DESCRIPTION = "N/A"

# Fields an invoice cannot be issued without, with their labels
REQUIRED_INVOICE_FIELDS = {
    "company_name": "Naziv obrta",
    "company_iban": "Broj računa obrta",
    "invoice_number": "Broj računa",
}

_OIB_FIELDS = {
    "company_oib": "OIB vlasnika",
    "customer_oib": "OIB kupca",
}


def invoice_total(invoice: Invoice) -> int:
    """Sum of all line totals, in cents."""
    return sum(item.quantity * item.unit_price for item in invoice.items)


def validate_invoice(invoice: Invoice) -> list[str]:
    """Describe everything that keeps ``invoice`` from being issued.

    Returns
    -------
    list[str]
        One entry per problem; empty when the invoice is complete.
    """
    if not invoice.items:
        return ["Stavke računa"]

    problems = []
    for index, item in enumerate(invoice.items, start=1):
        if not item.description or not item.description.strip():
            problems.append(f"Stavka {index}: Naziv robe/usluge")
        if not item.quantity or item.quantity <= 0:
            problems.append(f"Stavka {index}: Količina")
        if not item.unit_price or item.unit_price <= 0:
            problems.append(f"Stavka {index}: Cijena po jedinici")

    for attribute, label in REQUIRED_INVOICE_FIELDS.items():
        if not getattr(invoice, attribute):
            problems.append(label)

    for attribute, label in _OIB_FIELDS.items():
        oib = getattr(invoice, attribute)
        if oib:
            result = validate_oib(oib)
            if not result.valid:
                problems.append(f"{label}: {result.message}")

    return problems


def to_payment_record(
    invoice: Invoice,
    payment_model: str | None = None,
    purpose_code: str = "",
) -> PaymentRecord:
    """Map an invoice onto the payment the customer has to make.

    The issuing company is the receiver and the customer the payer. The
    first item's description becomes the payment description. The invoice
    number doubles as the reference number when present.

    Parameters
    ----------
    invoice : Invoice
        Source invoice.
    payment_model : str | None
        Overrides ``invoice.payment_model`` when given.
    purpose_code : str
        Optional purpose code, e.g. ``"SCVE"``.
    """
    description = invoice.items[0].description if invoice.items else DEFAULT_DESCRIPTION
    return PaymentRecord(
        iban=normalize_iban(invoice.company_iban),
        receiver_name=invoice.company_name,
        amount=invoice_total(invoice),
        payment_description=description,
        payment_model=payment_model or invoice.payment_model,
        reference_number=invoice.invoice_number or invoice.reference_number,
        payer_name=invoice.customer_name,
        payer_address=invoice.customer_address,
        payer_city=invoice.customer_city,
        receiver_address=invoice.company_address,
        receiver_city=invoice.company_city,
        purpose_code=purpose_code,
    )
