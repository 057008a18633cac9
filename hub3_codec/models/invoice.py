"""Invoice models feeding payment records."""

from dataclasses import dataclass, field


@dataclass
class InvoiceItem:
    """Single invoice line. ``unit_price`` is in minor units (cents)."""

    description: str
    quantity: int
    unit_price: int


@dataclass
class Invoice:
    """Invoice issued by a small business (obrt) to a customer.

    The issuing company is the payment receiver, the customer is the payer.
    """

    company_name: str
    company_iban: str
    invoice_number: str  # e.g. 1-1-25
    company_address: str = ""
    company_city: str = ""  # postal code and city
    company_oib: str = ""
    company_phone: str = ""
    customer_name: str = ""
    customer_address: str = ""
    customer_city: str = ""
    customer_oib: str = ""
    reference_number: str = ""
    payment_model: str = "00"
    items: list[InvoiceItem] = field(default_factory=list)
