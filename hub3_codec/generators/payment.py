"""Sample payment record and invoice generators.

Every generated record passes validation: IBANs and OIBs carry computed
check digits and all text is fitted to the HUB-3 alphabet and limits.
"""

from __future__ import annotations

import random
from typing import Iterator

from faker import Faker

from hub3_codec.codec.charset import fit_to_length
from hub3_codec.generators.base import BaseGenerator
from hub3_codec.models.codes import PAYMENT_MODELS, PURPOSE_CODES
from hub3_codec.models.enums import PaymentField
from hub3_codec.models.invoice import Invoice, InvoiceItem
from hub3_codec.models.payment import FIELD_SPECS, PaymentRecord
from hub3_codec.validators.iban import iban_check_digits
from hub3_codec.validators.oib import oib_check_digit

CROATIAN_BANK_CODES = {
    "2340009": "Privredna banka Zagreb",
    "2360000": "Zagrebačka banka",
    "2402006": "Erste & Steiermärkische Bank",
    "2484008": "Raiffeisenbank Austria",
    "2390001": "Hrvatska poštanska banka",
    "2407000": "OTP banka",
    "2500009": "Addiko Bank",
}

SERVICE_DESCRIPTIONS = [
    "Usluga",
    "Najam prostora",
    "Izrada web stranice",
    "Održavanje računala",
    "Knjigovodstvene usluge",
    "Savjetovanje",
    "Prijevoz robe",
    "Čišćenje poslovnog prostora",
    "Grafički dizajn",
    "Servis vozila",
]


def generate_iban(bank_code: str | None = None) -> str:
    """Generate a valid Croatian IBAN (HR + 2 check digits + 17 digits)."""
    bank = bank_code or random.choice(list(CROATIAN_BANK_CODES))
    account = "".join(str(random.randint(0, 9)) for _ in range(10))
    bban = bank + account
    return "HR" + iban_check_digits("HR", bban) + bban


def generate_oib() -> str:
    """Generate a valid OIB (11 digits) using pure arithmetic."""
    digits = "".join(str(random.randint(0, 9)) for _ in range(10))
    return digits + str(oib_check_digit(digits))


def _reference_number(fake: Faker) -> str:
    """Invoice-style reference: number-device-year, e.g. ``17-1-25``."""
    year = fake.date_this_decade().strftime("%y")
    return f"{random.randint(1, 999)}-{random.randint(1, 9)}-{year}"


def _postal_city(fake: Faker) -> str:
    return f"{fake.postcode()} {fake.city()}"


def _fit(payment_field: PaymentField, text: str, fallback: str = "") -> str:
    """Fit ``text`` to the field's limit, using ``fallback`` if nothing is left."""
    return fit_to_length(text, FIELD_SPECS[payment_field].max_length) or fallback


class PaymentRecordGenerator(BaseGenerator):
    """Generate payment records that always validate."""

    MODEL_CHOICES = ["00", "99", "other"]
    MODEL_WEIGHTS = [0.6, 0.2, 0.2]

    PAYER_RATE = 0.7
    RECEIVER_ADDRESS_RATE = 0.8
    PURPOSE_CODE_RATE = 0.3

    # 1,00 to 5.000,00 EUR
    AMOUNT_RANGE = (100, 500_000)

    def generate(self) -> PaymentRecord:
        """Generate a single payment record.

        Returns
        -------
        PaymentRecord
            Generated record.
        """
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[PaymentRecord]:
        """Generate multiple payment records.

        Parameters
        ----------
        count : int
            Number of records to generate.

        Yields
        ------
        PaymentRecord
            Generated records.
        """
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> PaymentRecord:
        """Generate a single payment record."""
        model = random.choices(self.MODEL_CHOICES, weights=self.MODEL_WEIGHTS, k=1)[0]
        if model == "other":
            model = random.choice(PAYMENT_MODELS)

        record = PaymentRecord(
            iban=generate_iban(),
            receiver_name=_fit(PaymentField.RECEIVER_NAME, self.fake.company(), "Obrt"),
            amount=random.randint(*self.AMOUNT_RANGE),
            payment_description=_fit(
                PaymentField.PAYMENT_DESCRIPTION, random.choice(SERVICE_DESCRIPTIONS)
            ),
            payment_model=model,
            reference_number=_reference_number(self.fake),
        )

        if random.random() < self.PAYER_RATE:
            record.payer_name = _fit(PaymentField.PAYER_NAME, self.fake.name())
            record.payer_address = _fit(PaymentField.PAYER_ADDRESS, self.fake.street_address())
            record.payer_city = _fit(PaymentField.PAYER_CITY, _postal_city(self.fake))

        if random.random() < self.RECEIVER_ADDRESS_RATE:
            record.receiver_address = _fit(
                PaymentField.RECEIVER_ADDRESS, self.fake.street_address()
            )
            record.receiver_city = _fit(PaymentField.RECEIVER_CITY, _postal_city(self.fake))

        if random.random() < self.PURPOSE_CODE_RATE:
            record.purpose_code = random.choice(list(PURPOSE_CODES))

        return record


class InvoiceGenerator(BaseGenerator):
    """Generate complete invoices from a small business to a customer."""

    MAX_ITEMS = 4
    # 5,00 to 200,00 EUR per unit
    UNIT_PRICE_RANGE = (500, 20_000)

    def generate(self) -> Invoice:
        """Generate a single invoice."""
        return self._generate_invoice()

    def generate_batch(self, count: int) -> Iterator[Invoice]:
        """Generate multiple invoices."""
        for _ in range(count):
            yield self._generate_invoice()

    def _generate_invoice(self) -> Invoice:
        items = [
            InvoiceItem(
                description=random.choice(SERVICE_DESCRIPTIONS),
                quantity=random.randint(1, 5),
                unit_price=random.randint(*self.UNIT_PRICE_RANGE),
            )
            for _ in range(random.randint(1, self.MAX_ITEMS))
        ]
        return Invoice(
            company_name=_fit(PaymentField.RECEIVER_NAME, self.fake.company(), "Obrt"),
            company_iban=generate_iban(),
            invoice_number=_reference_number(self.fake),
            company_address=_fit(PaymentField.RECEIVER_ADDRESS, self.fake.street_address()),
            company_city=_fit(PaymentField.RECEIVER_CITY, _postal_city(self.fake)),
            company_oib=generate_oib(),
            company_phone=self.fake.phone_number(),
            customer_name=_fit(PaymentField.PAYER_NAME, self.fake.name()),
            customer_address=_fit(PaymentField.PAYER_ADDRESS, self.fake.street_address()),
            customer_city=_fit(PaymentField.PAYER_CITY, _postal_city(self.fake)),
            customer_oib=generate_oib(),
            items=items,
        )
