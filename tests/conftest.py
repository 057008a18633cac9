"""Pytest configuration and fixtures."""

import pytest

from hub3_codec.models import PaymentRecord


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def valid_iban() -> str:
    """Structurally valid Croatian IBAN."""
    return "HR1210010051863000160"


@pytest.fixture
def valid_oib() -> str:
    """OIB with a correct check digit."""
    return "69435151530"


@pytest.fixture
def sample_record(valid_iban: str) -> PaymentRecord:
    """Minimal valid payment record (required fields only)."""
    return PaymentRecord(
        iban=valid_iban,
        receiver_name="Obrt Primjer",
        amount=3900,
        payment_description="Usluga",
        payment_model="00",
        reference_number="12345",
    )


@pytest.fixture
def full_record(valid_iban: str) -> PaymentRecord:
    """Valid payment record with every optional field filled in."""
    return PaymentRecord(
        iban=valid_iban,
        receiver_name="Obrt Šišmiš",
        amount=125050,
        payment_description="Račun 1-1-25",
        payment_model="01",
        reference_number="1-1-25",
        payer_name="Ivan Horvat",
        payer_address="Ilica 1",
        payer_city="10000 Zagreb",
        receiver_address="Vukovarska 12",
        receiver_city="21000 Split",
        purpose_code="SCVE",
    )
