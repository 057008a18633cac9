"""Payment record, field table and validation outcome."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from hub3_codec.models.enums import FieldType, PaymentField, ViolationKind


@dataclass(frozen=True)
class FieldSpec:
    """Static description of one payment field.

    ``max_length`` is measured in payload units, where Croatian diacritics
    count twice. ``None`` means the field has no length rule of its own.
    """

    field_type: FieldType
    required: bool
    label: str
    max_length: int | None = None


FIELD_SPECS = MappingProxyType({
    PaymentField.AMOUNT: FieldSpec(FieldType.MINOR_UNITS, True, "Iznos plaćanja", 15),
    PaymentField.PAYER_NAME: FieldSpec(FieldType.TEXT, False, "Ime platitelja", 30),
    PaymentField.PAYER_ADDRESS: FieldSpec(FieldType.TEXT, False, "Adresa platitelja", 30),
    PaymentField.PAYER_CITY: FieldSpec(FieldType.TEXT, False, "Sjedište platitelja", 30),
    PaymentField.RECEIVER_NAME: FieldSpec(FieldType.TEXT, True, "Naziv primatelja plaćanja", 30),
    PaymentField.RECEIVER_ADDRESS: FieldSpec(FieldType.TEXT, False, "Adresa primatelja", 30),
    PaymentField.RECEIVER_CITY: FieldSpec(FieldType.TEXT, False, "Sjedište primatelja", 30),
    PaymentField.IBAN: FieldSpec(FieldType.CODE, True, "Broj bankovnog računa (IBAN)"),
    PaymentField.PAYMENT_MODEL: FieldSpec(FieldType.CODE, True, "Model plaćanja"),
    PaymentField.REFERENCE_NUMBER: FieldSpec(FieldType.TEXT, True, "Poziv na broj"),
    PaymentField.PURPOSE_CODE: FieldSpec(FieldType.CODE, False, "Šifra namjene"),
    PaymentField.PAYMENT_DESCRIPTION: FieldSpec(FieldType.TEXT, True, "Opis plaćanja", 35),
})

# PaymentRecord attribute holding each field
FIELD_ATTRIBUTES = MappingProxyType({
    payment_field: payment_field.value.replace("-", "_") for payment_field in PaymentField
})


@dataclass
class PaymentRecord:
    """All values of one HUB-3 payment order.

    ``amount`` is in minor currency units (cents): 39,00 EUR is ``3900``.
    Optional text fields are empty strings when absent.
    """

    iban: str
    receiver_name: str
    amount: int
    payment_description: str
    payment_model: str
    reference_number: str
    payer_name: str = ""
    payer_address: str = ""
    payer_city: str = ""
    receiver_address: str = ""
    receiver_city: str = ""
    purpose_code: str = ""

    def value_of(self, payment_field: PaymentField) -> Any:
        """Return the value stored for ``payment_field``."""
        return getattr(self, FIELD_ATTRIBUTES[payment_field])


_FIELD_ORDER = {payment_field: index for index, payment_field in enumerate(PaymentField)}
_KIND_ORDER = {kind: index for index, kind in enumerate(ViolationKind)}

_MESSAGES = MappingProxyType({
    (PaymentField.AMOUNT, ViolationKind.INVALID): "Neispravan format cijene.",
    (PaymentField.AMOUNT, ViolationKind.TOO_LONG): "Cijena prelazi maksimalnu duljinu.",
    (PaymentField.PAYER_NAME, ViolationKind.INVALID_CHARS): "Neispravno ime platitelja.",
    (PaymentField.PAYER_NAME, ViolationKind.TOO_LONG): "Ime platitelja prelazi maksimalnu duljinu.",
    (PaymentField.PAYER_ADDRESS, ViolationKind.INVALID_CHARS): "Neispravna adresa platitelja.",
    (PaymentField.PAYER_ADDRESS, ViolationKind.TOO_LONG): "Adresa platitelja prelazi maksimalnu duljinu.",
    (PaymentField.PAYER_CITY, ViolationKind.INVALID_CHARS): "Neispravno sjedište platitelja.",
    (PaymentField.PAYER_CITY, ViolationKind.TOO_LONG): "Sjedište platitelja prelazi maksimalnu duljinu.",
    (PaymentField.RECEIVER_NAME, ViolationKind.INVALID_CHARS): "Neispravno ime primatelja.",
    (PaymentField.RECEIVER_NAME, ViolationKind.TOO_LONG): "Ime primatelja prelazi maksimalnu duljinu.",
    (PaymentField.RECEIVER_ADDRESS, ViolationKind.INVALID_CHARS): "Neispravna adresa primatelja.",
    (PaymentField.RECEIVER_ADDRESS, ViolationKind.TOO_LONG): "Adresa primatelja prelazi maksimalnu duljinu.",
    (PaymentField.RECEIVER_CITY, ViolationKind.INVALID_CHARS): "Neispravno sjedište primatelja.",
    (PaymentField.RECEIVER_CITY, ViolationKind.TOO_LONG): "Sjedište primatelja prelazi maksimalnu duljinu.",
    (PaymentField.IBAN, ViolationKind.INVALID): "Neispravan IBAN.",
    (PaymentField.PAYMENT_MODEL, ViolationKind.INVALID): "Neispravan model plaćanja.",
    (PaymentField.REFERENCE_NUMBER, ViolationKind.INVALID): "Neispravan poziv na broj.",
    (PaymentField.REFERENCE_NUMBER, ViolationKind.INVALID_CHARS): "Poziv na broj sadrži nedozvoljene znakove.",
    (PaymentField.PURPOSE_CODE, ViolationKind.INVALID): "Neispravna šifra namjene.",
    (PaymentField.PURPOSE_CODE, ViolationKind.INVALID_CHARS): "Šifra namjene sadrži nedozvoljene znakove.",
    (PaymentField.PAYMENT_DESCRIPTION, ViolationKind.INVALID_CHARS): "Neispravan opis plaćanja.",
    (PaymentField.PAYMENT_DESCRIPTION, ViolationKind.TOO_LONG): "Opis plaćanja prelazi maksimalnu duljinu.",
})


@dataclass(frozen=True)
class Violation:
    """One failed rule: a (field, kind) pair."""

    field: PaymentField
    kind: ViolationKind

    @property
    def tag(self) -> str:
        """Stable identifier such as ``receiver-name-invalid-chars``."""
        return f"{self.field.value}-{self.kind.value}"

    @property
    def message(self) -> str:
        """User-facing (Croatian) description of the problem."""
        message = _MESSAGES.get((self.field, self.kind))
        if message is not None:
            return message
        label = FIELD_SPECS[self.field].label
        if self.kind == ViolationKind.MISSING:
            return f"Nedostaje obavezno polje: {label}."
        return f"Neispravno polje: {label}."

    def sort_key(self) -> tuple[int, int]:
        return _FIELD_ORDER[self.field], _KIND_ORDER[self.kind]


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating a payment record.

    Holds every violated rule at once so callers can report all problems
    together. An empty outcome means the record is valid.
    """

    violations: frozenset[Violation] = field(default_factory=frozenset)

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def tags(self) -> list[str]:
        """Violation tags in reporting order."""
        return [violation.tag for violation in self.sorted_violations()]

    def has(self, payment_field: PaymentField, kind: ViolationKind) -> bool:
        """Check whether a specific (field, kind) violation is present."""
        return Violation(payment_field, kind) in self.violations

    def sorted_violations(self) -> list[Violation]:
        return sorted(self.violations, key=Violation.sort_key)

    def messages(self) -> list[str]:
        """Messages for every violation, ready to be shown together."""
        return [violation.message for violation in self.sorted_violations()]
