"""Validation rules for HUB-3 payment records.

Every rule is evaluated and the violations are unioned, so a caller can show
every problem with the input at once.
"""

from __future__ import annotations

import logging
import re

from hub3_codec.codec.charset import INVALID_LENGTH, payload_length
from hub3_codec.config import CodecConfig
from hub3_codec.models.codes import ACCEPTED_PAYMENT_MODELS, PURPOSE_CODES
from hub3_codec.models.enums import FieldType, PaymentField, ViolationKind
from hub3_codec.models.payment import FIELD_SPECS, PaymentRecord, ValidationOutcome, Violation
from hub3_codec.validators.iban import validate_iban

logger = logging.getLogger(__name__)

TEXT_FIELDS: tuple[PaymentField, ...] = tuple(
    payment_field
    for payment_field, spec in FIELD_SPECS.items()
    if spec.field_type == FieldType.TEXT and spec.max_length is not None
)

REFERENCE_MAX_LENGTH = 22
# Up to three digit groups (P1-P2-P3) joined by single hyphens
_REFERENCE_PATTERN = re.compile(r"[0-9]+(?:-[0-9]+){0,2}")


def validate(record: PaymentRecord, config: CodecConfig | None = None) -> ValidationOutcome:
    """Check ``record`` against the HUB-3 field rules.

    Parameters
    ----------
    record : PaymentRecord
        Payment values to check.
    config : CodecConfig | None
        Codec settings; defaults are used when omitted.

    Returns
    -------
    ValidationOutcome
        Every violated rule. Empty when the record can be encoded.
    """
    config = config or CodecConfig()
    violations: set[Violation] = set()

    violations |= check_amount(record.amount)
    for payment_field in TEXT_FIELDS:
        violations |= check_text(payment_field, record.value_of(payment_field))
    violations |= check_iban(record.iban)
    violations |= check_payment_model(record.payment_model)
    violations |= check_reference_number(record.reference_number, config)
    violations |= check_purpose_code(record.purpose_code, config)

    outcome = ValidationOutcome(frozenset(violations))
    if not outcome.is_valid:
        logger.debug("Payment record rejected: %s", ", ".join(outcome.tags))
    return outcome


def _is_blank(value: object) -> bool:
    return value is None or value == ""


def check_amount(amount: object) -> set[Violation]:
    """Amount must be a non-negative int of at most 15 digits."""
    if amount is None:
        return {Violation(PaymentField.AMOUNT, ViolationKind.MISSING)}
    if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
        return {Violation(PaymentField.AMOUNT, ViolationKind.INVALID)}
    if payload_length(str(amount)) > FIELD_SPECS[PaymentField.AMOUNT].max_length:
        return {Violation(PaymentField.AMOUNT, ViolationKind.TOO_LONG)}
    return set()


def check_text(payment_field: PaymentField, value: object) -> set[Violation]:
    """Length and character-set rule for a length-limited text field.

    Empty optional fields are skipped; empty required fields are missing.
    Anything that is not a string is invalid.
    """
    spec = FIELD_SPECS[payment_field]
    if _is_blank(value):
        if spec.required:
            return {Violation(payment_field, ViolationKind.MISSING)}
        return set()
    if not isinstance(value, str):
        return {Violation(payment_field, ViolationKind.INVALID)}

    length = payload_length(value)
    if length == INVALID_LENGTH:
        return {Violation(payment_field, ViolationKind.INVALID_CHARS)}
    if length > spec.max_length:
        return {Violation(payment_field, ViolationKind.TOO_LONG)}
    return set()


def check_iban(iban: object) -> set[Violation]:
    if _is_blank(iban):
        return {Violation(PaymentField.IBAN, ViolationKind.MISSING)}
    if not isinstance(iban, str) or not validate_iban(iban):
        return {Violation(PaymentField.IBAN, ViolationKind.INVALID)}
    return set()


def check_payment_model(payment_model: object) -> set[Violation]:
    if _is_blank(payment_model):
        return {Violation(PaymentField.PAYMENT_MODEL, ViolationKind.MISSING)}
    if not isinstance(payment_model, str) or payment_model not in ACCEPTED_PAYMENT_MODELS:
        return {Violation(PaymentField.PAYMENT_MODEL, ViolationKind.INVALID)}
    return set()


def check_reference_number(reference_number: object, config: CodecConfig) -> set[Violation]:
    """Reference number is required and limited to the payload alphabet.

    Its shape is only checked on request.
    """
    if _is_blank(reference_number):
        return {Violation(PaymentField.REFERENCE_NUMBER, ViolationKind.MISSING)}
    if not isinstance(reference_number, str):
        return {Violation(PaymentField.REFERENCE_NUMBER, ViolationKind.INVALID)}
    if payload_length(reference_number) == INVALID_LENGTH:
        return {Violation(PaymentField.REFERENCE_NUMBER, ViolationKind.INVALID_CHARS)}
    if config.enforce_reference_policy and not is_reference_number_valid(reference_number):
        return {Violation(PaymentField.REFERENCE_NUMBER, ViolationKind.INVALID)}
    return set()


def is_reference_number_valid(reference_number: str) -> bool:
    """HUB-3 reference shape: up to 22 characters, digit groups joined by hyphens."""
    return (
        len(reference_number) <= REFERENCE_MAX_LENGTH
        and _REFERENCE_PATTERN.fullmatch(reference_number) is not None
    )


def check_purpose_code(purpose_code: object, config: CodecConfig) -> set[Violation]:
    """Optional code from the purpose code table.

    With the table check switched off any code passes, as long as it stays
    within the payload alphabet.
    """
    if _is_blank(purpose_code):
        return set()
    if not isinstance(purpose_code, str):
        return {Violation(PaymentField.PURPOSE_CODE, ViolationKind.INVALID)}
    if not config.validate_purpose_code:
        if payload_length(purpose_code) == INVALID_LENGTH:
            return {Violation(PaymentField.PURPOSE_CODE, ViolationKind.INVALID_CHARS)}
        return set()
    if purpose_code not in PURPOSE_CODES:
        return {Violation(PaymentField.PURPOSE_CODE, ViolationKind.INVALID)}
    return set()
