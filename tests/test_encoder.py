"""Tests for HUB-3 payload serialization."""

from dataclasses import replace

import pytest

from hub3_codec.codec.encoder import HEADER, encode, encode_amount, payload_lines
from hub3_codec.config import CodecConfig
from hub3_codec.exceptions import Hub3Error, PaymentValidationError
from hub3_codec.models import PaymentField, PaymentRecord, ViolationKind


class TestEncode:
    """Tests for encode."""

    def test_minimal_record_payload(self, sample_record: PaymentRecord) -> None:
        expected = (
            "HRVHUB30\n"
            "EUR\n"
            "000000000003900\n"
            "\n"
            "\n"
            "\n"
            "Obrt Primjer\n"
            "\n"
            "\n"
            "HR1210010051863000160\n"
            "HR00\n"
            "12345\n"
            "\n"
            "Usluga\n"
        )

        assert encode(sample_record) == expected

    def test_full_record_payload(self, full_record: PaymentRecord) -> None:
        expected = (
            "HRVHUB30\n"
            "EUR\n"
            "000000000125050\n"
            "Ivan Horvat\n"
            "Ilica 1\n"
            "10000 Zagreb\n"
            "Obrt Šišmiš\n"
            "Vukovarska 12\n"
            "21000 Split\n"
            "HR1210010051863000160\n"
            "HR01\n"
            "1-1-25\n"
            "SCVE\n"
            "Račun 1-1-25\n"
        )

        assert encode(full_record) == expected

    def test_fourteen_lines_each_terminated(self, full_record: PaymentRecord) -> None:
        payload = encode(full_record)

        assert payload.endswith("\n")
        assert payload.count("\n") == 14
        assert payload.split("\n")[:-1] == payload_lines(full_record)

    def test_deterministic(self, full_record: PaymentRecord) -> None:
        assert encode(full_record) == encode(replace(full_record))

    def test_purpose_code_changes_only_its_line(self, full_record: PaymentRecord) -> None:
        before = encode(full_record).split("\n")
        after = encode(replace(full_record, purpose_code="RENT")).split("\n")

        changed = [i for i, (a, b) in enumerate(zip(before, after)) if a != b]
        assert changed == [12]
        assert after[12] == "RENT"

    def test_custom_currency_and_prefix(self, sample_record: PaymentRecord) -> None:
        config = CodecConfig(currency="HRK", model_prefix="SI")

        lines = encode(sample_record, config).split("\n")

        assert lines[0] == HEADER
        assert lines[1] == "HRK"
        assert lines[10] == "SI00"

    def test_none_optional_fields_encode_as_empty(self, sample_record: PaymentRecord) -> None:
        record = replace(sample_record, payer_name=None, purpose_code=None)

        lines = encode(record).split("\n")

        assert lines[3] == ""
        assert lines[12] == ""

    def test_invalid_record_raises(self, sample_record: PaymentRecord) -> None:
        record = replace(sample_record, iban="HR1310010051863000160", amount=-5)

        with pytest.raises(PaymentValidationError) as exc_info:
            encode(record)

        error = exc_info.value
        assert isinstance(error, Hub3Error)
        assert error.outcome.has(PaymentField.IBAN, ViolationKind.INVALID)
        assert [v.tag for v in error.violations] == ["amount-invalid", "iban-invalid"]
        assert "amount-invalid, iban-invalid" in str(error)

    def test_unknown_purpose_code_encodes_when_check_disabled(
        self, sample_record: PaymentRecord
    ) -> None:
        config = CodecConfig(validate_purpose_code=False)

        lines = encode(replace(sample_record, purpose_code="ZZZZ"), config).split("\n")

        assert lines[12] == "ZZZZ"


class TestEncodeAmount:
    """Tests for encode_amount."""

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (0, "000000000000000"),
            (3900, "000000000003900"),
            (999_999_999_999_999, "999999999999999"),
        ],
    )
    def test_zero_padding(self, amount: int, expected: str) -> None:
        assert encode_amount(amount) == expected


class TestEncodeRejectsUnsafeValues:
    """Records that would break the line structure are never encoded."""

    @pytest.mark.parametrize("reference", ["12\n34", "12😀"])
    def test_reference_outside_alphabet(self, sample_record: PaymentRecord, reference: str) -> None:
        with pytest.raises(PaymentValidationError) as exc_info:
            encode(replace(sample_record, reference_number=reference))

        assert exc_info.value.outcome.tags == ["reference-number-invalid-chars"]

    def test_purpose_code_outside_alphabet(self, sample_record: PaymentRecord) -> None:
        config = CodecConfig(validate_purpose_code=False)

        with pytest.raises(PaymentValidationError):
            encode(replace(sample_record, purpose_code="X\nY"), config)

    def test_non_string_reference(self, sample_record: PaymentRecord) -> None:
        with pytest.raises(PaymentValidationError) as exc_info:
            encode(replace(sample_record, reference_number=12345))

        assert exc_info.value.outcome.tags == ["reference-number-invalid"]

    def test_lowercase_iban_encoded_uppercase(
        self, sample_record: PaymentRecord, valid_iban: str
    ) -> None:
        payload = encode(replace(sample_record, iban=valid_iban.lower()))

        assert payload.split("\n")[9] == valid_iban
        assert payload == encode(sample_record)
