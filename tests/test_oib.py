"""Tests for OIB check-digit validation."""

import string

import pytest

from hub3_codec.models.enums import OibFailure
from hub3_codec.validators.oib import format_oib, oib_check_digit, validate_oib


class TestValidateOib:
    """Tests for validate_oib."""

    @pytest.mark.parametrize("oib", ["00000000001", "69435151530", "12345678903", "98765432106"])
    def test_valid_oibs(self, oib: str) -> None:
        result = validate_oib(oib)

        assert result.valid is True
        assert result.reason is None
        assert result.message is None

    def test_constructed_oib_is_valid(self) -> None:
        first_ten = "0000000000"
        oib = first_ten + str(oib_check_digit(first_ten))

        assert validate_oib(oib).valid is True

    def test_altering_last_digit_always_invalidates(self, valid_oib: str) -> None:
        for replacement in string.digits:
            if replacement == valid_oib[-1]:
                continue
            result = validate_oib(valid_oib[:-1] + replacement)
            assert result.valid is False
            assert result.reason == OibFailure.CHECKSUM

    @pytest.mark.parametrize("oib", ["6943515153", "694351515301", "", "1"])
    def test_wrong_length(self, oib: str) -> None:
        result = validate_oib(oib)

        assert result.valid is False
        assert result.reason == OibFailure.LENGTH

    @pytest.mark.parametrize("oib", ["6943515153A", "69435 51530", "6943515153٠"])
    def test_non_digit_content(self, oib: str) -> None:
        result = validate_oib(oib)

        assert result.valid is False
        assert result.reason == OibFailure.CHARSET

    def test_length_checked_before_charset(self) -> None:
        assert validate_oib("ABC").reason == OibFailure.LENGTH

    def test_each_reason_has_distinct_message(self) -> None:
        messages = {
            validate_oib("123").message,
            validate_oib("1234567890X").message,
            validate_oib("69435151531").message,
        }

        assert len(messages) == 3
        assert "11 znamenki" in validate_oib("123").message
        assert "kontrolna znamenka" in validate_oib("69435151531").message


class TestOibCheckDigit:
    """Tests for oib_check_digit."""

    def test_all_zeros(self) -> None:
        assert oib_check_digit("0000000000") == 1

    def test_known_value(self) -> None:
        assert oib_check_digit("6943515153") == 0

    def test_ignores_eleventh_digit(self) -> None:
        assert oib_check_digit("69435151539") == oib_check_digit("6943515153")


class TestFormatOib:
    """Tests for format_oib."""

    def test_strips_non_digits(self) -> None:
        assert format_oib("694-351 515 30") == "69435151530"

    def test_caps_at_eleven_digits(self) -> None:
        assert format_oib("6943515153012345") == "69435151530"

    def test_empty(self) -> None:
        assert format_oib("") == ""
