"""Tests for HUB-3 character set accounting."""

import pytest

from hub3_codec.codec.charset import (
    DOUBLE_UNIT_CHARACTERS,
    INVALID_LENGTH,
    SINGLE_UNIT_CHARACTERS,
    fit_to_length,
    payload_length,
    transliterate,
)


class TestPayloadLength:
    """Tests for payload_length."""

    def test_diacritics_count_double(self) -> None:
        assert payload_length("ŠĐČĆŽ") == 10
        assert payload_length("šđčćž") == 10

    def test_all_double_unit_characters(self) -> None:
        text = "".join(sorted(DOUBLE_UNIT_CHARACTERS))
        assert payload_length(text) == 2 * len(text)

    def test_ascii_text(self) -> None:
        assert payload_length("Obrt Primjer") == 12

    def test_punctuation_counts_single(self) -> None:
        assert payload_length(",.:-+?'/()") == 10

    def test_mixed_text(self) -> None:
        # Č and ć count twice
        assert payload_length("Čakovec, Ćirilova 5") == 21

    @pytest.mark.parametrize("text", ["Hello 😀", "A&B", "Müller", "Tab\there", "Line\nbreak", "50%"])
    def test_disallowed_character_gives_sentinel(self, text: str) -> None:
        assert payload_length(text) == INVALID_LENGTH

    def test_empty_and_none(self) -> None:
        assert payload_length("") == 0
        assert payload_length(None) == 0

    def test_alphabets_do_not_overlap(self) -> None:
        assert not SINGLE_UNIT_CHARACTERS & DOUBLE_UNIT_CHARACTERS
        assert len(SINGLE_UNIT_CHARACTERS) == 73


class TestFitToLength:
    """Tests for fit_to_length."""

    def test_drops_disallowed_characters(self) -> None:
        assert fit_to_length("A&B", 10) == "AB"

    def test_truncates_by_units(self) -> None:
        assert fit_to_length("abcdef", 4) == "abcd"

    def test_diacritic_at_limit_is_dropped_whole(self) -> None:
        assert fit_to_length("Čćš", 5) == "Čć"

    def test_result_fits(self) -> None:
        fitted = fit_to_length("Škola stranih jezika Šibenik d.o.o.", 30)
        assert 0 < payload_length(fitted) <= 30

    def test_strips_trailing_space(self) -> None:
        assert fit_to_length("ab cd", 3) == "ab"


class TestTransliterate:
    """Tests for transliterate."""

    def test_replaces_diacritics(self) -> None:
        assert transliterate("Šiljak Đurđa Čičak Ćuk Žaba") == "Siljak Durda Cicak Cuk Zaba"

    def test_keeps_line_structure(self) -> None:
        payload = "HRVHUB30\nEUR\nŠ\n"
        assert transliterate(payload) == "HRVHUB30\nEUR\nS\n"
