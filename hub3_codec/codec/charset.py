"""HUB-3 character set and payload-unit length accounting."""

import string

SINGLE_UNIT_CHARACTERS: frozenset[str] = frozenset(
    string.ascii_letters + string.digits + " ,.:-+?'/()"
)

# Croatian diacritics take two payload units each
DOUBLE_UNIT_CHARACTERS: frozenset[str] = frozenset("ŠĐČĆŽšđčćž")

INVALID_LENGTH = -1

_TRANSLITERATION = str.maketrans("ŠĐČĆŽšđčćž", "SDCCZsdccz")


def char_units(char: str) -> int:
    """Payload units taken by ``char``, or INVALID_LENGTH if not allowed."""
    if char in DOUBLE_UNIT_CHARACTERS:
        return 2
    if char in SINGLE_UNIT_CHARACTERS:
        return 1
    return INVALID_LENGTH


def payload_length(text: str | None) -> int:
    """Length of ``text`` in payload units.

    Returns INVALID_LENGTH as soon as a character outside the HUB-3 alphabet
    is found. Empty and None both measure 0.
    """
    length = 0
    for char in text or "":
        units = char_units(char)
        if units == INVALID_LENGTH:
            return INVALID_LENGTH
        length += units
    return length


def fit_to_length(text: str, max_length: int) -> str:
    """Drop disallowed characters and cut ``text`` to ``max_length`` units.

    A diacritic that would straddle the limit is dropped whole.
    """
    kept = []
    length = 0
    for char in text:
        units = char_units(char)
        if units == INVALID_LENGTH:
            continue
        if length + units > max_length:
            break
        kept.append(char)
        length += units
    return "".join(kept).strip()


def transliterate(payload: str) -> str:
    """Replace Croatian diacritics with their ASCII base letters.

    Used before handing a payload to PDF417 renderers limited to ASCII text
    compaction.
    """
    return payload.translate(_TRANSLITERATION)
