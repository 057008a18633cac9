"""IBAN structural validation using the MOD-97 algorithm (ISO 13616).

Only the structure is checked. Whether the account exists can only be
answered by a bank.
"""

import logging
import string

from hub3_codec.exceptions import InvalidCharacterError

logger = logging.getLogger(__name__)

# A=10, B=11, ..., Z=35
LETTER_VALUES: dict[str, int] = {
    letter: value for value, letter in enumerate(string.ascii_uppercase, start=10)
}


def _to_digits(text: str) -> str:
    """Replace letters with their two-digit values, keep ASCII digits."""
    parts = []
    for char in text:
        if char in LETTER_VALUES:
            parts.append(str(LETTER_VALUES[char]))
        elif char in string.digits:
            parts.append(char)
        else:
            raise InvalidCharacterError(char)
    return "".join(parts)


def iban_to_integer(iban: str) -> int:
    """Rearrange an uppercase IBAN and read it as one decimal number.

    The first four characters move to the end before letters are converted.

    Raises
    ------
    InvalidCharacterError
        If the IBAN contains anything outside [A-Z0-9].
    """
    rearranged = iban[4:] + iban[:4]
    return int(_to_digits(rearranged))


def validate_iban(iban: str) -> bool:
    """Return True if ``iban`` passes the MOD-97 check.

    The input is uppercased first. Never raises for bad input.
    """
    if not iban:
        return False
    try:
        return iban_to_integer(iban.upper()) % 97 == 1
    except InvalidCharacterError as e:
        logger.debug("IBAN rejected: %s", e)
        return False


def iban_check_digits(country_code: str, bban: str) -> str:
    """Compute the two IBAN check digits for ``country_code`` + ``bban``.

    Parameters
    ----------
    country_code : str
        ISO 3166-1 alpha-2 code, e.g. ``"HR"``.
    bban : str
        Basic bank account number (for Croatia: 7-digit bank code followed
        by the 10-digit account number).

    Returns
    -------
    str
        Check digits, zero-padded to two characters.
    """
    remainder = int(_to_digits((bban + country_code + "00").upper())) % 97
    return f"{98 - remainder:02d}"


def normalize_iban(value: str) -> str:
    """Strip whitespace and uppercase a user-typed IBAN."""
    return "".join(value.split()).upper()
