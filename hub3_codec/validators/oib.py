"""OIB (Croatian personal identification number) validation.

The eleventh digit is an ISO 7064 MOD 11,10 check digit over the first ten.
"""

import string
from dataclasses import dataclass

from hub3_codec.models.enums import OibFailure

OIB_LENGTH = 11

FAILURE_MESSAGES = {
    OibFailure.LENGTH: "OIB mora sadržavati točno 11 znamenki",
    OibFailure.CHARSET: "OIB može sadržavati samo brojeve",
    OibFailure.CHECKSUM: "OIB nije ispravan (pogrešna kontrolna znamenka)",
}


@dataclass(frozen=True)
class OibValidation:
    """Outcome of an OIB check."""

    valid: bool
    reason: OibFailure | None = None

    @property
    def message(self) -> str | None:
        """User-facing message for the failure, None when valid."""
        if self.reason is None:
            return None
        return FAILURE_MESSAGES[self.reason]


def oib_check_digit(digits: str) -> int:
    """Compute the check digit for the first ten OIB digits."""
    total = 10
    for char in digits[:10]:
        total = (total + int(char)) % 10
        if total == 0:
            total = 10
        total = (total * 2) % 11
    return (11 - total) % 10


def validate_oib(oib: str) -> OibValidation:
    """Validate an OIB, reporting why it failed.

    Length is checked before the character set, and both before the check
    digit.
    """
    if not oib or len(oib) != OIB_LENGTH:
        return OibValidation(False, OibFailure.LENGTH)
    if any(char not in string.digits for char in oib):
        return OibValidation(False, OibFailure.CHARSET)
    if oib_check_digit(oib) != int(oib[10]):
        return OibValidation(False, OibFailure.CHECKSUM)
    return OibValidation(True)


def format_oib(value: str) -> str:
    """Keep only ASCII digits, capped at eleven."""
    return "".join(char for char in value if char in string.digits)[:OIB_LENGTH]
