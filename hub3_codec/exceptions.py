"""Custom exception hierarchy for hub3-codec."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hub3_codec.models.payment import ValidationOutcome, Violation


class Hub3Error(Exception):
    """Base exception for all hub3-codec errors."""


class InvalidCharacterError(Hub3Error, ValueError):
    """Raised when an identifier contains a character outside its alphabet."""

    def __init__(self, character: str, identifier: str = "IBAN") -> None:
        self.character = character
        self.identifier = identifier
        super().__init__(f"Invalid character {character!r} in {identifier}")


class PaymentValidationError(Hub3Error):
    """Raised when a payment record is rejected and cannot be encoded."""

    def __init__(self, outcome: ValidationOutcome) -> None:
        self.outcome = outcome
        super().__init__("Payment record failed validation: " + ", ".join(outcome.tags))

    @property
    def violations(self) -> list[Violation]:
        """Violations in reporting order."""
        return self.outcome.sorted_violations()


class AmountFormatError(Hub3Error, ValueError):
    """Raised when an amount cannot be expressed in whole minor units."""


class ConfigurationError(Hub3Error):
    """Raised when configuration is invalid or missing."""
