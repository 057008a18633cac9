"""HUB-3 payload serialization.

The payload is fourteen lines, each terminated by a line feed. Scanners read
it by position, so the line order must never change.
"""

from __future__ import annotations

import logging

from hub3_codec.codec.rules import validate
from hub3_codec.config import CodecConfig
from hub3_codec.exceptions import PaymentValidationError
from hub3_codec.models.payment import PaymentRecord

logger = logging.getLogger(__name__)

HEADER = "HRVHUB30"
DELIMITER = "\n"
AMOUNT_WIDTH = 15


def encode_amount(amount: int) -> str:
    """Zero-pad minor units to the fixed 15-digit amount line."""
    return str(amount).rjust(AMOUNT_WIDTH, "0")


def payload_lines(record: PaymentRecord, config: CodecConfig | None = None) -> list[str]:
    """Payload lines for an already validated record, in wire order."""
    config = config or CodecConfig()
    return [
        HEADER,
        config.currency,
        encode_amount(record.amount),
        record.payer_name or "",
        record.payer_address or "",
        record.payer_city or "",
        record.receiver_name,
        record.receiver_address or "",
        record.receiver_city or "",
        record.iban.upper(),
        config.model_prefix + record.payment_model,
        record.reference_number,
        record.purpose_code or "",
        record.payment_description,
    ]


def encode(record: PaymentRecord, config: CodecConfig | None = None) -> str:
    """Validate ``record`` and serialize it into a HUB-3 payload.

    Parameters
    ----------
    record : PaymentRecord
        Payment values to encode.
    config : CodecConfig | None
        Codec settings; defaults are used when omitted.

    Returns
    -------
    str
        The payload, with a line feed after every line including the last.

    Raises
    ------
    PaymentValidationError
        If any rule fails. No partial payload is produced.
    """
    config = config or CodecConfig()
    outcome = validate(record, config)
    if not outcome.is_valid:
        raise PaymentValidationError(outcome)

    payload = "".join(line + DELIMITER for line in payload_lines(record, config))
    logger.debug(
        "Encoded payment %s%s %s (%d characters)",
        config.model_prefix, record.payment_model, record.reference_number, len(payload),
    )
    return payload
