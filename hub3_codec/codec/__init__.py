"""HUB-3 payment payload codec."""

from hub3_codec.codec.charset import (
    INVALID_LENGTH,
    fit_to_length,
    payload_length,
    transliterate,
)
from hub3_codec.codec.encoder import DELIMITER, HEADER, encode, encode_amount, payload_lines
from hub3_codec.codec.rules import validate

__all__ = [
    "DELIMITER",
    "HEADER",
    "INVALID_LENGTH",
    "encode",
    "encode_amount",
    "fit_to_length",
    "payload_length",
    "payload_lines",
    "transliterate",
    "validate",
]
