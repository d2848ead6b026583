"""Base64 payload transcoding for archive entries."""

import base64
import binascii

from farc.errors import InvalidEncodingError


def encode_payload(data: bytes) -> str:
    """Encode raw bytes as standard RFC 4648 base64 text without line breaks."""
    return base64.b64encode(data).decode("ascii")


def decode_payload(text: str, *, index: int) -> bytes:
    """Decode base64 text for entry ``index``; reject any non-alphabet character."""
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidEncodingError(index) from exc
