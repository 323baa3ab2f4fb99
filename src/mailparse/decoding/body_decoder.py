"""
Body decoding: Content-Transfer-Encoding first, then the declared charset.
"""

import base64
import binascii
import quopri
from typing import Optional

from ..errors import TransferDecodeError
from .charsets import decode_bytes

_BASE64_WHITESPACE = b" \t\r\n"


def decode_transfer_encoding(raw: bytes, transfer_encoding: Optional[str]) -> bytes:
    """
    Undo the Content-Transfer-Encoding of a body.

    Args:
        raw: Body bytes as found in the message
        transfer_encoding: Value of the Content-Transfer-Encoding header, if any

    Returns:
        Decoded bytes. Unknown or absent encodings return the input unchanged.

    Raises:
        TransferDecodeError: If a base64 body is malformed
    """
    encoding = (transfer_encoding or "").strip().lower()

    if encoding == "base64":
        # bodies are wrapped at 76 columns, drop the line structure first
        cleaned = raw.translate(None, _BASE64_WHITESPACE)
        try:
            return base64.b64decode(cleaned, validate=True)
        except binascii.Error as e:
            raise TransferDecodeError("base64", str(e)) from e

    if encoding == "quoted-printable":
        # binascii's decoder leaves malformed escapes in place instead of failing
        return quopri.decodestring(raw)

    return bytes(raw)


def decode_body(raw: bytes, transfer_encoding: Optional[str], charset: str) -> str:
    """
    Decode a body to text.

    Args:
        raw: Body bytes as found in the message
        transfer_encoding: Value of the Content-Transfer-Encoding header, if any
        charset: Charset label from the Content-Type header

    Returns:
        Body text, with U+FFFD for bytes invalid in the charset

    Raises:
        TransferDecodeError: If the transfer encoding cannot be undone
        CharsetError: If the charset label is unknown
    """
    return decode_bytes(decode_transfer_encoding(raw, transfer_encoding), charset)
