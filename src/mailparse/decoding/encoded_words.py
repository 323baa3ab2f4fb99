"""
RFC 2047 encoded-word decoding for header values.

A raw header value is first mapped byte-for-character through ISO-8859-1, which
never fails and keeps the original bytes recoverable. Folded lines are then
joined with single spaces and every ``=?charset?coding?text?=`` token that stands
as a separate word is replaced by its decoded text.
"""

import base64
import binascii
import quopri
from typing import List

import structlog

from ..errors import EncodedWordError, MailParseError, TransferDecodeError
from .charsets import decode_bytes

logger = structlog.get_logger(__name__)

# Byte-to-character mapping used for raw header bytes, independent of any
# charset declared elsewhere in the message.
HEADER_TRANSPORT_CHARSET = "iso-8859-1"


def _is_boundary(line: str, ix: int) -> bool:
    """True if position ix is outside the line or holds whitespace."""
    if ix < 0 or ix >= len(line):
        return True
    return line[ix].isspace()


def _split_lines(text: str) -> List[str]:
    lines = text.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def decode_encoded_word(encoded: str) -> str:
    """
    Decode the inner text of an encoded-word.

    Args:
        encoded: Text between the opening '=?' and closing '?=',
            i.e. 'charset?coding?text'

    Returns:
        Decoded text

    Raises:
        EncodedWordError: If a '?' separator is missing or the coding is not B/Q
        TransferDecodeError: If the Base64 text is malformed
        CharsetError: If the charset label is unknown
    """
    ix_delim1 = encoded.find("?")
    if ix_delim1 == -1:
        raise EncodedWordError("Unable to find '?' inside encoded-word", 0)
    ix_delim2 = encoded.find("?", ix_delim1 + 1)
    if ix_delim2 == -1:
        raise EncodedWordError(
            "Unable to find second '?' inside encoded-word", ix_delim1 + 1
        )

    charset = encoded[:ix_delim1]
    transfer_coding = encoded[ix_delim1 + 1 : ix_delim2]
    text = encoded[ix_delim2 + 1 :].encode(HEADER_TRANSPORT_CHARSET)

    if transfer_coding == "B":
        try:
            decoded = base64.b64decode(text, validate=True)
        except binascii.Error as e:
            raise TransferDecodeError("base64", str(e)) from e
    elif transfer_coding == "Q":
        decoded = quopri.decodestring(text, header=True)
    else:
        raise EncodedWordError(
            "Unknown transfer-coding name found in encoded-word", ix_delim1 + 1
        )

    return decode_bytes(decoded, charset)


def _find_closing(line: str, ix_start: int) -> int:
    ix = ix_start
    while True:
        ix_end = line.find("?=", ix)
        if ix_end == -1 or _is_boundary(line, ix_end + 2):
            return ix_end
        ix = ix_end + 2


def _decode_line(line: str) -> str:
    parts = []
    ix_search = 0
    while True:
        ix_open = line.find("=?", ix_search)
        if ix_open == -1:
            parts.append(line[ix_search:])
            break

        ix_begin = ix_open + 2
        if not _is_boundary(line, ix_open - 1):
            # glued to the previous word, not an encoded-word
            parts.append(line[ix_search:ix_begin])
            ix_search = ix_begin
            continue

        parts.append(line[ix_search:ix_open])
        ix_end = _find_closing(line, ix_begin)
        if ix_end == -1:
            parts.append(line[ix_open:])
            break

        try:
            parts.append(decode_encoded_word(line[ix_begin:ix_end]))
        except MailParseError as e:
            logger.debug(
                "encoded_word_fallback",
                word=line[ix_open : ix_end + 2],
                error=str(e),
            )
            parts.append(line[ix_open : ix_end + 2])
        ix_search = ix_end + 2

    return "".join(parts)


def decode_header_value(raw: bytes) -> str:
    """
    Rebuild the display value of a raw header value.

    Continuation lines are left-stripped and joined with a single space, then
    encoded-words are decoded. An encoded-word that fails to decode is kept as
    literal text.

    Args:
        raw: Raw value bytes, possibly folded over several lines

    Returns:
        Display value
    """
    text = raw.decode(HEADER_TRANSPORT_CHARSET)
    return " ".join(_decode_line(line.lstrip()) for line in _split_lines(text))
