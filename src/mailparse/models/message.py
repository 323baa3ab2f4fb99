"""
Parsed message tree.

Every node of the tree refers to the same source buffer; bodies are kept as
offsets into it and only decoded when asked for.
"""

from dataclasses import dataclass, field
from typing import Iterator, Tuple

from ..decoding.body_decoder import decode_body, decode_transfer_encoding
from .content_type import ParsedContentType
from .header import HeaderCollection

TRANSFER_ENCODING_HEADER = "Content-Transfer-Encoding"


@dataclass(frozen=True)
class ParsedMail:
    """
    A message or message part.

    For a multipart node the body span is the preamble before the first
    boundary delimiter. For a leaf it runs from the end of the header block to
    the next delimiter (or the end of the buffer).
    """

    buffer: bytes = field(repr=False)
    headers: HeaderCollection
    ctype: ParsedContentType
    body_start: int
    body_end: int
    subparts: Tuple["ParsedMail", ...] = ()

    @property
    def raw_body(self) -> bytes:
        """Body bytes exactly as they appear in the source buffer."""
        return self.buffer[self.body_start : self.body_end]

    def get_body_raw(self) -> bytes:
        """
        Body bytes with the Content-Transfer-Encoding undone.

        Raises:
            TransferDecodeError: If the body cannot be transfer-decoded
        """
        transfer_encoding = self.headers.get_first_value(TRANSFER_ENCODING_HEADER)
        return decode_transfer_encoding(self.raw_body, transfer_encoding)

    def get_body(self) -> str:
        """
        Body text: transfer-decoded, then converted from the declared charset.

        Raises:
            TransferDecodeError: If the body cannot be transfer-decoded
            CharsetError: If the declared charset is unknown
        """
        transfer_encoding = self.headers.get_first_value(TRANSFER_ENCODING_HEADER)
        return decode_body(self.raw_body, transfer_encoding, self.ctype.charset)

    body = get_body

    def walk(self) -> Iterator["ParsedMail"]:
        """Yield this node and all of its descendants, depth-first."""
        yield self
        for part in self.subparts:
            yield from part.walk()
