"""
Header models.

A MailHeader does not copy its bytes: it keeps the buffer it was parsed from
together with the offsets of its key and value. The buffer therefore has to stay
alive as long as the header, which Python's reference counting guarantees.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..decoding.encoded_words import HEADER_TRANSPORT_CHARSET, decode_header_value


@dataclass(frozen=True)
class MailHeader:
    """One header as key/value spans over the source buffer."""

    buffer: bytes = field(repr=False)
    key_start: int
    key_end: int
    value_start: int
    value_end: int

    @property
    def raw_key(self) -> bytes:
        return self.buffer[self.key_start : self.key_end]

    @property
    def raw_value(self) -> bytes:
        """Value bytes, fold newlines and indentation included."""
        return self.buffer[self.value_start : self.value_end]

    def get_key(self) -> str:
        """Header name with surrounding whitespace removed."""
        return self.raw_key.decode(HEADER_TRANSPORT_CHARSET).strip()

    def get_value(self) -> str:
        """
        Display value: unfolded, with RFC 2047 encoded-words decoded.

        Decoded on every call; nothing is cached.
        """
        return decode_header_value(self.raw_value)

    key = get_key
    value = get_value


class HeaderCollection(tuple):
    """
    Headers of one message, in source order.

    Lookups compare the decoded key exactly (case-sensitive).
    """

    __slots__ = ()

    def get_first_value(self, key: str) -> Optional[str]:
        """
        Value of the first header named key, or None if there is none.

        Raises:
            MailParseError: If a header visited before the match fails to decode
        """
        for header in self:
            if header.get_key() == key:
                return header.get_value()
        return None

    def get_all_values(self, key: str) -> List[str]:
        """Values of every header named key, in source order."""
        return [header.get_value() for header in self if header.get_key() == key]

    first_value = get_first_value
    all_values = get_all_values

    def __repr__(self) -> str:
        return f"HeaderCollection({list(self)!r})"
