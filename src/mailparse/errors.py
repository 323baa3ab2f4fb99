"""
Exception hierarchy for the MIME parser.

Every failure raised by the parsing core derives from MailParseError so callers
can catch a single type. Structural failures carry the absolute byte offset in
the top-level buffer where they were detected.
"""

from typing import Optional


class MailParseError(Exception):
    """Base class for all parse and decode failures."""


class TransferDecodeError(MailParseError):
    """Base64 or quoted-printable decoding failed.

    The underlying codec exception is available as ``__cause__``.
    """

    def __init__(self, encoding: str, message: str):
        self.encoding = encoding
        super().__init__(f"{encoding} decode error: {message}")


class CharsetError(MailParseError):
    """Charset label is unknown or bytes could not be converted."""

    def __init__(self, charset: str, message: Optional[str] = None):
        self.charset = charset
        super().__init__(message or f"Unknown charset: {charset!r}")


class MalformedInputError(MailParseError):
    """
    Structural failure in the input.

    Attributes:
        description: Human readable description of the problem
        offset: Absolute byte offset into the buffer passed by the caller
    """

    def __init__(self, description: str, offset: int):
        self.description = description
        self.offset = offset
        super().__init__(f"{description} (offset {offset})")


class EncodedWordError(MalformedInputError):
    """An RFC 2047 encoded-word has a broken structure."""
