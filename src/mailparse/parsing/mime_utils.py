"""
MIME utility functions for working with parsed message trees.

This module provides helper functions on top of ParsedMail for consumers that
want the readable parts of a message rather than its structure.
"""

from typing import Iterator, List

import structlog

from ..decoding.charsets import detect_encoding
from ..errors import MailParseError
from ..models.message import ParsedMail
from ..models.summary import HeaderEntry, MessageSummary

logger = structlog.get_logger(__name__)


def walk_message_parts(mail: ParsedMail) -> Iterator[ParsedMail]:
    """
    Walk through all parts of a message tree.

    Args:
        mail: Parsed message (potentially multipart)

    Yields:
        The message itself, then every part depth-first in source order
    """
    yield from mail.walk()


def _get_parts_of_type(mail: ParsedMail, mimetype: str) -> List[str]:
    texts = []

    for part in walk_message_parts(mail):
        if part.subparts or part.ctype.mimetype != mimetype:
            continue
        try:
            texts.append(part.get_body())
        except MailParseError as e:
            logger.warning(
                "part_decode_failed",
                mimetype=mimetype,
                offset=part.body_start,
                error=str(e),
            )

    return texts


def get_text_parts(mail: ParsedMail) -> List[str]:
    """
    Extract all text/plain parts from a message.

    Parts that cannot be decoded are skipped.

    Args:
        mail: Parsed message

    Returns:
        List of decoded text parts
    """
    return _get_parts_of_type(mail, "text/plain")


def get_html_parts(mail: ParsedMail) -> List[str]:
    """
    Extract all text/html parts from a message.

    Parts that cannot be decoded are skipped.

    Args:
        mail: Parsed message

    Returns:
        List of decoded HTML parts
    """
    return _get_parts_of_type(mail, "text/html")


def summarize_message(mail: ParsedMail, include_body: bool = True) -> MessageSummary:
    """
    Build a serializable summary of a message tree.

    Leaf bodies that cannot be decoded are logged and summarized without
    body text or detected encoding.

    Args:
        mail: Parsed message
        include_body: Decode leaf bodies and include their text and encoding

    Returns:
        MessageSummary mirroring the tree
    """
    body_text = None
    encoding = None
    if include_body and not mail.subparts:
        try:
            raw = mail.get_body_raw()
            encoding = detect_encoding(raw, mail.ctype.charset)
            body_text = mail.get_body()
        except MailParseError as e:
            logger.warning(
                "part_decode_failed",
                mimetype=mail.ctype.mimetype,
                offset=mail.body_start,
                error=str(e),
            )
            encoding = None

    return MessageSummary(
        headers=[
            HeaderEntry(key=header.get_key(), value=header.get_value())
            for header in mail.headers
        ],
        content_type=mail.ctype,
        body_size_bytes=mail.body_end - mail.body_start,
        body_text=body_text,
        encoding_detected=encoding,
        subparts=[summarize_message(part, include_body) for part in mail.subparts],
    )
