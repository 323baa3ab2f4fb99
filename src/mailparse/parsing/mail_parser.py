"""
Message assembler: headers, content type, and recursive multipart splitting.

Sub-parts are parsed in place on the caller's buffer, bounded by the offsets of
the surrounding delimiters, so every node of the resulting tree shares one
buffer and error offsets stay relative to it.
"""

from typing import List, Optional

import structlog

from ..config import settings
from ..errors import MalformedInputError
from ..models.content_type import ParsedContentType
from ..models.message import ParsedMail
from .content_type import parse_content_type
from .header_parser import parse_headers_at

logger = structlog.get_logger(__name__)

CONTENT_TYPE_HEADER = "Content-Type"


def _boundary_delimiter(boundary: str) -> bytes:
    # header values are decoded byte-for-char from latin-1, so this restores
    # the original bytes unless the boundary came out of an encoded-word
    try:
        return b"--" + boundary.encode("latin-1")
    except UnicodeEncodeError:
        return b"--" + boundary.encode("utf-8")


def _parse_mail_at(
    buffer: bytes, start: int, end: int, depth: int, max_depth: int
) -> ParsedMail:
    if depth > max_depth:
        logger.warning("max_nesting_depth_exceeded", offset=start, max_depth=max_depth)
        raise MalformedInputError(
            f"Multipart nesting deeper than {max_depth} levels", start
        )

    headers, ix_body = parse_headers_at(buffer, start, end)
    content_type = headers.get_first_value(CONTENT_TYPE_HEADER)
    if content_type is not None:
        ctype = parse_content_type(content_type)
    else:
        ctype = ParsedContentType()

    if not ctype.is_multipart or ctype.boundary is None:
        return ParsedMail(
            buffer=buffer, headers=headers, ctype=ctype, body_start=ix_body, body_end=end
        )

    delimiter = _boundary_delimiter(ctype.boundary)
    ix_body_end = buffer.find(delimiter, ix_body, end)
    if ix_body_end == -1:
        logger.debug(
            "multipart_boundary_not_found", boundary=ctype.boundary, offset=ix_body
        )
        return ParsedMail(
            buffer=buffer, headers=headers, ctype=ctype, body_start=ix_body, body_end=end
        )

    subparts: List[ParsedMail] = []
    ix_boundary_end = ix_body_end + len(delimiter)
    while True:
        ix_newline = buffer.find(b"\n", ix_boundary_end, end)
        if ix_newline == -1:
            break
        ix_part_start = ix_newline + 1
        ix_part_end = buffer.find(delimiter, ix_part_start, end)
        if ix_part_end == -1:
            raise MalformedInputError(
                "Unable to find terminating boundary of multipart message",
                ix_part_start,
            )

        subparts.append(
            _parse_mail_at(buffer, ix_part_start, ix_part_end, depth + 1, max_depth)
        )
        ix_boundary_end = ix_part_end + len(delimiter)
        if buffer.startswith(b"--", ix_boundary_end, end):
            break

    return ParsedMail(
        buffer=buffer,
        headers=headers,
        ctype=ctype,
        body_start=ix_body,
        body_end=ix_body_end,
        subparts=tuple(subparts),
    )


def parse_mail(raw_data: bytes, max_depth: Optional[int] = None) -> ParsedMail:
    """
    Parse a complete message into a tree of ParsedMail nodes.

    Args:
        raw_data: Raw message bytes (RFC 822 headers, blank line, body)
        max_depth: Deepest multipart nesting accepted below the top-level
            message (default: settings.max_nesting_depth)

    Returns:
        Root ParsedMail; multipart messages carry their parts in subparts

    Raises:
        MalformedInputError: On broken headers, an unterminated multipart
            part, or nesting deeper than max_depth
    """
    if max_depth is None:
        max_depth = settings.max_nesting_depth
    return _parse_mail_at(raw_data, 0, len(raw_data), 0, max_depth)


parse_message = parse_mail
