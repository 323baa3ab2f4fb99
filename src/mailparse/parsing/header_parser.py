"""
Byte-level header tokenizer.

Headers are split with an explicit state machine rather than regular expressions
so that folding (a newline followed by space or tab continues the value) and
CR/LF variance are handled one byte at a time. All offsets, including those in
raised errors, are absolute positions in the buffer passed by the caller.
"""

from enum import Enum
from typing import List, Optional, Tuple

from ..errors import MalformedInputError
from ..models.header import HeaderCollection, MailHeader

SPACE = 0x20
TAB = 0x09
LF = 0x0A
CR = 0x0D
COLON = 0x3A


class HeaderParseState(Enum):
    INITIAL = "initial"
    KEY = "key"
    PRE_VALUE = "pre_value"
    VALUE = "value"
    VALUE_NEWLINE = "value_newline"


def parse_header_at(
    buffer: bytes, start: int = 0, end: Optional[int] = None
) -> Tuple[MailHeader, int]:
    """
    Tokenize the header beginning at buffer[start].

    Args:
        buffer: Whole message buffer
        start: Offset of the first byte of the header
        end: Offset one past the last byte that may be read (default: len(buffer))

    Returns:
        Tuple of (header, offset just past the header)

    Raises:
        MalformedInputError: On a leading space, a newline inside the key,
            or a missing ':'
    """
    if end is None:
        end = len(buffer)
    if start >= end:
        raise MalformedInputError("Empty string provided", start)

    state = HeaderParseState.INITIAL
    ix = start
    key_end = None
    value_start = value_end = None

    while ix < end:
        c = buffer[ix]

        if state is HeaderParseState.INITIAL:
            if c == SPACE:
                raise MalformedInputError(
                    "Header cannot start with a space; it is likely an "
                    "overhanging line from a previous header",
                    ix,
                )
            state = HeaderParseState.KEY
            continue

        if state is HeaderParseState.KEY:
            if c == COLON:
                key_end = ix
                state = HeaderParseState.PRE_VALUE
            elif c == LF:
                raise MalformedInputError("Unexpected newline in header key", ix)

        elif state is HeaderParseState.PRE_VALUE:
            if c != SPACE:
                value_start = value_end = ix
                state = HeaderParseState.VALUE
                continue

        elif state is HeaderParseState.VALUE:
            if c == LF:
                state = HeaderParseState.VALUE_NEWLINE
            elif c != CR:
                # a CR only becomes part of the value once something follows it
                value_end = ix + 1

        elif state is HeaderParseState.VALUE_NEWLINE:
            if c == SPACE or c == TAB:
                state = HeaderParseState.VALUE
                continue
            break

        ix += 1

    if key_end is None:
        raise MalformedInputError(
            "Unable to determine end of the header key component", ix
        )
    if value_start is None:
        value_start = value_end = ix

    header = MailHeader(
        buffer=buffer,
        key_start=start,
        key_end=key_end,
        value_start=value_start,
        value_end=value_end,
    )
    return header, ix


def parse_header(raw_data: bytes) -> Tuple[MailHeader, int]:
    """
    Parse a single header from the start of raw_data.

    Args:
        raw_data: Bytes beginning with a header line

    Returns:
        Tuple of (header, number of bytes consumed)

    Raises:
        MalformedInputError: If the header is malformed
    """
    return parse_header_at(raw_data, 0, len(raw_data))


def parse_headers_at(
    buffer: bytes, start: int = 0, end: Optional[int] = None
) -> Tuple[HeaderCollection, int]:
    """
    Parse the header block beginning at buffer[start].

    The block ends at a blank line ('\\n' or '\\r\\n', consumed) or at end.

    Args:
        buffer: Whole message buffer
        start: Offset of the header block
        end: Offset one past the last byte that may be read (default: len(buffer))

    Returns:
        Tuple of (headers, offset of the first body byte)

    Raises:
        MalformedInputError: If a header is malformed or a lone CR follows one
    """
    if end is None:
        end = len(buffer)

    headers: List[MailHeader] = []
    ix = start
    while ix < end:
        c = buffer[ix]
        if c == LF:
            ix += 1
            break
        if c == CR:
            if ix + 1 < end and buffer[ix + 1] == LF:
                ix += 2
                break
            raise MalformedInputError(
                "Headers were followed by an unexpected lone CR character", ix
            )

        header, ix = parse_header_at(buffer, ix, end)
        headers.append(header)

    return HeaderCollection(headers), ix


def parse_headers(raw_data: bytes) -> Tuple[HeaderCollection, int]:
    """
    Parse all headers at the start of raw_data.

    Args:
        raw_data: Message bytes

    Returns:
        Tuple of (headers, number of bytes consumed including the blank line)

    Raises:
        MalformedInputError: If the header block is malformed
    """
    return parse_headers_at(raw_data, 0, len(raw_data))
