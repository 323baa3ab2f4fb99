"""
mailparse: parse raw MIME email messages into a navigable tree.

    >>> from mailparse import parse_mail
    >>> mail = parse_mail(b"Subject: hi\\r\\n\\r\\nbody")
    >>> mail.headers.get_first_value("Subject")
    'hi'
"""

from .parsing import (
    decode_header_value,
    get_html_parts,
    get_text_parts,
    parse_content_type,
    parse_header,
    parse_headers,
    parse_mail,
    parse_message,
    summarize_message,
    walk_message_parts,
)
from .errors import (
    CharsetError,
    EncodedWordError,
    MailParseError,
    MalformedInputError,
    TransferDecodeError,
)
from .models import HeaderCollection, MailHeader, ParsedContentType, ParsedMail
from .version import PARSER_VERSION, __version__

__all__ = [
    "parse_header",
    "parse_headers",
    "parse_content_type",
    "parse_mail",
    "parse_message",
    "decode_header_value",
    "walk_message_parts",
    "get_text_parts",
    "get_html_parts",
    "summarize_message",
    "MailHeader",
    "HeaderCollection",
    "ParsedContentType",
    "ParsedMail",
    "MailParseError",
    "TransferDecodeError",
    "CharsetError",
    "MalformedInputError",
    "EncodedWordError",
    "PARSER_VERSION",
    "__version__",
]
