# MIME parsing module

from ..decoding import (
    decode_body,
    decode_bytes,
    decode_encoded_word,
    decode_header_value,
    decode_transfer_encoding,
    detect_encoding,
    lookup_charset,
)
from .content_type import parse_content_type
from .header_parser import parse_header, parse_header_at, parse_headers, parse_headers_at
from .mail_parser import parse_mail, parse_message
from .mime_utils import (
    get_html_parts,
    get_text_parts,
    summarize_message,
    walk_message_parts,
)

__all__ = [
    "parse_header",
    "parse_header_at",
    "parse_headers",
    "parse_headers_at",
    "parse_content_type",
    "parse_mail",
    "parse_message",
    "decode_header_value",
    "decode_encoded_word",
    "decode_body",
    "decode_transfer_encoding",
    "lookup_charset",
    "decode_bytes",
    "detect_encoding",
    "walk_message_parts",
    "get_text_parts",
    "get_html_parts",
    "summarize_message",
]
