# Byte-to-text decoders shared by the models and the parser

from .charsets import decode_bytes, detect_encoding, lookup_charset
from .encoded_words import HEADER_TRANSPORT_CHARSET, decode_encoded_word, decode_header_value
from .body_decoder import decode_body, decode_transfer_encoding

__all__ = [
    "HEADER_TRANSPORT_CHARSET",
    "lookup_charset",
    "decode_bytes",
    "detect_encoding",
    "decode_encoded_word",
    "decode_header_value",
    "decode_transfer_encoding",
    "decode_body",
]
