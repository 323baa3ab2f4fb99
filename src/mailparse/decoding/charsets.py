"""
Charset registry for header and body conversion.

Charset labels found in mail are resolved the way web user agents resolve them:
case-insensitively, with the WHATWG aliases applied where they disagree with the
Python codec registry (for example ``us-ascii`` and ``iso-8859-1`` both mean
windows-1252). Any other label is looked up in the Python codec registry.
"""

import codecs
from typing import Optional

import charset_normalizer

from ..errors import CharsetError

# WHATWG label -> Python codec, only where Python would pick a different codec
# or does not know the label at all.
_WHATWG_ALIASES = {
    # windows-1252
    "ansi_x3.4-1968": "cp1252",
    "ascii": "cp1252",
    "us-ascii": "cp1252",
    "cp819": "cp1252",
    "csisolatin1": "cp1252",
    "ibm819": "cp1252",
    "iso-8859-1": "cp1252",
    "iso-ir-100": "cp1252",
    "iso8859-1": "cp1252",
    "iso88591": "cp1252",
    "iso_8859-1": "cp1252",
    "iso_8859-1:1987": "cp1252",
    "l1": "cp1252",
    "latin1": "cp1252",
    "x-cp1252": "cp1252",
    # windows-1254
    "csisolatin5": "cp1254",
    "iso-8859-9": "cp1254",
    "iso-ir-148": "cp1254",
    "iso8859-9": "cp1254",
    "iso88599": "cp1254",
    "iso_8859-9": "cp1254",
    "iso_8859-9:1989": "cp1254",
    "l5": "cp1254",
    "latin5": "cp1254",
    "x-cp1254": "cp1254",
    # windows-874
    "dos-874": "cp874",
    "iso-8859-11": "cp874",
    "iso8859-11": "cp874",
    "iso885911": "cp874",
    "tis-620": "cp874",
    # gbk
    "chinese": "gbk",
    "csgb2312": "gbk",
    "csiso58gb231280": "gbk",
    "gb2312": "gbk",
    "gb_2312": "gbk",
    "gb_2312-80": "gbk",
    "iso-ir-58": "gbk",
    "x-gbk": "gbk",
    # euc-kr is windows-949 on the web
    "cseuckr": "cp949",
    "csksc56011987": "cp949",
    "euc-kr": "cp949",
    "iso-ir-149": "cp949",
    "korean": "cp949",
    "ks_c_5601-1987": "cp949",
    "ks_c_5601-1989": "cp949",
    "ksc5601": "cp949",
    "ksc_5601": "cp949",
    "windows-949": "cp949",
    # shift_jis is windows-31j on the web
    "csshiftjis": "cp932",
    "ms932": "cp932",
    "ms_kanji": "cp932",
    "shift-jis": "cp932",
    "shift_jis": "cp932",
    "sjis": "cp932",
    "windows-31j": "cp932",
    "x-sjis": "cp932",
    # big5
    "big5": "big5hkscs",
    "big5-hkscs": "big5hkscs",
    "cn-big5": "big5hkscs",
    "csbig5": "big5hkscs",
    "x-x-big5": "big5hkscs",
    # utf-8 / utf-16
    "unicode-1-1-utf-8": "utf-8",
    "unicode11utf8": "utf-8",
    "unicode20utf8": "utf-8",
    "x-unicode20utf8": "utf-8",
    "csunicode": "utf-16-le",
    "iso-10646-ucs-2": "utf-16-le",
    "ucs-2": "utf-16-le",
    "unicode": "utf-16-le",
    "unicodefeff": "utf-16-le",
    "utf-16": "utf-16-le",
    # misc
    "csiso88598i": "iso8859-8",
    "iso-8859-8-i": "iso8859-8",
    "logical": "iso8859-8",
    "cskoi8r": "koi8-r",
    "koi": "koi8-r",
    "koi8": "koi8-r",
    "koi8_r": "koi8-r",
    "koi8-ru": "koi8-u",
    "csmacintosh": "mac-roman",
    "mac": "mac-roman",
    "macintosh": "mac-roman",
    "x-mac-roman": "mac-roman",
    "x-mac-cyrillic": "mac-cyrillic",
    "x-mac-ukrainian": "mac-cyrillic",
    "csiso2022jp": "iso2022_jp",
}

# Text codecs in the Python registry that are not charsets: escape syntaxes,
# IDNA transforms, BOM-sniffing variants and platform code pages.
_NON_CHARSET_CODECS = frozenset(
    [
        "charmap",
        "idna",
        "mbcs",
        "oem",
        "punycode",
        "raw-unicode-escape",
        "undefined",
        "unicode-escape",
        "utf-8-sig",
    ]
)


def lookup_charset(label: str) -> str:
    """
    Resolve a charset label to a Python codec name.

    Args:
        label: Charset label as found in a header (any case, surrounding space allowed)

    Returns:
        Canonical Python codec name (e.g. 'cp1252', 'utf-8')

    Raises:
        CharsetError: If the label is unknown or names a non-text codec
    """
    normalized = label.strip().lower()
    if not normalized:
        raise CharsetError(label)

    name = _WHATWG_ALIASES.get(normalized, normalized)
    try:
        # bytes.decode refuses bytes-to-bytes codecs such as base64 or rot13
        b"".decode(name)
        codec = codecs.lookup(name).name
    except (LookupError, ValueError) as e:
        raise CharsetError(label) from e

    if codec in _NON_CHARSET_CODECS:
        raise CharsetError(label)
    return codec


def decode_bytes(data: bytes, label: str, errors: str = "replace") -> str:
    """
    Convert bytes to text using a charset label.

    Args:
        data: Bytes to convert
        label: Charset label
        errors: Codec error handler ('replace' substitutes U+FFFD, 'strict' raises)

    Returns:
        Decoded text

    Raises:
        CharsetError: If the label is unknown, or errors='strict' and the bytes
            are invalid for the charset
    """
    codec = lookup_charset(label)
    try:
        return data.decode(codec, errors)
    except UnicodeError as e:
        raise CharsetError(
            label, f"Unable to convert bytes from charset {label!r}: {e}"
        ) from e


def detect_encoding(data: bytes, declared: Optional[str] = None) -> str:
    """
    Detect character encoding using charset-normalizer.
    Prefers the declared charset when the bytes are valid for it.

    Args:
        data: Raw bytes (already transfer-decoded)
        declared: Charset declared by the message, if any

    Returns:
        Encoding name (e.g., 'utf-8', 'cp1252')
    """
    if declared:
        try:
            decode_bytes(data, declared, errors="strict")
            return declared
        except CharsetError:
            pass

    if data:
        detected = charset_normalizer.from_bytes(data).best()
        if detected:
            return detected.encoding

    return "utf-8"  # Default fallback
