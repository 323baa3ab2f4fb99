"""
Content-Type header value parser.
"""

from ..models.content_type import DEFAULT_CHARSET, DEFAULT_MIMETYPE, ParsedContentType


def _unquote(value: str) -> str:
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def parse_content_type(header: str) -> ParsedContentType:
    """
    Parse a Content-Type header value.

    Parameters without '=' are skipped rather than rejected, since broken
    parameter lists are common in real mail. Only 'charset' and 'boundary'
    are kept.

    Args:
        header: Decoded header value, e.g. 'text/html; charset="utf-8"'

    Returns:
        ParsedContentType with defaults applied for missing pieces

    Example:
        >>> parse_content_type("multipart/mixed; boundary=XyZ").boundary
        'XyZ'
    """
    tokens = header.split(";")
    mimetype = tokens[0].strip().lower() or DEFAULT_MIMETYPE
    charset = DEFAULT_CHARSET
    boundary = None

    for param in tokens[1:]:
        name, sep, value = param.partition("=")
        if not sep:
            continue
        name = name.strip().lower()
        value = _unquote(value.strip())
        if not value:
            continue
        if name == "charset":
            charset = value.lower()
        elif name == "boundary":
            boundary = value

    return ParsedContentType(mimetype=mimetype, charset=charset, boundary=boundary)
