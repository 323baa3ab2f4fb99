# Data models for parsed messages

from .content_type import ParsedContentType
from .header import HeaderCollection, MailHeader
from .message import ParsedMail
from .summary import HeaderEntry, MessageSummary, ParseReport

__all__ = [
    "ParsedContentType",
    "MailHeader",
    "HeaderCollection",
    "ParsedMail",
    "HeaderEntry",
    "MessageSummary",
    "ParseReport",
]
