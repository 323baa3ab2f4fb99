"""
Serializable summary of a parsed message tree, used for JSON output.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .content_type import ParsedContentType


class HeaderEntry(BaseModel):
    """One decoded header."""

    key: str = Field(description="Header name")
    value: str = Field(description="Unfolded value with encoded-words decoded")


class MessageSummary(BaseModel):
    """
    JSON-friendly view of a ParsedMail node and its sub-parts.

    Body text is only filled in for leaf parts; for multipart nodes the body is
    preamble and is left out.
    """

    headers: List[HeaderEntry] = Field(
        default_factory=list, description="Headers in source order"
    )
    content_type: ParsedContentType = Field(description="Resolved Content-Type")
    body_size_bytes: int = Field(description="Size of the undecoded body span")
    body_text: Optional[str] = Field(
        None, description="Decoded body (leaf parts only)"
    )
    encoding_detected: Optional[str] = Field(
        None, description="Declared charset if valid for the body, else detected"
    )
    subparts: List["MessageSummary"] = Field(
        default_factory=list, description="Summaries of multipart children"
    )


class ParseReport(BaseModel):
    """Result of parsing one file from the command line."""

    source: str = Field(description="Path of the parsed file")
    parser_version: str = Field(description="Parser version that produced this")
    raw_size_bytes: int = Field(description="Size of the file")
    message: Optional[MessageSummary] = Field(
        None, description="Parsed tree, if parsing succeeded"
    )
    error: Optional[str] = Field(None, description="Failure, if parsing failed")
