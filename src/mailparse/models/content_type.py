"""
Content-Type model.
"""

from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_MIMETYPE = "text/plain"
DEFAULT_CHARSET = "us-ascii"


class ParsedContentType(BaseModel):
    """Resolved Content-Type of a message or message part."""

    mimetype: str = Field(
        DEFAULT_MIMETYPE, min_length=1, description="Lower-cased MIME type"
    )
    charset: str = Field(
        DEFAULT_CHARSET, min_length=1, description="Lower-cased charset label"
    )
    boundary: Optional[str] = Field(
        None, description="Multipart boundary, case preserved"
    )

    model_config = {"frozen": True}

    @property
    def is_multipart(self) -> bool:
        return self.mimetype.startswith("multipart/")
