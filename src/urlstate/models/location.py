"""Models describing an address and the history entries that hold it."""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """Snapshot of the current address, split the way ``window.location`` is."""

    model_config = ConfigDict(frozen=True)

    href: str = Field(..., description="Full normalized address")
    origin: str = Field(..., description="scheme://host[:port], or 'null' for opaque schemes")
    pathname: str = Field(..., description="Path component, '/' when empty for web schemes")
    search: str = Field("", description="Query component including its leading '?', or ''")
    hash: str = Field("", description="Fragment including its leading '#', or ''")

    @classmethod
    def from_url(cls, url: str) -> "Location":
        """Build a Location from an absolute URL.

        Raises:
            InvalidURLError: if *url* is not a valid absolute URL
        """
        from ..utils.url_utils import format_url, parse_absolute_url, url_origin

        parts = parse_absolute_url(url)
        href = format_url(url)
        normalized = parse_absolute_url(href)
        return cls(
            href=href,
            origin=url_origin(parts),
            pathname=normalized.path,
            search=f"?{normalized.query}" if normalized.query else "",
            hash=f"#{normalized.fragment}" if normalized.fragment else "",
        )


class HistoryEntry(BaseModel):
    """One slot in a session history stack."""

    url: str = Field(..., description="Absolute address of the entry")
    state: Optional[Any] = Field(None, description="State object passed to push/replace")
    document: int = Field(..., description="Id of the document that created the entry")
