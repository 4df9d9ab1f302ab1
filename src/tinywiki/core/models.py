"""Data models for TinyWiki."""

from pydantic import BaseModel, Field


class Page(BaseModel):
    """Represents a wiki page.

    ``index`` is only populated for the page listing; a listing Page has
    no title or body.
    """

    title: str = ""
    body: bytes = b""
    index: list[str] = Field(default_factory=list)

    @property
    def text(self) -> str:
        """Return the body decoded for display."""
        return self.body.decode("utf-8", errors="replace")
