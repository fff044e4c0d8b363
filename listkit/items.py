"""Pydantic schemas for raw and normalized content entries."""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Raw input (as produced by content discovery)
# ---------------------------------------------------------------------------

class EntryMetadata(BaseModel):
    """Front-matter of a single content document.

    Keys use the front-matter spelling (``publishDate``, ``featuredImage``);
    the snake_case field names are accepted as well.  Unknown keys are kept
    so extension hooks can read them.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    title: str = ""
    description: str | None = None
    excerpt: str | None = None
    publish_date: str | None = Field(default=None, alias="publishDate")
    featured_image: str | None = Field(default=None, alias="featuredImage")
    tags: list[str] | None = None


class RawEntry(BaseModel):
    """A discovered content record: front-matter plus its canonical link."""

    model_config = ConfigDict(populate_by_name=True)

    metadata: EntryMetadata = Field(
        validation_alias=AliasChoices("metadata", "frontmatter"),
    )
    location: str = Field(validation_alias=AliasChoices("location", "url", "href"))

    def metadata_dict(self) -> dict:
        """Front-matter as a plain dict, extra keys included."""
        return self.metadata.model_dump(by_alias=True)


# ---------------------------------------------------------------------------
# Normalized output (consumed by the rendering layer)
# ---------------------------------------------------------------------------

class NormalizedEntry(BaseModel):
    """Listing-ready entry.

    Fields contributed by an extension hook are stored as extras and are
    reachable as attributes (``entry.category``).  Hook values are merged
    without validation, so a hook may store any value in a base field.
    """

    model_config = ConfigDict(extra="allow")

    title: str = ""
    description: str | None = None
    excerpt: str | None = None
    publish_date: datetime | None = None
    featured_image: str | None = None
    href: str
    tags: list[str] = Field(default_factory=list)

    @property
    def has_date(self) -> bool:
        """True when ``publish_date`` holds a datetime the listing can sort by."""
        return isinstance(self.publish_date, datetime)
