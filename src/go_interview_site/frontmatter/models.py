"""Pydantic models for page front matter.

Schema Types:
    - PageFM: regular question/answer pages (date required)
    - SectionFM: section index pages (``_index.md``, date optional)

Only keys Hugo understands are accepted so that misspellings such as
``wieght`` fail instead of silently dropping the ordering hint.
"""

from __future__ import annotations

import datetime as dt
import re

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, field_validator

# Lowercase kebab-case URL segment
SLUG = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class SectionFM(BaseModel):
    """Front matter of a section index page (``_index.md``).

    Attributes:
        title: Page title (renders as H1, no body H1 allowed).
        weight: Navigation order hint; lower sorts first, 0 sorts last.
        date: Optional publication date.
        draft: Unpublished pages are left out of production builds.
        slug: Optional URL segment overriding the file name.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: str = Field(min_length=1)
    weight: StrictInt
    date: dt.datetime | dt.date | None = None
    draft: StrictBool = False
    slug: str | None = None

    # Other keys Hugo reads; accepted but not checked further.
    description: str | None = None
    summary: str | None = None
    tags: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    aliases: list[str] = Field(default_factory=list)
    toc: bool | None = None
    lastmod: dt.datetime | dt.date | None = None
    publish_date: dt.datetime | dt.date | None = Field(default=None, alias="publishDate")
    expiry_date: dt.datetime | dt.date | None = Field(default=None, alias="expiryDate")
    link_title: str | None = Field(default=None, alias="linkTitle")

    @field_validator("title")
    def _title(cls, v: str) -> str:  # noqa: N805  # fmt: skip
        """Reject whitespace-only titles."""
        if not v.strip():
            raise ValueError("title must not be blank")
        return v

    @field_validator("slug")
    def _slug(cls, v: str | None) -> str | None:  # noqa: N805  # fmt: skip
        """Validate that the slug is lowercase kebab-case."""
        if v is not None and not SLUG.fullmatch(v):
            raise ValueError(f"slug must be lowercase kebab-case: {v!r}")
        return v

    @property
    def effective_date(self) -> dt.datetime | dt.date | None:
        """Date Hugo uses to decide whether the page is in the future."""
        return self.publish_date or self.date


class PageFM(SectionFM):
    """Front matter of a regular content page.

    Same as SectionFM except that ``date`` is required.
    """

    date: dt.datetime | dt.date  # type: ignore[assignment]
