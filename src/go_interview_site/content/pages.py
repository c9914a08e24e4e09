"""Page inventory: which pages a build includes and in what order.

Mirrors the generator's inclusion rules (drafts, future and expired pages)
and its default navigation ordering so the effect of front matter edits can
be checked without running a build.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from go_interview_site.core.exceptions import FrontMatterError
from go_interview_site.frontmatter.validator import find_pages, model_for, parse_front_matter
from go_interview_site.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Page:
    """A content page reduced to the fields that drive inclusion and order."""

    path: Path
    section: str
    title: str
    weight: int
    date: dt.datetime | None = None
    publish_date: dt.datetime | None = None
    expiry_date: dt.datetime | None = None
    draft: bool = False
    slug: str | None = None

    @property
    def is_section(self) -> bool:
        return self.path.name == "_index.md"

    @property
    def effective_date(self) -> dt.datetime | None:
        return self.publish_date or self.date


def as_datetime(value: dt.datetime | dt.date | None) -> dt.datetime | None:
    """Timezone-aware datetime for comparison; naive values are taken as UTC."""
    if value is None:
        return None
    if not isinstance(value, dt.datetime):
        value = dt.datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt.timezone.utc)
    return value


def load_page(path: Path, content_dir: Path) -> Page:
    """Read one page.

    Raises:
        FrontMatterError: If the metadata block is missing or invalid.
    """
    meta, _ = parse_front_matter(path)
    if meta is None:
        raise FrontMatterError(path, "missing or invalid front matter")
    try:
        fm = model_for(path).model_validate(meta)
    except ValidationError as e:
        raise FrontMatterError(path, f"{e.error_count()} front matter error(s)") from e

    section = path.parent.relative_to(content_dir).as_posix()
    return Page(
        path=path,
        section="" if section == "." else section,
        title=fm.title.strip(),
        weight=fm.weight,
        date=as_datetime(fm.date),
        publish_date=as_datetime(fm.publish_date),
        expiry_date=as_datetime(fm.expiry_date),
        draft=fm.draft,
        slug=fm.slug,
    )


def load_pages(content_dir: Path) -> list[Page]:
    """Every page under ``content_dir``, in path order."""
    pages = [load_page(path, content_dir) for path in find_pages(content_dir)]
    logger.debug("Loaded pages", content_dir=str(content_dir), count=len(pages))
    return pages


def select_pages(
    pages: Iterable[Page],
    include_drafts: bool = False,
    include_future: bool = False,
    now: dt.datetime | None = None,
) -> list[Page]:
    """Pages a build with the given flags would render.

    Args:
        pages: Candidate pages.
        include_drafts: Keep draft pages (``--buildDrafts``).
        include_future: Keep pages dated after ``now`` (``--buildFuture``).
        now: Reference time. Defaults to the current UTC time.
    """
    now = as_datetime(now) or dt.datetime.now(dt.timezone.utc)
    selected = []
    for page in pages:
        if page.draft and not include_drafts:
            continue
        effective = page.effective_date
        if effective is not None and effective > now and not include_future:
            continue
        if page.expiry_date is not None and page.expiry_date <= now:
            continue
        selected.append(page)
    return selected


def _order_key(page: Page) -> tuple[bool, int, bool, float, str, str]:
    effective = page.effective_date
    return (
        page.weight == 0,
        page.weight,
        effective is None,
        -effective.timestamp() if effective is not None else 0.0,
        page.title.lower(),
        page.path.as_posix(),
    )


def sort_pages(pages: Iterable[Page]) -> list[Page]:
    """Navigation order: weighted pages ascending, weight 0 last, then newest first."""
    return sorted(pages, key=_order_key)
