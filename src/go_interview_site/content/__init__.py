"""Content tree inventory."""

from go_interview_site.content.pages import Page, load_pages, select_pages, sort_pages

__all__ = [
    "Page",
    "load_pages",
    "select_pages",
    "sort_pages",
]
