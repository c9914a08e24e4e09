"""Front matter contract for content pages.

Pydantic models for the metadata block at the top of every page, and a
validator that runs them over the content tree.
"""

from .models import PageFM, SectionFM
from .validator import parse_front_matter, validate_file, validate_tree

__all__ = [
    "PageFM",
    "SectionFM",
    "parse_front_matter",
    "validate_file",
    "validate_tree",
]
