"""Core configuration, generator wrapper and site maintenance."""

from go_interview_site.core.config import Settings, settings
from go_interview_site.core.exceptions import (
    FrontMatterError,
    GeneratorNotFoundError,
    SiteError,
    UnsafePathError,
)

__all__ = [
    "FrontMatterError",
    "GeneratorNotFoundError",
    "Settings",
    "SiteError",
    "UnsafePathError",
    "settings",
]
