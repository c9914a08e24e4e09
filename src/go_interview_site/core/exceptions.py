"""Exceptions raised by the site tooling.

Every error carries a message suitable for printing as ``Error: <message>``.
"""

from pathlib import Path


class SiteError(Exception):
    """Base class for site tooling errors."""


class GeneratorNotFoundError(SiteError):
    """Raised when the static-site generator binary cannot be resolved."""

    def __init__(self, binary: str) -> None:
        self.binary = binary
        super().__init__(
            f"site generator '{binary}' not found on PATH; "
            "install Hugo or set GO_INTERVIEW_HUGO_BIN"
        )


class UnsafePathError(SiteError):
    """Raised when a path would escape the site root."""

    def __init__(self, path: Path, root: Path) -> None:
        self.path = path
        self.root = root
        super().__init__(f"refusing to touch {path}: outside site root {root}")


class FrontMatterError(SiteError):
    """Raised when a page's metadata block cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
