"""Site maintenance: removing build output and the help listing."""

import shutil
from pathlib import Path

from go_interview_site.core.config import Settings
from go_interview_site.core.exceptions import UnsafePathError
from go_interview_site.utils.logging import get_logger

logger = get_logger(__name__)

COMMANDS: tuple[tuple[str, str], ...] = (
    ("serve", "Start Hugo development server with live reload"),
    ("build", "Build the site for production"),
    ("clean", "Remove generated files"),
    ("new", "Create new content (usage: make new POST=path/filename.md)"),
    ("drafts", "Serve including draft content"),
    ("check", "Validate front matter of every content page"),
    ("pages", "List pages a build would include, in navigation order"),
)

NEW_USAGE = "Usage: make new POST=path/filename.md"
NEW_EXAMPLE = "Example: make new POST=concurrency/new-topic.md"


def usage_lines() -> list[str]:
    """Lines printed when no command is given."""
    width = max(len(name) for name, _ in COMMANDS)
    lines = ["Available commands:"]
    lines.extend(f"  make {name.ljust(width)} - {description}" for name, description in COMMANDS)
    return lines


def ensure_within(path: Path, root: Path) -> Path:
    """Resolve ``path`` and check that it lives strictly below ``root``.

    Raises:
        UnsafePathError: If the resolved path is the root itself or outside it.
    """
    resolved = path.resolve()
    root = root.resolve()
    if resolved == root or not resolved.is_relative_to(root):
        raise UnsafePathError(resolved, root)
    return resolved


def clean(settings: Settings) -> list[Path]:
    """Remove the publish directory and the generated resources cache.

    Returns:
        Directories that existed and were removed.

    Raises:
        UnsafePathError: If a configured directory resolves outside the site root.
    """
    targets = [
        ensure_within(settings.publish_path, settings.site_root),
        ensure_within(settings.generated_path, settings.site_root),
    ]

    removed: list[Path] = []
    for target in targets:
        if not target.exists():
            logger.debug("Nothing to remove", path=str(target))
            continue
        shutil.rmtree(target)
        logger.info("Removed generated directory", path=str(target))
        removed.append(target)
    return removed
