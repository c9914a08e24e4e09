"""Command lines for the Hugo static-site generator.

Hugo does all of the real work (rendering, live reload, minification). This
module only decides which arguments to pass and runs the binary from the site
root with the caller's stdio attached.
"""

import shutil
import subprocess  # nosec B404
import time
from collections.abc import Sequence
from pathlib import Path

from go_interview_site.core.config import Settings
from go_interview_site.core.exceptions import GeneratorNotFoundError
from go_interview_site.utils.logging import get_logger, log_performance

logger = get_logger(__name__)

# Shell convention for a command stopped by SIGINT
INTERRUPTED = 130


def serve_command(
    settings: Settings,
    include_future: bool = False,
    extra_args: Sequence[str] = (),
) -> list[str]:
    """Preview server with drafts and live reload.

    Args:
        settings: Active settings.
        include_future: Also render pages dated in the future.
        extra_args: Arguments appended verbatim.

    Returns:
        Argument list, e.g. ``["hugo", "server", "--buildDrafts", "--watch"]``.
    """
    argv = [settings.hugo_bin, "server", "--buildDrafts"]
    if include_future:
        argv.append("--buildFuture")
    argv.append("--watch")
    argv.extend(extra_args)
    return argv


def build_command(settings: Settings, extra_args: Sequence[str] = ()) -> list[str]:
    """Minified production build."""
    return [settings.hugo_bin, "--minify", *extra_args]


def new_command(settings: Settings, post: str, extra_args: Sequence[str] = ()) -> list[str]:
    """Scaffold ``content/<post>`` from the archetypes.

    ``post`` is passed through unchanged; Hugo owns path handling.
    """
    return [settings.hugo_bin, "new", f"{settings.content_dir}/{post}", *extra_args]


def resolve_binary(binary: str) -> str:
    """Return the full path of the generator binary.

    Raises:
        GeneratorNotFoundError: If ``binary`` is not executable or not on PATH.
    """
    resolved = shutil.which(binary)
    if resolved is None:
        raise GeneratorNotFoundError(binary)
    return resolved


def run(argv: Sequence[str], cwd: Path) -> int:
    """Run a generator command and return its exit status.

    stdin/stdout/stderr are inherited so the dev server stays interactive.
    A Ctrl-C while serving is the normal way to stop and maps to status 0;
    any other interrupted command returns 130.

    Args:
        argv: Command built by one of the ``*_command`` helpers.
        cwd: Site root to run in.

    Raises:
        GeneratorNotFoundError: If the binary cannot be resolved.
    """
    executable = resolve_binary(argv[0])
    command = [executable, *argv[1:]]

    logger.info("Running site generator", argv=list(argv), cwd=str(cwd))
    start = time.perf_counter()
    try:
        completed = subprocess.run(command, cwd=cwd, check=False)  # nosec B603
        returncode = completed.returncode
    except KeyboardInterrupt:
        logger.info("Site generator interrupted", argv=list(argv))
        returncode = 0 if len(argv) > 1 and argv[1] == "server" else INTERRUPTED

    log_performance(
        logger,
        operation=argv[1] if len(argv) > 1 and not argv[1].startswith("-") else "build",
        duration_ms=(time.perf_counter() - start) * 1000,
        success=returncode == 0,
        returncode=returncode,
    )
    if returncode != 0:
        logger.warning("Site generator failed", argv=list(argv), returncode=returncode)
    return returncode
