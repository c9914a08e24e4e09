"""Command-line interface for the Go interview questions site.

Wraps the Hugo commands the site needs (serve, drafts, build, new), cleans
build output, and checks page front matter.
"""

import json
import sys
from dataclasses import dataclass, field
from itertools import groupby
from pathlib import Path
from typing import NoReturn

import click
from structlog.stdlib import BoundLogger

from go_interview_site import __version__
from go_interview_site.content.pages import load_pages, select_pages, sort_pages
from go_interview_site.core import hugo
from go_interview_site.core.config import Settings, settings
from go_interview_site.core.exceptions import SiteError
from go_interview_site.core.site import NEW_EXAMPLE, NEW_USAGE, clean as clean_site, usage_lines
from go_interview_site.frontmatter.validator import validate_tree
from go_interview_site.utils.logging import get_logger, setup_logging

logger: BoundLogger = get_logger(__name__)

PASSTHROUGH = {"ignore_unknown_options": True, "allow_interspersed_args": False}


@dataclass
class CLIContext:
    """Typed context object for Click commands."""

    debug: bool = False
    settings: Settings = field(default_factory=lambda: settings)


def _cli_context(ctx: click.Context) -> CLIContext:
    return ctx.obj if isinstance(ctx.obj, CLIContext) else CLIContext()


def _fail(event: str, error: Exception) -> NoReturn:
    """Report a failed command on stderr and exit 1.

    Must be called from an ``except`` block so unexpected errors keep their
    traceback in the log.
    """
    if isinstance(error, SiteError):
        logger.error(event, error=str(error))
    else:
        logger.exception(event, error=str(error))
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def _run_generator(argv: list[str], cli_ctx: CLIContext) -> None:
    """Run a Hugo command and exit with its status."""
    returncode = hugo.run(argv, cwd=cli_ctx.settings.site_root)
    if returncode != 0:
        sys.exit(returncode)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="go-interview")
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging",
)
@click.option(
    "--site-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding hugo.toml and content/ (default: GO_INTERVIEW_SITE_ROOT or .)",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, site_root: Path | None) -> None:
    """Go Interview Questions - build tooling for the static site."""
    active = Settings(site_root=site_root) if site_root is not None else settings
    ctx.obj = CLIContext(debug=debug, settings=active)

    setup_logging(
        level="DEBUG" if debug else active.log_level,
        json_logs=active.json_logs,
        include_timestamp=active.include_timestamp,
    )
    if debug:
        logger.debug("Debug mode enabled", site_root=str(active.site_root))

    if ctx.invoked_subcommand is None:
        for line in usage_lines():
            click.echo(line)


@cli.command("help")
def help_() -> None:
    """List the available commands."""
    for line in usage_lines():
        click.echo(line)


@cli.command(context_settings=PASSTHROUGH)
@click.argument("hugo_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def serve(ctx: click.Context, hugo_args: tuple[str, ...]) -> None:
    """Start the development server with drafts and live reload."""
    try:
        cli_ctx = _cli_context(ctx)
        _run_generator(hugo.serve_command(cli_ctx.settings, extra_args=hugo_args), cli_ctx)
    except Exception as e:
        _fail("Serve failed", e)


@cli.command(context_settings=PASSTHROUGH)
@click.argument("hugo_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def drafts(ctx: click.Context, hugo_args: tuple[str, ...]) -> None:
    """Serve including draft and future-dated content."""
    try:
        cli_ctx = _cli_context(ctx)
        _run_generator(
            hugo.serve_command(cli_ctx.settings, include_future=True, extra_args=hugo_args),
            cli_ctx,
        )
    except Exception as e:
        _fail("Serve failed", e)


@cli.command(context_settings=PASSTHROUGH)
@click.argument("hugo_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def build(ctx: click.Context, hugo_args: tuple[str, ...]) -> None:
    """Build the site for production (minified)."""
    try:
        cli_ctx = _cli_context(ctx)
        _run_generator(hugo.build_command(cli_ctx.settings, extra_args=hugo_args), cli_ctx)
    except Exception as e:
        _fail("Build failed", e)


@cli.command()
@click.pass_context
def clean(ctx: click.Context) -> None:
    """Remove generated files (public/ and resources/_gen/)."""
    try:
        removed = clean_site(_cli_context(ctx).settings)
        for path in removed:
            click.echo(f"Removed {path}")
    except Exception as e:
        _fail("Clean failed", e)


@cli.command(context_settings=PASSTHROUGH)
@click.argument("post", required=False)
@click.argument("hugo_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def new(ctx: click.Context, post: str | None, hugo_args: tuple[str, ...]) -> None:
    """Create new content at content/POST.

    POST may also be written the Makefile way, as POST=path/filename.md.
    """
    if post is not None and post.startswith("POST="):
        post = post[len("POST=") :]

    # An option in POST's place means the path was left out.
    if not post or post.startswith("-"):
        click.echo(NEW_USAGE)
        click.echo(NEW_EXAMPLE)
        return

    try:
        cli_ctx = _cli_context(ctx)
        logger.info("Scaffolding page", post=post)
        _run_generator(hugo.new_command(cli_ctx.settings, post, extra_args=hugo_args), cli_ctx)
    except Exception as e:
        _fail("Scaffolding failed", e)


@cli.command()
@click.option(
    "--fix",
    is_flag=True,
    help="Automatically fix mechanical issues (title whitespace, slugs, weights)",
)
@click.option(
    "--emit-json",
    is_flag=True,
    help="Output results as JSON for CI integration",
)
@click.pass_context
def check(ctx: click.Context, fix: bool, emit_json: bool) -> None:
    """Validate front matter of every content page."""
    content_path = _cli_context(ctx).settings.content_path

    if not content_path.is_dir():
        click.echo(f"Error: content directory not found: {content_path}", err=True)
        sys.exit(1)

    try:
        results = validate_tree(content_path, autofix=fix)
    except Exception as e:
        _fail("Front matter check failed", e)

    if not results:
        click.echo("No Markdown files found", err=True)
        sys.exit(1)

    if emit_json:
        click.echo(json.dumps(results, ensure_ascii=False, indent=2))
    else:
        for result in results:
            status = "OK" if result["ok"] else "ISSUES"
            fixed_marker = " [FIXED]" if result.get("fixed", False) else ""
            click.echo(f"{result['file']}: {status}{fixed_marker}")
            for error in result["errors"]:
                click.echo(f"  - {error}")

    if any(not result["ok"] for result in results):
        sys.exit(1)


@cli.command()
@click.option("--drafts", "include_drafts", is_flag=True, help="Include draft pages")
@click.option("--future", "include_future", is_flag=True, help="Include future-dated pages")
@click.pass_context
def pages(ctx: click.Context, include_drafts: bool, include_future: bool) -> None:
    """List pages a build would include, in navigation order."""
    content_path = _cli_context(ctx).settings.content_path

    try:
        loaded = load_pages(content_path)
    except Exception as e:
        _fail("Could not load pages", e)

    selected = select_pages(loaded, include_drafts=include_drafts, include_future=include_future)
    by_section = sorted(selected, key=lambda p: p.section)
    for section, group in groupby(by_section, key=lambda p: p.section):
        click.echo(f"{section or '/'}")
        for page in sort_pages(group):
            marker = " [draft]" if page.draft else ""
            click.echo(
                f"  {page.weight:>4}  {page.path.relative_to(content_path)}  {page.title}{marker}"
            )


@cli.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Display current configuration settings.

    Shows configuration values from environment variables or defaults.
    """
    try:
        cli_ctx = _cli_context(ctx)
        active = cli_ctx.settings

        click.echo("Current Configuration:")
        click.echo("  Project: Go Interview Questions")
        click.echo(f"  Version: {__version__}")
        click.echo(f"  Debug: {cli_ctx.debug}")
        click.echo(f"  Log Level: {active.log_level}")
        click.echo(f"  Hugo Binary: {active.hugo_bin}")
        click.echo(f"  Site Root: {active.site_root}")
        click.echo(f"  Content Dir: {active.content_path}")
        click.echo(f"  Publish Dir: {active.publish_path}")
        click.echo(f"  Generated Dir: {active.generated_path}")
    except Exception as e:
        _fail("Failed to display configuration", e)


if __name__ == "__main__":
    cli()
