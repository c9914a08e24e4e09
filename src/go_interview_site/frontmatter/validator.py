"""Front matter validator with autofix capabilities.

Validates the YAML metadata block of every Markdown page under the content
directory using the Pydantic models in ``frontmatter.models``.

Features:
    - Strict validation: title and weight required, date required outside
      section index pages, unknown keys rejected
    - Body H1 detection: the title renders automatically
    - Slug collisions: two pages of one section must not share a URL
    - Autofix: trims titles, normalises slugs, turns "10" weights into 10
"""

from __future__ import annotations

import re
import time
from collections import defaultdict
from io import StringIO
from pathlib import Path
from typing import Any

import frontmatter
from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from go_interview_site.frontmatter.models import PageFM, SectionFM
from go_interview_site.utils.logging import get_logger, log_performance

logger = get_logger(__name__)

# Regular expression to detect body H1 headings
H1_RE = re.compile(r"^\s*#\s+(.+?)\s*$", re.MULTILINE)

# Fenced code blocks (3+ backticks/tildes, optionally indented)
FENCE_RE = re.compile(r"^\s*(`{3,}|~{3,}).*?^\s*\1", re.DOTALL | re.MULTILINE)

# Leading YAML block delimited by --- lines
BLOCK_RE = re.compile(r"\A---\r?\n(.*?\r?\n)?---\r?\n?", re.DOTALL)

# Weights autofix may convert; ASCII digits only
INT_RE = re.compile(r"-?[0-9]+")

SECTION_INDEX = "_index.md"


def model_for(path: Path) -> type[SectionFM]:
    """Section index pages may omit the date; everything else needs one."""
    return SectionFM if path.name == SECTION_INDEX else PageFM


def slugify(value: str) -> str:
    """Lowercase kebab-case form of ``value``."""
    slug = re.sub(r"[^a-z0-9]+", "-", value.strip().lower())
    return slug.strip("-")


def parse_front_matter(path: Path) -> tuple[dict[str, Any] | None, str]:
    """Parse the metadata block of a Markdown page.

    Returns:
        Tuple of (metadata_dict, body). Metadata is None when the page has no
        metadata block or the block does not parse.
    """
    try:
        post = frontmatter.load(path)
    except Exception as e:  # PyYAML, JSON and decode errors share no base
        logger.debug("Front matter did not parse", path=str(path), error=str(e))
        return None, ""

    meta = post.metadata if isinstance(post.metadata, dict) else {}
    if not meta:
        return None, post.content or ""
    return meta, post.content or ""


def autofix_front_matter(path: Path, root: Path | None = None) -> bool:
    """Fix mechanical front matter issues in place.

    Fixes:
        - title: strip surrounding whitespace
        - slug: normalise to lowercase kebab-case
        - weight: digit-only strings become integers
        - draft: "true"/"false" strings become booleans

    Args:
        path: Markdown page to rewrite.
        root: Directory the page must live under. Defaults to the current
            working directory.

    Returns:
        True if the file was rewritten.
    """
    root = (root or Path.cwd()).resolve()
    if not path.resolve().is_relative_to(root):
        logger.warning("Refusing to autofix file outside root", path=str(path), root=str(root))
        return False

    try:
        text = path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        logger.warning("Cannot read file for autofix", path=str(path), error=str(e))
        return False

    match = BLOCK_RE.match(text)
    if not match or not match.group(1):
        return False

    yrt = YAML(typ="rt")
    yrt.preserve_quotes = True
    yrt.allow_duplicate_keys = False

    try:
        data = yrt.load(match.group(1))
    except YAMLError:
        return False

    if not isinstance(data, dict):
        return False

    changed = False

    title = data.get("title")
    if isinstance(title, str) and title != title.strip():
        data["title"] = title.strip()
        changed = True

    slug = data.get("slug")
    if isinstance(slug, str) and slug and slugify(slug) != slug:
        data["slug"] = slugify(slug)
        changed = True

    weight = data.get("weight")
    if isinstance(weight, str) and INT_RE.fullmatch(weight.strip()):
        data["weight"] = int(weight.strip())
        changed = True

    draft = data.get("draft")
    if isinstance(draft, str) and draft.strip().lower() in ("true", "false"):
        data["draft"] = draft.strip().lower() == "true"
        changed = True

    if changed:
        out = StringIO()
        yrt.dump(data, out)
        new_yaml = out.getvalue().rstrip()
        path.write_text(f"---\n{new_yaml}\n---\n{text[match.end() :]}", encoding="utf-8")
        logger.info("Autofixed front matter", path=str(path))

    return changed


def validate_file(path: Path, autofix: bool = False, root: Path | None = None) -> dict[str, Any]:
    """Validate a single Markdown page.

    Args:
        path: Markdown page.
        autofix: If True, attempt to fix mechanical issues first.
        root: Directory autofix is allowed to write under.

    Returns:
        Dictionary with validation results:
            - file: str - File path
            - ok: bool - Whether validation passed
            - errors: list[str] - List of error messages
            - fixed: bool - Whether autofix made changes
    """
    errors: list[str] = []
    fixed = False

    if autofix:
        fixed = autofix_front_matter(path, root=root)

    meta, content = parse_front_matter(path)

    if meta is None:
        errors.append("missing or invalid front matter")
        return {"file": str(path), "ok": False, "errors": errors, "fixed": fixed}

    content_without_code = FENCE_RE.sub("", content)
    h1_match = H1_RE.search(content_without_code)
    if h1_match:
        h1_text = h1_match.group(1).strip()
        errors.append(f"redundant H1 found: '# {h1_text}'; 'title' renders automatically")

    try:
        model_for(path).model_validate(meta)
    except ValidationError as e:
        for err in e.errors():
            loc = "/".join(map(str, err["loc"])) or "front matter"
            errors.append(f"{loc}: {err['msg']}")

    return {"file": str(path), "ok": not errors, "errors": errors, "fixed": fixed}


def find_pages(content_dir: Path) -> list[Path]:
    """All Markdown pages under ``content_dir`` in sorted order."""
    return sorted(p for p in content_dir.rglob("*.md") if p.is_file())


def slug_collisions(content_dir: Path, paths: list[Path]) -> dict[Path, str]:
    """Pages whose URL segment clashes with another page of the same section.

    The URL segment is the ``slug`` key when set, the file stem otherwise.
    Section index pages own the section URL itself and are skipped.
    """
    seen: dict[tuple[Path, str], list[Path]] = defaultdict(list)
    for path in paths:
        if path.name == SECTION_INDEX:
            continue
        meta, _ = parse_front_matter(path)
        slug = meta.get("slug") if meta else None
        segment = slug if isinstance(slug, str) and slug else path.stem
        seen[(path.parent.relative_to(content_dir), segment)].append(path)

    clashes: dict[Path, str] = {}
    for (_, segment), group in seen.items():
        if len(group) < 2:
            continue
        for path in group:
            others = ", ".join(str(p) for p in group if p != path)
            clashes[path] = f"slug '{segment}' also used by {others}"
    return clashes


def validate_tree(content_dir: Path, autofix: bool = False) -> list[dict[str, Any]]:
    """Validate every page under ``content_dir``.

    Returns:
        One result dictionary per page (see validate_file), sorted by path.
    """
    start = time.perf_counter()
    paths = find_pages(content_dir)

    results = [validate_file(path, autofix=autofix, root=content_dir) for path in paths]

    clashes = slug_collisions(content_dir, paths)
    for result in results:
        clash = clashes.get(Path(result["file"]))
        if clash:
            result["errors"].append(clash)
            result["ok"] = False

    failed = sum(1 for r in results if not r["ok"])
    log_performance(
        logger,
        operation="check",
        duration_ms=(time.perf_counter() - start) * 1000,
        success=failed == 0,
        pages=len(results),
        failed=failed,
    )
    return results
