"""Pytest configuration and shared fixtures for the site tooling tests.

This module provides:
- Pytest markers for test categorization
- A throwaway site tree (hugo.toml, content/, build output) per test
- Logging setup shared by every test
"""

from pathlib import Path

import pytest

# ============================================================================
# Test Fixture Paths
# ============================================================================

PROJECT_ROOT = Path(__file__).parent.parent
CONTENT_DIR = PROJECT_ROOT / "content"


# ============================================================================
# Pytest Markers
# ============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom pytest markers.

    Markers:
        unit: Fast, isolated tests (no external dependencies)
        integration: Tests verifying component interaction
    """
    config.addinivalue_line(
        "markers",
        "unit: Unit tests (fast, isolated, no external dependencies)",
    )
    config.addinivalue_line(
        "markers",
        "integration: Integration tests (moderate speed, may use fixtures)",
    )


# ============================================================================
# Site Fixtures
# ============================================================================


def write_page(root: Path, relative: str, front_matter: str, body: str = "Answer.\n") -> Path:
    """Write a Markdown page with a YAML block under ``root``."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"---\n{front_matter.strip()}\n---\n\n{body}", encoding="utf-8")
    return path


@pytest.fixture(scope="session")
def repo_content_dir() -> Path:
    """Return the content directory shipped with the repository."""
    return CONTENT_DIR


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Return a minimal site: hugo.toml plus a small content tree.

    Pages:
        basics/_index.md        section index, no date
        basics/slices.md        weight 10
        basics/maps.md          weight 20, draft
        basics/future.md        weight 30, dated 2999
    """
    root = tmp_path / "site"
    root.mkdir()
    (root / "hugo.toml").write_text('title = "Test"\n', encoding="utf-8")
    content = root / "content"

    write_page(content, "basics/_index.md", "title: Basics\nweight: 1")
    write_page(
        content,
        "basics/slices.md",
        "date: 2024-01-01T00:00:00Z\ntitle: Slices\nweight: 10\nslug: slices",
    )
    write_page(
        content,
        "basics/maps.md",
        "date: 2024-01-02T00:00:00Z\ndraft: true\ntitle: Maps\nweight: 20",
    )
    write_page(
        content,
        "basics/future.md",
        "date: 2999-01-01T00:00:00Z\ntitle: Future\nweight: 30",
    )
    return root


@pytest.fixture
def built_site(site_root: Path) -> Path:
    """Return ``site_root`` with fake build output and resource cache."""
    public = site_root / "public"
    public.mkdir()
    (public / "index.html").write_text("<html></html>", encoding="utf-8")
    gen = site_root / "resources" / "_gen" / "images"
    gen.mkdir(parents=True)
    (gen / "thumb.png").write_bytes(b"\x89PNG")
    return site_root


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def setup_logging() -> None:
    """Setup test logging configuration.

    Automatically applied to all tests to ensure consistent logging setup.
    """
    from go_interview_site.utils.logging import setup_logging

    setup_logging(level="DEBUG", json_logs=False, include_timestamp=False)


@pytest.fixture
def page_writer():
    """Return the helper that writes a page with a YAML block."""
    return write_page
