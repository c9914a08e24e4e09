"""Tests for the page front matter contract and validator."""

import datetime as dt
from pathlib import Path

import pytest
from pydantic import ValidationError

from go_interview_site.frontmatter.models import PageFM, SectionFM
from go_interview_site.frontmatter.validator import (
    autofix_front_matter,
    parse_front_matter,
    slugify,
    validate_file,
    validate_tree,
)

VALID = {"date": dt.date(2024, 3, 2), "title": "Slices", "weight": 10}


class TestModels:
    """Pydantic models."""

    @pytest.mark.unit
    def test_valid_page(self) -> None:
        fm = PageFM.model_validate({**VALID, "slug": "slices-vs-arrays", "draft": True})

        assert fm.title == "Slices"
        assert fm.weight == 10
        assert fm.draft is True
        assert fm.slug == "slices-vs-arrays"

    @pytest.mark.unit
    def test_draft_defaults_to_false(self) -> None:
        assert PageFM.model_validate(VALID).draft is False

    @pytest.mark.unit
    @pytest.mark.parametrize("missing", ["title", "weight", "date"])
    def test_required_fields(self, missing: str) -> None:
        data = {k: v for k, v in VALID.items() if k != missing}

        with pytest.raises(ValidationError) as exc_info:
            PageFM.model_validate(data)

        assert exc_info.value.errors()[0]["loc"] == (missing,)

    @pytest.mark.unit
    def test_section_date_optional(self) -> None:
        fm = SectionFM.model_validate({"title": "Basics", "weight": 1})

        assert fm.date is None

    @pytest.mark.unit
    @pytest.mark.parametrize("slug", ["Slices", "slices_vs_arrays", "-slices", "a--b", "with space"])
    def test_bad_slug(self, slug: str) -> None:
        with pytest.raises(ValidationError, match="kebab-case"):
            PageFM.model_validate({**VALID, "slug": slug})

    @pytest.mark.unit
    @pytest.mark.parametrize("weight", ["10", True, 1.5])
    def test_weight_must_be_integer(self, weight: object) -> None:
        with pytest.raises(ValidationError):
            PageFM.model_validate({**VALID, "weight": weight})

    @pytest.mark.unit
    def test_negative_and_zero_weight_allowed(self) -> None:
        assert PageFM.model_validate({**VALID, "weight": 0}).weight == 0
        assert PageFM.model_validate({**VALID, "weight": -5}).weight == -5

    @pytest.mark.unit
    def test_blank_title(self) -> None:
        with pytest.raises(ValidationError, match="blank"):
            PageFM.model_validate({**VALID, "title": "   "})

    @pytest.mark.unit
    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            PageFM.model_validate({**VALID, "wieght": 3})

        assert exc_info.value.errors()[0]["loc"] == ("wieght",)

    @pytest.mark.unit
    def test_hugo_keys_accepted(self) -> None:
        fm = PageFM.model_validate(
            {
                **VALID,
                "description": "Arrays are values; slices are views.",
                "tags": ["slices"],
                "publishDate": "2024-03-05T00:00:00Z",
                "linkTitle": "Slices",
            }
        )

        assert fm.effective_date == dt.datetime(2024, 3, 5, tzinfo=dt.timezone.utc)

    @pytest.mark.unit
    def test_string_dates_parsed(self) -> None:
        fm = PageFM.model_validate({**VALID, "date": "2024-03-02T10:00:00+02:00"})

        assert isinstance(fm.date, dt.datetime)


class TestParse:
    @pytest.mark.unit
    def test_parses_block_and_body(self, tmp_path: Path, page_writer) -> None:
        path = page_writer(tmp_path, "a.md", "title: A\nweight: 1", body="Body text.\n")

        meta, body = parse_front_matter(path)

        assert meta == {"title": "A", "weight": 1}
        assert body.strip() == "Body text."

    @pytest.mark.unit
    def test_no_block(self, tmp_path: Path) -> None:
        path = tmp_path / "plain.md"
        path.write_text("Just text.\n", encoding="utf-8")

        meta, _ = parse_front_matter(path)

        assert meta is None

    @pytest.mark.unit
    def test_malformed_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.md"
        path.write_text("---\ntitle: [unclosed\n---\nBody\n", encoding="utf-8")

        meta, body = parse_front_matter(path)

        assert meta is None
        assert body == ""


class TestValidateFile:
    @pytest.mark.unit
    def test_ok(self, tmp_path: Path, page_writer) -> None:
        path = page_writer(tmp_path, "a.md", "date: 2024-01-01\ntitle: A\nweight: 1")

        result = validate_file(path)

        assert result == {"file": str(path), "ok": True, "errors": [], "fixed": False}

    @pytest.mark.unit
    def test_missing_front_matter(self, tmp_path: Path) -> None:
        path = tmp_path / "plain.md"
        path.write_text("No metadata.\n", encoding="utf-8")

        result = validate_file(path)

        assert result["ok"] is False
        assert result["errors"] == ["missing or invalid front matter"]

    @pytest.mark.unit
    def test_model_errors_reported_by_key(self, tmp_path: Path, page_writer) -> None:
        path = page_writer(tmp_path, "a.md", "date: 2024-01-01\ntitle: A")

        result = validate_file(path)

        assert result["ok"] is False
        assert any(e.startswith("weight:") for e in result["errors"])

    @pytest.mark.unit
    def test_body_h1_flagged(self, tmp_path: Path, page_writer) -> None:
        path = page_writer(
            tmp_path, "a.md", "date: 2024-01-01\ntitle: A\nweight: 1", body="# A\n\nText.\n"
        )

        result = validate_file(path)

        assert result["ok"] is False
        assert "redundant H1" in result["errors"][0]

    @pytest.mark.unit
    def test_h1_inside_code_fence_ignored(self, tmp_path: Path, page_writer) -> None:
        body = "```sh\n# build with escape analysis output\ngo build -gcflags=-m\n```\n"
        path = page_writer(tmp_path, "a.md", "date: 2024-01-01\ntitle: A\nweight: 1", body=body)

        assert validate_file(path)["ok"] is True

    @pytest.mark.unit
    def test_section_index_without_date(self, tmp_path: Path, page_writer) -> None:
        index = page_writer(tmp_path, "basics/_index.md", "title: Basics\nweight: 1")
        page = page_writer(tmp_path, "basics/page.md", "title: Page\nweight: 1")

        assert validate_file(index)["ok"] is True
        assert validate_file(page)["ok"] is False


class TestAutofix:
    @pytest.mark.unit
    def test_fixes_mechanical_issues(self, tmp_path: Path, page_writer) -> None:
        path = page_writer(
            tmp_path,
            "a.md",
            'date: 2024-01-01\ntitle: "  Spaced  "\nweight: "7"\ndraft: "false"\nslug: Mixed Case_Slug',
            body="Keep this body.\n",
        )

        assert autofix_front_matter(path, root=tmp_path) is True

        meta, body = parse_front_matter(path)
        assert meta is not None
        assert meta["title"] == "Spaced"
        assert meta["weight"] == 7
        assert meta["draft"] is False
        assert meta["slug"] == "mixed-case-slug"
        assert "Keep this body." in body
        assert validate_file(path)["ok"] is True

    @pytest.mark.unit
    def test_clean_file_untouched(self, tmp_path: Path, page_writer) -> None:
        path = page_writer(tmp_path, "a.md", "date: 2024-01-01\ntitle: A\nweight: 1")
        before = path.read_text(encoding="utf-8")

        assert autofix_front_matter(path, root=tmp_path) is False
        assert path.read_text(encoding="utf-8") == before

    @pytest.mark.unit
    def test_refuses_outside_root(self, tmp_path: Path, page_writer) -> None:
        path = page_writer(tmp_path / "elsewhere", "a.md", "title: A\nweight: '1'\ndate: 2024-01-01")
        before = path.read_text(encoding="utf-8")

        assert autofix_front_matter(path, root=tmp_path / "content") is False
        assert path.read_text(encoding="utf-8") == before

    @pytest.mark.unit
    def test_validate_file_reports_fixed(self, tmp_path: Path, page_writer) -> None:
        path = page_writer(tmp_path, "a.md", "date: 2024-01-01\ntitle: A\nweight: '3'")

        result = validate_file(path, autofix=True, root=tmp_path)

        assert result["fixed"] is True
        assert result["ok"] is True

    @pytest.mark.unit
    def test_negative_string_weight_converted(self, tmp_path: Path, page_writer) -> None:
        path = page_writer(tmp_path, "a.md", "date: 2024-01-01\ntitle: A\nweight: '-3'")

        assert autofix_front_matter(path, root=tmp_path) is True
        meta, _ = parse_front_matter(path)
        assert meta is not None
        assert meta["weight"] == -3

    @pytest.mark.unit
    @pytest.mark.parametrize("weight", ["--5", "²", "1.5", "-", "٣"])
    def test_malformed_weight_left_alone(
        self, tmp_path: Path, page_writer, weight: str
    ) -> None:
        path = page_writer(tmp_path, "a.md", f"date: 2024-01-01\ntitle: A\nweight: '{weight}'")
        before = path.read_text(encoding="utf-8")

        result = validate_file(path, autofix=True, root=tmp_path)

        assert result["fixed"] is False
        assert result["ok"] is False
        assert any(e.startswith("weight") for e in result["errors"])
        assert path.read_text(encoding="utf-8") == before

    @pytest.mark.unit
    def test_undecodable_file_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "a.md"
        path.write_bytes("---\ntitle: Café\nweight: '1'\n---\n".encode("latin-1"))
        before = path.read_bytes()

        assert autofix_front_matter(path, root=tmp_path) is False
        assert path.read_bytes() == before

        result = validate_file(path, autofix=True, root=tmp_path)
        assert result["ok"] is False
        assert result["fixed"] is False

    @pytest.mark.unit
    def test_unreadable_path_skipped(self, tmp_path: Path) -> None:
        directory = tmp_path / "dir.md"
        directory.mkdir()

        assert autofix_front_matter(directory, root=tmp_path) is False

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("Goroutines vs Threads", "goroutines-vs-threads"), ("  GC__Tuning!  ", "gc-tuning")],
    )
    def test_slugify(self, raw: str, expected: str) -> None:
        assert slugify(raw) == expected


class TestValidateTree:
    @pytest.mark.unit
    def test_site_fixture_is_valid(self, site_root: Path) -> None:
        results = validate_tree(site_root / "content")

        assert [Path(r["file"]).name for r in results] == [
            "_index.md",
            "future.md",
            "maps.md",
            "slices.md",
        ]
        assert all(r["ok"] for r in results)

    @pytest.mark.unit
    def test_slug_collision(self, site_root: Path, page_writer) -> None:
        page_writer(
            site_root / "content",
            "basics/slices-again.md",
            "date: 2024-02-01\ntitle: Slices again\nweight: 11\nslug: slices",
        )

        results = {Path(r["file"]).name: r for r in validate_tree(site_root / "content")}

        assert results["slices.md"]["ok"] is False
        assert results["slices-again.md"]["ok"] is False
        assert "slug 'slices' also used by" in results["slices.md"]["errors"][0]
        assert results["maps.md"]["ok"] is True

    @pytest.mark.unit
    def test_same_slug_in_other_section_is_fine(self, site_root: Path, page_writer) -> None:
        page_writer(
            site_root / "content",
            "memory/slices.md",
            "date: 2024-02-01\ntitle: Slice memory\nweight: 10",
        )

        assert all(r["ok"] for r in validate_tree(site_root / "content"))


class TestRepositoryContent:
    """Every page shipped in content/ satisfies the contract."""

    @pytest.mark.integration
    def test_all_pages_valid(self, repo_content_dir: Path) -> None:
        results = validate_tree(repo_content_dir)

        assert results, "content/ should not be empty"
        failures = {r["file"]: r["errors"] for r in results if not r["ok"]}
        assert failures == {}

    @pytest.mark.integration
    def test_every_page_has_title_and_weight(self, repo_content_dir: Path) -> None:
        for path in sorted(repo_content_dir.rglob("*.md")):
            meta, _ = parse_front_matter(path)

            assert meta is not None, path
            assert isinstance(meta.get("title"), str) and meta["title"].strip(), path
            assert isinstance(meta.get("weight"), int), path
