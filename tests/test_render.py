"""Rendering and Markdown index export tests."""

from rich.console import Console

from refcat.lookup import LookupService
from refcat.render import generate_index, render_entries, render_hits


def _console():
    return Console(record=True, width=200)


def test_render_entries_counts_rows(small_catalog):
    console = _console()
    assert render_entries(small_catalog.entries, console) == 4
    text = console.export_text()
    assert "foo-bar" in text
    assert "Bloaters" in text


def test_render_hits_empty_prints_nothing(builtin):
    console = _console()
    hits = LookupService(builtin).search_hits("kubernetes")
    assert render_hits(hits, console, "kubernetes") == 0
    assert console.export_text() == ""


def test_render_hits_numbers_rows(small_catalog):
    console = _console()
    assert render_hits(LookupService(small_catalog).search_hits("foo"), console, "foo") == 4
    assert "Search: foo" in console.export_text()


def test_generate_index(builtin, tmp_path):
    path = generate_index(builtin, tmp_path / "docs" / "CATALOG.md")
    text = path.read_text(encoding="utf-8")
    assert text.startswith("# Refactoring Catalog\n")
    assert "89 entries: 66 refactoring techniques and 23 code smells." in text
    assert text.index("## Composing Methods") < text.index("## Couplers")
    assert "| Extract Method |" in text
    assert "(references/smells/couplers/middle-man.md)" in text


def test_generate_index_escapes_pipes(tmp_path):
    from refcat.loader import build_catalog
    from tests.conftest import record

    catalog = build_catalog([record("x", "X", summary="a | b")])
    text = generate_index(catalog, tmp_path / "out.md").read_text(encoding="utf-8")
    assert "a \\| b" in text
