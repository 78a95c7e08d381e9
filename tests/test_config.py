"""Content directory resolution tests."""

from pathlib import Path

from refcat.config import CONTENT_DIR_ENV, document_path, resolve_content_dir


def test_unset_means_builtin(monkeypatch):
    monkeypatch.delenv(CONTENT_DIR_ENV, raising=False)
    assert resolve_content_dir() is None


def test_env_var_used(monkeypatch, tmp_path):
    monkeypatch.setenv(CONTENT_DIR_ENV, str(tmp_path))
    assert resolve_content_dir() == tmp_path


def test_override_beats_env(monkeypatch, tmp_path):
    monkeypatch.setenv(CONTENT_DIR_ENV, "/somewhere/else")
    assert resolve_content_dir(tmp_path) == tmp_path


def test_blank_values_ignored(monkeypatch):
    monkeypatch.setenv(CONTENT_DIR_ENV, "  ")
    assert resolve_content_dir("") is None


def test_home_expanded(monkeypatch):
    monkeypatch.delenv(CONTENT_DIR_ENV, raising=False)
    assert resolve_content_dir("~/skill") == Path.home() / "skill"


def test_document_path(content_dir):
    rel = "references/techniques/composing-methods/extract-method.md"
    assert document_path(content_dir, rel) == content_dir / rel
    assert document_path(content_dir, "references/missing.md") is None
    assert document_path(None, rel) is None
