"""Shared fixtures for the refcat test suite."""

from pathlib import Path

import pytest

from refcat.loader import build_catalog, load_builtin

EXTRACT_METHOD_DOC = """\
# Extract Method

You have a code fragment that can be grouped together.
Move it into a separate method.

## Problem

```php
function printOwing() {
  $this->printBanner();
}
```
"""

INLINE_METHOD_DOC = """\
# Inline Method

When a method body is more obvious than the method itself, use this technique.
"""

LONG_METHOD_DOC = """\
---
tags: [bloaters]
---
# Long Method

A method contains **too many** lines of code.
"""


def record(entry_id, title, category="Composing Methods", summary="", path=None):
    """A raw catalog record with sensible defaults."""
    return {
        "id": entry_id,
        "title": title,
        "category": category,
        "summary": summary or f"{title} summary.",
        "reference_path": path or f"references/{entry_id}.md",
    }


@pytest.fixture(scope="session")
def builtin():
    """The catalog built from the shipped records."""
    return load_builtin()


@pytest.fixture
def small_catalog():
    """Four entries across two categories, in a known order."""
    return build_catalog([
        record("alpha", "Alpha", summary="foo and foo again"),
        record("foo-bar", "Foo Bar", category="Bloaters", summary="nothing here"),
        record("just-foo", "Foo", summary="a foo"),
        record("zeta", "Zeta", category="Bloaters", summary="Foo, FOO!"),
    ])


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """A content directory shaped like the reference corpus."""
    root = tmp_path / "skill"
    techniques = root / "references" / "techniques" / "composing-methods"
    smells = root / "references" / "smells" / "bloaters"
    techniques.mkdir(parents=True)
    smells.mkdir(parents=True)

    (root / "SKILL.md").write_text("# Refactoring\n\nIndex of all documents.\n", encoding="utf-8")
    (root / "references" / "README.md").write_text("# References\n\nRead me.\n", encoding="utf-8")
    (techniques / "inline-method.md").write_text(INLINE_METHOD_DOC, encoding="utf-8")
    (techniques / "extract-method.md").write_text(EXTRACT_METHOD_DOC, encoding="utf-8")
    (smells / "long-method.md").write_text(LONG_METHOD_DOC, encoding="utf-8")
    return root
