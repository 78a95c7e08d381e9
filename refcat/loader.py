"""Catalog construction and discovery for refcat.

Entries come from one of two places:
    built-in     — refcat.data.RECORDS, in index document order
    content dir  — reference documents laid out as
                   <root>/**/<category-slug>/<entry-id>.md

Either way every record passes through build_catalog(), which validates it
and refuses to produce a catalog containing duplicate ids.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Optional

from rich.console import Console

from refcat.data import RECORDS
from refcat.errors import ContentDirError, DuplicateIdError, UnknownCategoryError, ValidationError
from refcat.models import ALL_CATEGORIES, Catalog, Category, Entry, is_slug

_REQUIRED_FIELDS = ("id", "title", "category", "summary", "reference_path")


def _entry_from_record(record: Mapping[str, object], position: int) -> Entry:
    """Validate a single record and turn it into an Entry."""
    values: dict[str, str] = {}
    for key in _REQUIRED_FIELDS:
        value = record.get(key)
        if not isinstance(value, str) or not value.strip():
            label = record.get("id") or f"#{position}"
            raise ValidationError(f"Record {label}: field {key!r} is missing or blank")
        values[key] = value.strip()

    if not is_slug(values["id"]):
        raise ValidationError(f"Record #{position}: id {values['id']!r} is not a slug")

    return Entry(
        id=values["id"],
        title=values["title"],
        category=Category.parse(values["category"]),
        summary=values["summary"],
        reference_path=values["reference_path"],
    )


def build_catalog(records: Iterable[Mapping[str, object]], source: str = "builtin") -> Catalog:
    """Validate records and build an immutable catalog in record order.

    Args:
        records: Mappings with id, title, category, summary, reference_path.
        source: Label stored on the catalog (e.g. 'builtin' or a directory).

    Raises:
        DuplicateIdError: if two records share an id.
        UnknownCategoryError: if a category is outside the fixed set.
        ValidationError: for any other malformed record.
    """
    entries: list[Entry] = []
    seen: dict[str, Entry] = {}
    for position, record in enumerate(records):
        entry = _entry_from_record(record, position)
        if entry.id in seen:
            raise DuplicateIdError(entry.id, seen[entry.id].reference_path, entry.reference_path)
        seen[entry.id] = entry
        entries.append(entry)
    return Catalog(entries=tuple(entries), source=source)


def load_builtin() -> Catalog:
    """Build the catalog from the records shipped with refcat."""
    return build_catalog(RECORDS, source="builtin")


# ---------------------------------------------------------------------------
# Content directory discovery
# ---------------------------------------------------------------------------

def _strip_front_matter(lines: list[str]) -> list[str]:
    """Drop a leading '---' ... '---' block if present."""
    if not lines or lines[0].strip() != "---":
        return lines
    for i, line in enumerate(lines[1:], 1):
        if line.strip() == "---":
            return lines[i + 1:]
    return lines


def parse_document(text: str) -> tuple[str, str]:
    """Extract (title, summary) from a reference document.

    Title is the first '# ' heading.  Summary is the first prose paragraph
    that follows it, joined onto one line.  Either may come back empty.
    """
    lines = _strip_front_matter(text.splitlines())
    title = ""
    paragraph: list[str] = []
    in_fence = False

    for raw in lines:
        line = raw.strip()
        if line.startswith("```"):
            if paragraph:
                break
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        if not title:
            if line.startswith("# "):
                title = line[2:].strip()
            continue
        if not line:
            if paragraph:
                break
            continue
        if line.startswith(("#", "|", ">", "<!--")):
            if paragraph:
                break
            continue
        paragraph.append(line)

    summary = " ".join(paragraph).replace("**", "").replace("__", "")
    return title, summary


def _discover_documents(root: Path, console: Optional[Console]) -> list[tuple[Category, Path]]:
    """Find every '<category-slug>/<id>.md' file under root.

    Markdown files outside a category folder, or whose name is not a slug
    (index documents, READMEs), are skipped.
    """
    found: list[tuple[Category, Path]] = []
    for path in sorted(root.rglob("*.md")):
        if not path.is_file():
            continue
        try:
            category = Category.parse(path.parent.name)
        except UnknownCategoryError:
            category = None
        if category is None or not is_slug(path.stem):
            if console:
                console.print(f"  [dim]skip {path.relative_to(root).as_posix()}[/dim]")
            continue
        found.append((category, path))

    order = {c: i for i, c in enumerate(ALL_CATEGORIES)}
    found.sort(key=lambda item: (order[item[0]], item[1].name))
    return found


def load_directory(root: Path, console: Optional[Console] = None) -> Catalog:
    """Build a catalog from the reference documents under root.

    Raises:
        ContentDirError: if root is not a readable directory.
        ValidationError: (and subclasses) for malformed or duplicate entries.
    """
    root = Path(root)
    if not root.is_dir():
        raise ContentDirError(f"Content directory not found: {root}")

    records: list[dict[str, str]] = []
    for category, path in _discover_documents(root, console):
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ContentDirError(f"Cannot read {path}: {e}") from e

        entry_id = path.stem
        title, summary = parse_document(text)
        records.append({
            "id": entry_id,
            "title": title or entry_id.replace("-", " ").title(),
            "category": category.value,
            "summary": summary,
            "reference_path": path.relative_to(root).as_posix(),
        })

    if console:
        console.print(f"  [dim]{len(records)} documents found under {root}[/dim]")
    return build_catalog(records, source=str(root))


def load_catalog(content_dir: Optional[Path] = None, console: Optional[Console] = None) -> Catalog:
    """Load from content_dir when given, otherwise the built-in records."""
    if content_dir is not None:
        return load_directory(content_dir, console)
    catalog = load_builtin()
    if console:
        console.print(f"  [dim]{len(catalog)} built-in entries loaded[/dim]")
    return catalog
