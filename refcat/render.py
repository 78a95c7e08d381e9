"""Refcat output — Rich tables and panels, plus the Markdown index export.

Tables go to whichever console the caller passes in; the CLI hands over a
stdout console for results and keeps stderr for status messages.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from refcat.index import CategoryIndex
from refcat.lookup import SearchHit
from refcat.models import Catalog, CategoryGroup, Entry, Kind

_KIND_STYLES = {
    Kind.TECHNIQUE: "green",
    Kind.SMELL: "magenta",
}


def _kind_label(kind: Kind) -> str:
    style = _KIND_STYLES[kind]
    return f"[{style}]{kind.value}[/{style}]"


def render_entries(entries: Iterable[Entry], console: Console, title: str = "Entries") -> int:
    """Render a table of entries.  Returns the number of rows shown."""
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", min_width=20)
    table.add_column("Category", style="dim")
    table.add_column("Summary", min_width=30)

    rows = 0
    for entry in entries:
        table.add_row(entry.id, escape(entry.title), entry.category.value, escape(entry.summary))
        rows += 1

    console.print()
    console.print(table)
    console.print()
    return rows


def render_hits(hits: Iterable[SearchHit], console: Console, keyword: str) -> int:
    """Render ranked search hits.  Returns the number of rows shown."""
    table = Table(title=f"Search: {escape(keyword)}", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", min_width=20)
    table.add_column("Kind")
    table.add_column("Title hits", justify="right")
    table.add_column("Summary hits", justify="right")

    rows = 0
    for rows, hit in enumerate(hits, 1):
        table.add_row(
            str(rows),
            hit.entry.id,
            escape(hit.entry.title),
            _kind_label(hit.entry.kind),
            str(hit.title_matches) if hit.title_matches else "--",
            str(hit.summary_matches) if hit.summary_matches else "--",
        )

    if rows:
        console.print()
        console.print(table)
        console.print()
    return rows


def render_categories(groups: Iterable[CategoryGroup], console: Console) -> None:
    """One row per category with its kind and entry count."""
    table = Table(title="Categories", show_header=True, header_style="bold")
    table.add_column("Category", min_width=20)
    table.add_column("Slug", style="dim")
    table.add_column("Kind")
    table.add_column("Entries", justify="right")

    for group in groups:
        table.add_row(group.name, group.category.slug, _kind_label(group.category.kind), str(len(group)))

    console.print()
    console.print(table)
    console.print()


def render_entry(entry: Entry, console: Console, document: Optional[Path] = None) -> None:
    """Show a single entry; with a document path, render the document too."""
    body = (
        f"[bold]{escape(entry.title)}[/bold]\n"
        f"{_kind_label(entry.kind)} · {entry.category.value}\n\n"
        f"{escape(entry.summary)}\n\n"
        f"[dim]{escape(entry.reference_path)}[/dim]"
    )
    console.print(Panel(body, title=entry.id, title_align="left", expand=False))

    if document is not None:
        try:
            text = document.read_text(encoding="utf-8")
        except OSError as e:
            console.print(f"[yellow]Cannot read {document}: {e}[/yellow]")
            return
        console.print()
        console.print(Markdown(text))


# ---------------------------------------------------------------------------
# Markdown index export
# ---------------------------------------------------------------------------

def _md_cell(text: str) -> str:
    """Escape pipes so a value stays inside its table cell."""
    return text.replace("|", "\\|")


def generate_index(catalog: Catalog, path: Path) -> Path:
    """Write a Markdown index of the catalog to path.

    One section per category, in catalog order, each holding a table of
    title, summary and reference path.  Returns the path written.
    """
    index = CategoryIndex(catalog)
    techniques = catalog.count(Kind.TECHNIQUE)
    smells = catalog.count(Kind.SMELL)

    lines: list[str] = []
    lines.append("# Refactoring Catalog")
    lines.append("")
    lines.append(f"*Generated {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M UTC')}*")
    lines.append("")
    lines.append(f"{len(catalog)} entries: {techniques} refactoring techniques and {smells} code smells.")
    lines.append("")

    for group in index.list_categories():
        lines.append(f"## {group.name}")
        lines.append("")
        lines.append("| Title | Summary | Reference |")
        lines.append("|-------|---------|-----------|")
        for entry in group.entries:
            lines.append(
                f"| {_md_cell(entry.title)} | {_md_cell(entry.summary)} "
                f"| [{entry.id}]({entry.reference_path}) |"
            )
        lines.append("")

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
