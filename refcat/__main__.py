"""CLI for the refcat refactoring catalog.

Usage:
    python -m refcat lookup extract-method             # Show one entry (exit 1 if missing)
    python -m refcat lookup extract-method --full      # ...and its reference document
    python -m refcat search conditional                # Ranked keyword search
    python -m refcat list --category bloaters          # Entries, optionally filtered
    python -m refcat categories                        # Category summary
    python -m refcat export CATALOG.md                 # Write a Markdown index
    python -m refcat --content-dir ./skill list        # Index documents on disk
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from refcat.config import CONTENT_DIR_ENV, document_path, resolve_content_dir
from refcat.errors import CatalogError, NotFoundError, UnknownCategoryError
from refcat.index import CategoryIndex
from refcat.loader import load_catalog
from refcat.lookup import LookupService
from refcat.models import ALL_CATEGORIES, Catalog, Kind
from refcat.render import generate_index, render_categories, render_entries, render_entry, render_hits

app = typer.Typer(
    name="refcat",
    help="Look up refactoring techniques and code smells",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()


@dataclass
class _Options:
    content_dir: Optional[Path] = None
    verbose: bool = False


def _category_choices() -> str:
    return ", ".join(c.slug for c in ALL_CATEGORIES)


def _load(ctx: typer.Context) -> Catalog:
    """Load the catalog for a command; load failures exit with code 2."""
    opts: _Options = ctx.obj or _Options()
    try:
        return load_catalog(opts.content_dir, console if opts.verbose else None)
    except CatalogError as e:
        console.print(f"[red]Cannot load catalog:[/red] {escape(str(e))}")
        raise typer.Exit(2)


def _unknown_category(name: str) -> None:
    console.print(f"[red]Unknown category: {escape(name)}[/red]. Choose: {_category_choices()}")
    raise typer.Exit(1)


@app.callback()
def main(
    ctx: typer.Context,
    content_dir: Optional[Path] = typer.Option(
        None, "--content-dir", "-d",
        help=f"Directory of reference documents (default: ${CONTENT_DIR_ENV}, else built-in records)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print loader progress"),
) -> None:
    """Look up refactoring techniques and code smells."""
    ctx.obj = _Options(content_dir=resolve_content_dir(content_dir), verbose=verbose)


@app.command("lookup")
def cmd_lookup(
    ctx: typer.Context,
    entry_id: str = typer.Argument(help="Entry id (e.g., 'extract-method')"),
    full: bool = typer.Option(False, "--full", "-f", help="Also render the reference document"),
) -> None:
    """Show a single entry by id."""
    catalog = _load(ctx)
    try:
        entry = LookupService(catalog).find_by_id(entry_id)
    except NotFoundError:
        console.print(f"[red]not found:[/red] {escape(entry_id)}")
        raise typer.Exit(1)

    document = None
    if full:
        document = document_path(ctx.obj.content_dir, entry.reference_path)
        if document is None:
            console.print(
                f"[yellow]No document for {entry.id}; set --content-dir or {CONTENT_DIR_ENV}[/yellow]"
            )
    render_entry(entry, out, document)


@app.command("search")
def cmd_search(
    ctx: typer.Context,
    keyword: str = typer.Argument(help="Text to look for in titles and summaries"),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Restrict to one category"),
    limit: int = typer.Option(0, "--limit", "-n", min=0, help="Show at most N results (0 = all)"),
) -> None:
    """Search titles, then summaries, ranked by match count."""
    catalog = _load(ctx)
    hits = LookupService(catalog).search_hits(keyword, category)
    try:
        ranked = list(islice(hits, limit) if limit else hits)
    except UnknownCategoryError:
        _unknown_category(category or "")

    if not render_hits(ranked, out, keyword):
        console.print(f"[yellow]No matches for: {escape(keyword)}[/yellow]")


@app.command("list")
def cmd_list(
    ctx: typer.Context,
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Category name or slug"),
    kind: Optional[Kind] = typer.Option(None, "--kind", "-k", help="technique or smell"),
) -> None:
    """List entries, optionally filtered by category or kind."""
    catalog = _load(ctx)
    entries = catalog.entries
    title = "All entries"
    if category:
        try:
            entries = CategoryIndex(catalog).entries_for(category)
        except UnknownCategoryError:
            _unknown_category(category)
        title = entries[0].category.value if entries else category
    if kind:
        entries = tuple(e for e in entries if e.kind is kind)
        title = f"{title} ({kind.plural})"

    if not entries:
        console.print("[yellow]No entries.[/yellow]")
        return
    render_entries(entries, out, title=title)


@app.command("categories")
def cmd_categories(ctx: typer.Context) -> None:
    """Show categories with their entry counts."""
    catalog = _load(ctx)
    render_categories(CategoryIndex(catalog).list_categories(), out)
    console.print(
        f"{len(catalog)} entries: {catalog.count(Kind.TECHNIQUE)} techniques, "
        f"{catalog.count(Kind.SMELL)} smells [dim]({escape(catalog.source)})[/dim]"
    )


@app.command("export")
def cmd_export(
    ctx: typer.Context,
    path: Path = typer.Argument(Path("CATALOG.md"), help="Where to write the Markdown index"),
) -> None:
    """Write a Markdown index of the whole catalog."""
    catalog = _load(ctx)
    written = generate_index(catalog, path)
    console.print(f"Index written to {written}")


if __name__ == "__main__":
    app()
