"""refcat — Lookup tool for refactoring techniques and code smells.

Indexes the 89 entries of the refactoring reference corpus (66 techniques,
23 smells) by category and answers id lookups and keyword searches.

Usage:
    python -m refcat lookup extract-method          # Show one entry
    python -m refcat search "conditional"           # Ranked keyword search
    python -m refcat list --category bloaters       # Entries of a category
    python -m refcat categories                     # Category summary
    python -m refcat export CATALOG.md              # Write a Markdown index
"""

__version__ = "0.1.0"
