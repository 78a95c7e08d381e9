"""Runtime configuration for refcat.

The only setting is the optional content directory holding the reference
documents.  The command line wins over the environment; blank values count
as unset.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

CONTENT_DIR_ENV = "REFCAT_CONTENT_DIR"


def resolve_content_dir(override: Optional[Path | str] = None) -> Optional[Path]:
    """Pick the content directory: CLI override, then REFCAT_CONTENT_DIR.

    Returns None when neither is set, meaning the built-in records are used.
    """
    for value in (override, os.environ.get(CONTENT_DIR_ENV)):
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return Path(text).expanduser()
    return None


def document_path(content_dir: Optional[Path], reference_path: str) -> Optional[Path]:
    """Absolute path of a reference document, if it exists under content_dir."""
    if content_dir is None:
        return None
    path = content_dir / reference_path
    return path if path.is_file() else None
