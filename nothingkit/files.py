"""File system helpers."""

from __future__ import annotations

import os


def last_modified(filepath: str) -> int:
    """Modification time of the file in whole seconds since the epoch.

    Raises OSError when the file cannot be examined.
    """
    return int(os.stat(filepath).st_mtime)