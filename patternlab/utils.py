"""Small file helpers shared by the demos."""

from __future__ import annotations

import os
from pathlib import Path

BUFFER_SIZE = 1024


def read_file(file_path: str | os.PathLike[str]) -> str:
    """Return the whole text content of ``file_path``.

    Raises ``OSError`` (for example ``FileNotFoundError``) when the file
    cannot be opened.
    """
    return Path(file_path).read_text()