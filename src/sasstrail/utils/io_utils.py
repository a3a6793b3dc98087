"""
Centralized file I/O utilities.

- Single place for encoding and path normalization
- Use Path.read_text() consistently (no raw open/read)
"""

import os
from pathlib import Path
from typing import Union

from .config import DEFAULT_FILE_ENCODING


def read_source_file(path: Union[Path, str]) -> str:
    """Read source file with standard encoding."""
    p = Path(path) if not isinstance(path, Path) else path
    return p.read_text(encoding=DEFAULT_FILE_ENCODING)


def to_unix_path(path: str) -> str:
    """Make sure the returned path has unix-style slashes."""
    if not path:
        return path
    return path.replace("\\", "/")


def normalize_path(path: Union[Path, str]) -> str:
    """Absolute, normalized path string with forward slashes."""
    return to_unix_path(os.path.normpath(os.path.abspath(str(path))))
