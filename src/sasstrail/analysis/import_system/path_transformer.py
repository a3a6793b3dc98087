"""
Import Path Transformation

Pure functions that turn a raw @import argument into the logical paths the
pipeline should try, in order. This is where search-path resolution is made
to behave like Sass:

    "If you have a SCSS or Sass file that you want to import but don't want
    to compile to a CSS file, you can add an underscore to the beginning of
    the filename. ... You can then import these files without using the
    underscore."

All paths are handled in forward-slash form so behavior does not depend on
the platform.
"""

import os
import posixpath
from typing import List, Optional, Sequence

from ...utils.config import PARTIAL_PREFIX
from ...utils.io_utils import to_unix_path


def partialize(path: Optional[str]) -> Optional[str]:
    """
    Underscore-prefixed version of path, or None if it is already a partial.

    partialize("vars/colors") -> "vars/_colors"
    partialize("vars/_colors") -> None
    """
    if not path:
        return None
    path = to_unix_path(path)
    directory, name = posixpath.split(path)
    if not name or name.startswith(PARTIAL_PREFIX):
        return None
    return posixpath.join(directory, PARTIAL_PREFIX + name) if directory else PARTIAL_PREFIX + name


def is_absolute(path: str) -> bool:
    return posixpath.isabs(to_unix_path(path)) or os.path.isabs(path)


def _contains(root: str, path: str) -> bool:
    root = root.rstrip("/")
    return path == root or path.startswith(root + "/")


def find_root(directory: str, root_paths: Sequence[str]) -> Optional[str]:
    """First search root containing directory"""
    directory = to_unix_path(directory)
    for root in root_paths:
        if _contains(to_unix_path(root), directory):
            return to_unix_path(root)
    return None


def candidates_for(
    import_argument: str,
    base_path: str,
    root_paths: Sequence[str],
    default_root: Optional[str] = None
) -> List[str]:
    """
    Logical paths to try for import_argument imported from base_path.

    Order matters, first requirable match wins:
    1. root-relative argument, then its partial (only for relative arguments
       imported from outside the root directory itself)
    2. bare argument, then its partial

    candidates_for("foo", "/proj/styles/main.scss", ["/proj"])
        -> ["styles/foo", "styles/_foo", "foo", "_foo"]
    """
    import_argument = to_unix_path(import_argument)
    base_dir = posixpath.dirname(to_unix_path(base_path))
    paths: List[Optional[str]] = [import_argument, partialize(import_argument)]

    root = find_root(base_dir, root_paths) or to_unix_path(default_root or "")
    if root and not is_absolute(import_argument) and base_dir != root.rstrip("/"):
        relative_dir = posixpath.relpath(base_dir, root)
        relative_path = posixpath.normpath(posixpath.join(relative_dir, import_argument))
        paths[:0] = [relative_path, partialize(relative_path)]

    return [path for path in paths if path]


def relative_to_search_roots(
    importer: str,
    import_argument: str,
    root_paths: Sequence[str]
) -> Optional[str]:
    """The import argument relative to the search root that contains it, if any"""
    importer = to_unix_path(importer)
    absolute = posixpath.normpath(
        posixpath.join(posixpath.dirname(importer), to_unix_path(import_argument))
    )
    root = find_root(absolute, root_paths)
    if root is None:
        return None
    return posixpath.relpath(absolute, root)
