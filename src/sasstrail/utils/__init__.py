"""
sasstrail utilities package
"""

from .io_utils import read_source_file, to_unix_path, normalize_path

__all__ = ["read_source_file", "to_unix_path", "normalize_path"]
