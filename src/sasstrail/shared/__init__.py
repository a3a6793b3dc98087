"""
Shared components: source locations and error types.
"""

from .source_location import SourceLocation
from .errors import (
    SassTrailError, SassCompileError, AssetNotFoundError,
    parse_compile_error, format_error_report,
)

__all__ = [
    "SourceLocation",
    "SassTrailError",
    "SassCompileError",
    "AssetNotFoundError",
    "parse_compile_error",
    "format_error_report",
]
