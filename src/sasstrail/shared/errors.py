"""
Error Reporting

Exceptions raised by sasstrail and the formatting of compiler failures into a
single human-readable line:

    /proj/styles/main.scss(4,2): unexpected token

Only SassCompileError escapes a top-level compile. Unresolved imports and
invalid dependency edges are soft conditions: they are logged, never raised.
"""

import os
import re
from typing import Optional, Tuple

from .source_location import SourceLocation
from ..utils.config import COLOR_ENV_VAR


# ---------------------------------------------------------------------------
# ANSI color helpers (disabled when NO_COLOR is set)
# ---------------------------------------------------------------------------

def _use_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    explicit = os.environ.get(COLOR_ENV_VAR, "").lower()
    if explicit in ("0", "false", "no", "never"):
        return False
    return True

_BOLD   = "\033[1m"
_RED    = "\033[31m"
_BLUE   = "\033[34m"
_RESET  = "\033[0m"

def _style(text: str, *codes: str, color: bool = True) -> str:
    if not color:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{_RESET}" if prefix else text


# ---------------------------------------------------------------------------
# Compiler error parsing
# ---------------------------------------------------------------------------

# libsass: "Error: <message>\n        on line <line>[:<column>] of <file>[, in @import]"
_LIBSASS_ERROR = re.compile(
    r"Error: (?P<message>.+?)\s+on line (?P<line>\d+)(?::(?P<column>\d+))? of (?P<file>[^\n,]+)",
    re.DOTALL,
)


def _structured_fields(error: BaseException) -> Optional[Tuple[str, SourceLocation]]:
    file = getattr(error, "file", None)
    line = getattr(error, "line", None)
    if not file or line is None:
        return None
    column = getattr(error, "column", None)
    message = getattr(error, "message", None) or str(error)
    location = SourceLocation(
        file=str(file),
        line=int(line),
        column=int(column) if column is not None else None,
    )
    return str(message).strip(), location


def _colon_fields(text: str) -> Optional[Tuple[str, SourceLocation]]:
    # path:line:level:message
    parts = [part.strip() for part in text.split(":", 3)]
    if len(parts) != 4:
        return None
    path, line, level, message = parts
    if not line.isdigit() or not level or not message:
        return None
    return message, SourceLocation(file=path, line=int(line))


def parse_compile_error(error: BaseException) -> Tuple[str, Optional[SourceLocation]]:
    """
    Extract (message, location) from a compiler error.

    Structured attributes (file/line/column/message) win. Otherwise the libsass
    text form is parsed, then the colon-delimited path:line:level:message form.
    If nothing matches the raw message is returned without a location.
    """
    structured = _structured_fields(error)
    if structured is not None:
        return structured

    text = str(error)
    match = _LIBSASS_ERROR.search(text)
    if match:
        column = match.group("column")
        location = SourceLocation(
            file=match.group("file").strip(),
            line=int(match.group("line")),
            column=int(column) if column else None,
        )
        return match.group("message").strip(), location

    colon = _colon_fields(text)
    if colon is not None:
        return colon

    return text.strip(), None


# ============================================================================
# Exception Classes
# ============================================================================

class SassTrailError(Exception):
    """Base exception for all sasstrail errors"""
    def __init__(self, message: str, location: Optional[SourceLocation] = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self):
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


class AssetNotFoundError(SassTrailError):
    """Raised by a pipeline when a path cannot be tracked or evaluated"""
    def __init__(self, path: str, message: Optional[str] = None):
        super().__init__(message or f"Asset not found: {path}")
        self.path = path


class SassCompileError(SassTrailError):
    """
    Stylesheet failed to compile.

    import_chain holds the rendered ancestor tree of the failing file (the
    imports that led to it), when the failing file was seen during resolution.
    """
    def __init__(self,
                 message: str,
                 location: Optional[SourceLocation] = None,
                 import_chain: Optional[str] = None):
        super().__init__(message, location)
        self.import_chain = import_chain

    @classmethod
    def from_compiler_error(cls, error: BaseException, import_chain: Optional[str] = None) -> "SassCompileError":
        message, location = parse_compile_error(error)
        return cls(message, location=location, import_chain=import_chain)


def format_error_report(error: SassTrailError, color: Optional[bool] = None) -> str:
    """
    Render an error for the terminal.

    Example output (plain, no color)::

        error: /proj/styles/_bad.scss(2,8): Undefined variable: "$x".
        import chain:
        /proj/styles/main.scss
        └── /proj/styles/_bad.scss
    """
    use_color = color if color is not None else _use_color()
    out = [_style("error", _BOLD, _RED, color=use_color) + _style(f": {error}", _BOLD, color=use_color)]
    chain = getattr(error, "import_chain", None)
    if chain:
        out.append(_style("import chain:", _BOLD, _BLUE, color=use_color))
        out.append(chain)
    return "\n".join(out)
