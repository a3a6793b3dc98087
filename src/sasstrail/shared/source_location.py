"""
Source Location

Where a compile error points: stylesheet file, line and (optionally) column.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SourceLocation:
    """
    Source location of a compile error.

    - File, line, column as reported by the compiler
    - Column is None when the compiler did not report one
    - Immutable (frozen) for hashability
    """
    file: str
    line: int
    column: Optional[int] = None

    def __str__(self) -> str:
        """Format as file(line,column) or file(line)"""
        if self.column is None:
            return f"{self.file}({self.line})"
        return f"{self.file}({self.line},{self.column})"
