"""
Import System Types

Pure data structures passed between the coordinator and the resolvers.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class ImportRequest:
    """One @import as seen by the import callback"""
    raw_argument: str
    importing_file: str


@dataclass
class ResolvedImport:
    """
    What the import callback hands back to the compiler.

    - file: concrete path, or a synthetic identifier for glob imports
    - contents: source text; None lets the compiler read file itself
    - both None: not resolved, the compiler applies its native lookup
    """
    file: Optional[str] = None
    contents: Optional[str] = None

    @property
    def is_resolved(self) -> bool:
        return self.file is not None

    def __repr__(self) -> str:
        size = "None" if self.contents is None else f"{len(self.contents)} chars"
        return f"ResolvedImport(file={self.file!r}, contents={size})"


@dataclass
class SynthesizedGlobUnit:
    """
    Virtual stylesheet generated for a glob import.

    contents holds one `@import "<relative>";` line per match; file is a
    process-unique identifier with no file on disk behind it.
    """
    file: str
    contents: str
    pattern: str
    base_path: str
    matches: List[str] = field(default_factory=list)
