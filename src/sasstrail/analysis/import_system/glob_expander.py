"""
Glob Import Expansion

Turns `@import "vars/*";` into a virtual stylesheet with one @import per
matching asset:

    @import "vars/_colors.scss";
    @import "vars/_spacing.scss";

Each match is registered as a build dependency so the pipeline rebuilds the
importer when a matched file changes.
"""

import glob
import itertools
import logging
import os
import posixpath
from typing import List

from .import_info import SynthesizedGlobUnit
from ...pipeline.base import AssetPipeline
from ...utils.config import GLOB_PATTERN, UNSAFE_IDENTIFIER_CHARS
from ...utils.io_utils import to_unix_path, normalize_path

logger = logging.getLogger(__name__)

# Process-wide; the compiler keys its import cache on file identity, so no two
# expansions may share an identifier (not even for the same pattern).
_unit_counter = itertools.count(1)


def is_glob(import_argument: str) -> bool:
    """True for wildcard imports ("*" or a [...] character class)"""
    return bool(GLOB_PATTERN.search(import_argument))


def sanitize_glob(pattern: str) -> str:
    return UNSAFE_IDENTIFIER_CHARS.sub("_", pattern)


def next_unit_identifier(pattern: str) -> str:
    """<counter>_<sanitized pattern>, unique within the process"""
    return f"{next(_unit_counter)}_{sanitize_glob(pattern)}"


class GlobImportExpander:
    """
    Expand glob imports against the importing file's directory.

    - Directories are skipped
    - The importing file never imports itself
    - Only assets the pipeline considers requirable are kept
    - Match order is the glob matcher's (sorted, as Sass globbing tools do);
      the generated @import lines keep that order
    """

    def __init__(self, pipeline: AssetPipeline):
        self.pipeline = pipeline

    def expand(self, pattern: str, importing_file: str) -> SynthesizedGlobUnit:
        """
        Build the virtual stylesheet for pattern imported from importing_file.

        An empty match set still yields a unit (with empty contents): returning
        nothing would hand the import back to the compiler's native lookup.
        """
        base_dir = posixpath.dirname(to_unix_path(importing_file))
        matches = self.resolve_glob(pattern, importing_file)

        imports = []
        for match in matches:
            self.pipeline.register_dependency(match)
            relative_path = to_unix_path(os.path.relpath(match, base_dir))
            imports.append(f'@import "{relative_path}";')

        unit = SynthesizedGlobUnit(
            file=next_unit_identifier(pattern),
            contents="\n".join(imports),
            pattern=pattern,
            base_path=importing_file,
            matches=matches,
        )
        if not matches:
            logger.debug(f"Glob '{pattern}' from {importing_file} matched no assets")
        logger.debug(f"Expanded glob '{pattern}' into {unit.file} ({len(matches)} imports)")
        return unit

    def resolve_glob(self, pattern: str, importing_file: str) -> List[str]:
        """Absolute paths of requirable assets matching pattern (directories excluded)"""
        base_dir = os.path.dirname(importing_file)
        own_path = normalize_path(importing_file)

        results: List[str] = []
        for match in sorted(glob.glob(os.path.join(glob.escape(base_dir), pattern), recursive=True)):
            if os.path.isdir(match):
                continue
            path = normalize_path(match)
            if path == own_path:
                logger.debug(f"Glob '{pattern}' skipped the importing file {path}")
                continue
            if not self.pipeline.is_requirable_asset(path):
                logger.debug(f"Glob '{pattern}' skipped non-requirable {path}")
                continue
            results.append(path)
        return results
