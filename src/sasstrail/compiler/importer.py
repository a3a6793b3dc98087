"""
Import Coordinator

The import callback handed to the compiler. Every @import the compiler meets
(including imports inside content this callback returned) comes through here:

    IDLE -> DISPATCHING -> GLOB | SINGLE -> RECORDING -> RETURNING -> IDLE

Misses are soft. An unresolved single import returns an empty result so the
compiler can try its native lookup; only the compiler decides that a missing
import is fatal.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..analysis.dependency_tree import DependencyTree
from ..analysis.import_system import (
    ImportRequest,
    ResolvedImport,
    SearchPathResolver,
    GlobImportExpander,
    ContentLoader,
    is_glob,
    relative_to_search_roots,
)
from ..pipeline.base import AssetPipeline
from ..shared.errors import AssetNotFoundError
from ..utils.config import STDIN_PATH

logger = logging.getLogger(__name__)


class ImportPhase(Enum):
    """Where the coordinator is in handling one import"""
    IDLE = "idle"
    DISPATCHING = "dispatching"
    GLOB = "glob"
    SINGLE = "single"
    RECORDING = "recording"
    RETURNING = "returning"


class ImportCoordinator:
    """
    Dispatch compiler import callbacks to the resolvers.

    - Glob arguments are expanded into a virtual stylesheet
    - Other arguments go through search-path resolution, then are loaded
      with the engine excluded from their processor chain
    - Every import is recorded in the dependency tree
    """

    def __init__(
        self,
        pipeline: AssetPipeline,
        document_path: str,
        tree: Optional[DependencyTree] = None,
        resolver: Optional[SearchPathResolver] = None,
        expander: Optional[GlobImportExpander] = None,
        loader: Optional[ContentLoader] = None,
    ):
        self.pipeline = pipeline
        self.document_path = document_path
        self.tree = tree if tree is not None else DependencyTree()
        self.resolver = resolver or SearchPathResolver(pipeline)
        self.expander = expander or GlobImportExpander(pipeline)
        self.loader = loader or ContentLoader(pipeline)
        self.phase = ImportPhase.IDLE
        # Synthetic glob identifier -> file that issued the glob
        self._glob_origins: Dict[str, str] = {}

    def import_callback(self, url: str, prev: str) -> Optional[List[Tuple[str, ...]]]:
        """libsass importer protocol: None defers to the native lookup"""
        resolved = self.resolve_import(url, prev)
        if not resolved.is_resolved:
            return None
        if resolved.contents is None:
            return [(resolved.file,)]
        return [(resolved.file, resolved.contents)]

    def importing_file_for(self, prev: str) -> str:
        """
        The real file an import is relative to.

        Imports from the top-level document arrive as "stdin"; imports from a
        synthesized glob stylesheet are relative to the file that issued the glob.
        """
        if not prev or prev == STDIN_PATH:
            return self.document_path
        return self._glob_origins.get(prev, prev)

    def resolve_import(self, url: str, prev: str) -> ResolvedImport:
        parent_path = self.document_path if not prev or prev == STDIN_PATH else prev
        request = ImportRequest(raw_argument=url, importing_file=self.importing_file_for(prev))

        self._enter(ImportPhase.DISPATCHING)
        try:
            logger.debug(
                f"@import {url!r}: prev={prev}, import_path="
                f"{relative_to_search_roots(request.importing_file, url, self.pipeline.search_roots())}"
            )
            if is_glob(url):
                self._enter(ImportPhase.GLOB)
                resolved = self._import_glob(request)
            else:
                self._enter(ImportPhase.SINGLE)
                resolved = self._import_path(request)

            self._enter(ImportPhase.RECORDING)
            self.tree.add_path(resolved.file, parent_path, url)

            self._enter(ImportPhase.RETURNING)
            logger.debug(f"@import {url!r} -> {resolved!r}")
            return resolved
        finally:
            self.phase = ImportPhase.IDLE

    def _import_glob(self, request: ImportRequest) -> ResolvedImport:
        unit = self.expander.expand(request.raw_argument, request.importing_file)
        self._glob_origins[unit.file] = request.importing_file
        return ResolvedImport(file=unit.file, contents=unit.contents)

    def _import_path(self, request: ImportRequest) -> ResolvedImport:
        resolved_path = self.resolver.resolve(request.raw_argument, request.importing_file)
        if resolved_path is None:
            return ResolvedImport()
        self._depend_on(resolved_path, request)
        contents = self.loader.load(resolved_path)
        return ResolvedImport(file=resolved_path, contents=contents)

    def _depend_on(self, path: str, request: ImportRequest) -> None:
        try:
            self.pipeline.register_dependency(path)
        except AssetNotFoundError as e:
            logger.warning(
                f"{request.importing_file} will not change when {request.raw_argument} changes, "
                f"because the file could not be found: {e}"
            )

    def _enter(self, phase: ImportPhase) -> None:
        logger.debug(f"ImportCoordinator: {self.phase.value} -> {phase.value}")
        self.phase = phase
