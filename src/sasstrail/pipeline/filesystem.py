"""
Filesystem Pipeline

Reference AssetPipeline over ordered search roots on disk. Good enough to
drive the engine from the command line and from tests; hosts with their own
asset graph implement AssetPipeline instead.
"""

import fnmatch
import logging
import os
import posixpath
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Type, Union

from .base import AssetPipeline, EvaluationResult, Processor
from ..shared.errors import AssetNotFoundError
from ..utils.config import CSS_EXTENSION
from ..utils.io_utils import read_source_file, to_unix_path, normalize_path

logger = logging.getLogger(__name__)


class FileSystemPipeline(AssetPipeline):
    """
    Search-path pipeline backed by the local filesystem.

    - Logical paths resolve against roots in order, trying each registered
      extension ("foo" -> "foo.scss", "foo.sass", "foo.css")
    - Only files with a registered extension are requirable
    - ignore holds fnmatch patterns (matched against the file name and the
      full path) that make files non-requirable
    - dependencies lists registered dependencies for the current compile
    """

    def __init__(
        self,
        roots: Sequence[Union[str, Path]],
        ignore: Optional[Sequence[str]] = None
    ):
        self.roots: List[str] = [normalize_path(root) for root in roots]
        self.ignore: List[str] = list(ignore or [])
        self.dependencies: List[str] = []
        self._processors: Dict[str, List[Type[Processor]]] = {CSS_EXTENSION: []}

    def register_processor(self, extension: str, processor: Type[Processor]) -> None:
        """Append processor to the chain for extension (".scss", "scss")"""
        extension = self._normalize_extension(extension)
        chain = self._processors.setdefault(extension, [])
        if processor not in chain:
            chain.append(processor)
        logger.debug(f"FileSystemPipeline: Registered {processor.__name__} for '{extension}'")

    @property
    def extensions(self) -> List[str]:
        return list(self._processors)

    def search_roots(self) -> List[str]:
        return list(self.roots)

    def resolve_logical_path(self, candidate: str) -> Optional[str]:
        if not candidate:
            return None
        candidate = to_unix_path(candidate)
        if posixpath.isabs(candidate) or os.path.isabs(candidate):
            bases = [candidate]
        else:
            bases = [posixpath.join(root, candidate) for root in self.roots]

        for base in bases:
            for suffix in self._suffixes_for(base):
                path = base + suffix
                if os.path.isfile(path):
                    return normalize_path(path)
        return None

    def is_requirable_asset(self, path: str) -> bool:
        if not path or not os.path.isfile(path):
            return False
        if self._extension_of(path) not in self._processors:
            return False
        return not self._is_ignored(path)

    def register_dependency(self, path: str) -> None:
        if not path or not os.path.isfile(path):
            raise AssetNotFoundError(path, f"Cannot depend on '{path}': file could not be found")
        path = normalize_path(path)
        if path not in self.dependencies:
            self.dependencies.append(path)

    def processors_for(self, path: str) -> List[Type[Processor]]:
        return list(self._processors.get(self._extension_of(path), []))

    def evaluate(
        self,
        path: str,
        processors: Optional[Sequence[Type[Processor]]] = None
    ) -> Optional[EvaluationResult]:
        if not os.path.isfile(path):
            raise AssetNotFoundError(path)
        chain = self.processors_for(path) if processors is None else list(processors)
        data = read_source_file(path)
        for processor in chain:
            data = processor(path, data).evaluate(self)
        logger.debug(
            f"FileSystemPipeline: Evaluated {path} through "
            f"[{', '.join(p.__name__ for p in chain)}] ({len(data)} chars)"
        )
        return EvaluationResult(path=normalize_path(path), data=data)

    def compile_asset(self, logical_path: str) -> str:
        """
        Resolve and evaluate a top-level asset with its full processor chain.

        Raises:
            AssetNotFoundError: If logical_path is not a requirable asset
        """
        path = self.resolve_logical_path(logical_path)
        if path is None or not self.is_requirable_asset(path):
            raise AssetNotFoundError(logical_path)
        self.dependencies = []
        result = self.evaluate(path)
        return result.data if result else ""

    def _suffixes_for(self, base: str) -> List[str]:
        # Plain CSS last
        suffixes = [ext for ext in self._processors if ext != CSS_EXTENSION]
        if CSS_EXTENSION in self._processors:
            suffixes.append(CSS_EXTENSION)
        if self._extension_of(base) in self._processors:
            suffixes.insert(0, "")
        return suffixes

    def _is_ignored(self, path: str) -> bool:
        unix_path = to_unix_path(path)
        name = posixpath.basename(unix_path)
        return any(
            fnmatch.fnmatch(name, pattern) or fnmatch.fnmatch(unix_path, pattern)
            for pattern in self.ignore
        )

    @staticmethod
    def _extension_of(path: str) -> str:
        return os.path.splitext(path)[1].lower()

    @staticmethod
    def _normalize_extension(extension: str) -> str:
        extension = extension.lower()
        return extension if extension.startswith(".") else f".{extension}"
