"""
Asset Pipeline Interface

The host pipeline the engine plugs into. The engine never touches search
paths, caching or evaluation directly: it asks the pipeline.

Sprockets Pattern: Sprockets::Context (resolve, depend_on, evaluate)
"""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence, Type


@dataclass
class EvaluationResult:
    """Output of running an asset through a processor chain"""
    path: str
    data: str


class Processor(ABC):
    """
    One step of an asset's processor chain.

    Processors are instantiated per evaluation with the asset path and the
    data produced by the previous step, and return the transformed data.
    """

    def __init__(self, path: str, data: str):
        self.path = path
        self.data = data

    @abstractmethod
    def evaluate(self, pipeline: "AssetPipeline") -> str:
        """Transform self.data; may consult the pipeline for nested assets."""
        raise NotImplementedError


class AssetPipeline(ABC):
    """
    Host pipeline interface.

    Implementations:
    - resolve logical paths against ordered search roots
    - decide which concrete files are requirable assets
    - track build dependencies
    - evaluate a file through a (possibly reduced) processor chain
    """

    @abstractmethod
    def search_roots(self) -> List[str]:
        """Ordered search roots, as absolute paths"""
        raise NotImplementedError

    @abstractmethod
    def resolve_logical_path(self, candidate: str) -> Optional[str]:
        """Concrete path for a logical path, or None when nothing matches"""
        raise NotImplementedError

    @abstractmethod
    def is_requirable_asset(self, path: str) -> bool:
        """True for loadable build inputs (not directories, not excluded)"""
        raise NotImplementedError

    @abstractmethod
    def register_dependency(self, path: str) -> None:
        """
        Record a build dependency on path.

        Raises:
            AssetNotFoundError: If the path cannot be tracked
        """
        raise NotImplementedError

    @abstractmethod
    def processors_for(self, path: str) -> List[Type[Processor]]:
        """Configured processor chain for path, in execution order"""
        raise NotImplementedError

    @abstractmethod
    def evaluate(
        self,
        path: str,
        processors: Optional[Sequence[Type[Processor]]] = None
    ) -> Optional[EvaluationResult]:
        """
        Evaluate path through processors (the configured chain when None).

        Returns None when the evaluation produced nothing.
        """
        raise NotImplementedError

    @property
    def root_path(self) -> str:
        """Fallback root when no search root contains a file"""
        roots = self.search_roots()
        return roots[0] if roots else os.getcwd()
