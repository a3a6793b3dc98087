"""
Content Loading

Reads a resolved import through the pipeline without compiling it. The file
still runs through every other processor in its chain (templating, etc.),
but the import-capable engine itself is removed for this one evaluation:
evaluating a .scss file from inside its own import handler would otherwise
re-enter the engine without bound.
"""

import logging
from typing import Optional, Sequence, Type

from ...pipeline.base import AssetPipeline, Processor

logger = logging.getLogger(__name__)


class ContentLoader:
    """
    Load import contents with the engine excluded from the processor chain.

    The exclusion is passed into pipeline.evaluate() per call; the pipeline's
    configured chains are never modified.
    """

    def __init__(
        self,
        pipeline: AssetPipeline,
        excluded: Optional[Sequence[Type[Processor]]] = None
    ):
        self.pipeline = pipeline
        if excluded is None:
            from ...compiler.engine import SassEngine
            excluded = (SassEngine,)
        self.excluded = tuple(excluded)

    def processors_for(self, path: str) -> list:
        """Configured chain for path minus the excluded processors"""
        return [
            processor for processor in self.pipeline.processors_for(path)
            if not issubclass(processor, self.excluded)
        ]

    def load(self, path: str) -> Optional[str]:
        """
        Evaluate path with the reduced chain.

        Returns:
            Evaluated text, or None when the evaluation produced nothing
        """
        processors = self.processors_for(path)
        result = self.pipeline.evaluate(path, processors=processors)
        if result is None:
            logger.debug(f"Loading {path} produced no result")
            return None
        if not result.data:
            logger.debug(f"Loaded {path}: empty")
        else:
            logger.debug(f"Loaded {path}: {result.data[:20]!r}")
        return result.data
