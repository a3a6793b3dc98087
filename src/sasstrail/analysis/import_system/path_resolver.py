"""
Search-Path Resolution

Finds the pipeline asset an @import argument refers to. Candidates come from
path_transformer.candidates_for; each is handed to the pipeline, and the
first one that resolves to a requirable asset wins.

Sprockets Pattern: Sprockets::SassImporter#resolve

This class is stateless and can be shared/reused.
"""

import logging
from typing import Optional

from .path_transformer import candidates_for
from ...pipeline.base import AssetPipeline

logger = logging.getLogger(__name__)


class SearchPathResolver:
    """
    Resolve import arguments through the pipeline's search paths.

    - "foo" from styles/main.scss → styles/foo, styles/_foo, foo, _foo
    - A miss is not an error: resolve() returns None and logs an
      unresolved import, leaving the compiler free to fall back natively
    """

    def __init__(self, pipeline: AssetPipeline):
        self.pipeline = pipeline

    def resolve(self, import_argument: str, base_path: str) -> Optional[str]:
        """
        Resolve import_argument imported from base_path.

        Args:
            import_argument: Raw @import argument (e.g. "vars/colors")
            base_path: File containing the @import

        Returns:
            Concrete path of the first requirable candidate, or None
        """
        candidates = candidates_for(
            import_argument,
            base_path,
            self.pipeline.search_roots(),
            default_root=self.pipeline.root_path,
        )
        for candidate in candidates:
            found = self.pipeline.resolve_logical_path(candidate)
            if found and self.pipeline.is_requirable_asset(found):
                logger.debug(f"Resolved '{import_argument}' from {base_path} via '{candidate}' -> {found}")
                return found
            logger.debug(f"Candidate '{candidate}' for '{import_argument}' did not resolve")

        logger.warning(
            f"Unresolved import '{import_argument}' from {base_path}; "
            f"tried: {', '.join(candidates)}"
        )
        return None
