"""
Sass Engine

The pipeline processor for .scss and .sass files. Register it on a pipeline
with register_with(); the pipeline then runs every stylesheet through
StylesheetCompiler, and imported stylesheets are read through the pipeline's
other processors but never compiled separately.
"""

import logging
from typing import Optional

from .driver import StylesheetCompiler
from ..analysis.dependency_tree import DependencyTree
from ..pipeline.base import AssetPipeline, Processor
from ..pipeline.filesystem import FileSystemPipeline
from ..utils.config import DEFAULT_MIME_TYPE, DEFAULT_OUTPUT_STYLE, STYLESHEET_EXTENSIONS

logger = logging.getLogger(__name__)


class SassEngine(Processor):
    """
    Sass/SCSS processor.

    Subclass and override output_style for other output formats. After
    evaluate(), dependency_tree holds the imports of the compile.
    """

    default_mime_type = DEFAULT_MIME_TYPE
    output_style = DEFAULT_OUTPUT_STYLE

    def __init__(self, path: str, data: str):
        super().__init__(path, data)
        self.dependency_tree: Optional[DependencyTree] = None

    def evaluate(self, pipeline: AssetPipeline) -> str:
        compiler = StylesheetCompiler(output_style=self.output_style)
        result = compiler.compile(self.data, self.path, pipeline, excluded=(SassEngine,))
        self.dependency_tree = result.dependency_tree
        return result.css


def register_with(pipeline: FileSystemPipeline, engine: type = SassEngine) -> None:
    """Register engine for the .scss and .sass extensions on pipeline"""
    for extension in STYLESHEET_EXTENSIONS:
        pipeline.register_processor(extension, engine)
    logger.debug(f"Registered {engine.__name__} for {', '.join(STYLESHEET_EXTENSIONS)}")
