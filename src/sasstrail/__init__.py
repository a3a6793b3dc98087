"""
sasstrail: Sass @import resolution through an asset pipeline's search paths.

    pipeline = FileSystemPipeline(["app/assets/stylesheets", "vendor/stylesheets"])
    register_with(pipeline)
    css = pipeline.compile_asset("application.scss")
"""

from .compiler import SassEngine, StylesheetCompiler, register_with
from .pipeline import AssetPipeline, FileSystemPipeline, Processor
from .shared import SassCompileError, SassTrailError, AssetNotFoundError

__version__ = "0.1.0"

__all__ = [
    "SassEngine",
    "StylesheetCompiler",
    "register_with",
    "AssetPipeline",
    "FileSystemPipeline",
    "Processor",
    "SassCompileError",
    "SassTrailError",
    "AssetNotFoundError",
]
