"""
Compiler Driver

One call per top-level stylesheet: sets up a fresh dependency tree and import
coordinator, runs libsass with the coordinator as importer, and turns libsass
failures into SassCompileError.
"""

import logging
import os
from dataclasses import replace
from typing import Callable, Optional, Sequence, Tuple, Type

import sass

from .importer import ImportCoordinator
from ..analysis.dependency_tree import DependencyTree, format_tree
from ..analysis.import_system import ContentLoader
from ..pipeline.base import AssetPipeline, Processor
from ..shared.errors import SassCompileError
from ..shared.source_location import SourceLocation
from ..utils.config import DEFAULT_OUTPUT_STYLE, SASS_EXTENSION, STDIN_PATH
from ..utils.io_utils import normalize_path

logger = logging.getLogger(__name__)


class CompilationResult:
    """Compilation result"""
    def __init__(
        self,
        css: Optional[str] = None,
        dependency_tree: Optional[DependencyTree] = None,
        success: bool = False
    ):
        self.css = css
        self.dependency_tree = dependency_tree
        self.success = success


class StylesheetCompiler:
    """
    Compile a stylesheet with pipeline-aware @import resolution.

    compile_fn is sass.compile unless injected; it is called as
    compile_fn(string=, importers=, include_paths=, indented=, output_style=)
    and must raise one of compile_errors on failure.
    """

    def __init__(
        self,
        compile_fn: Optional[Callable[..., str]] = None,
        output_style: str = DEFAULT_OUTPUT_STYLE,
        compile_errors: Optional[Tuple[Type[BaseException], ...]] = None
    ):
        if compile_fn is None:
            compile_fn = sass.compile
            compile_errors = compile_errors or (sass.CompileError,)
        self.compile_fn = compile_fn
        self.compile_errors = compile_errors or (Exception,)
        self.output_style = output_style

    def compile(
        self,
        source: str,
        path: str,
        pipeline: AssetPipeline,
        excluded: Optional[Sequence[Type[Processor]]] = None
    ) -> CompilationResult:
        """
        Compile source (the contents of path).

        Args:
            source: Stylesheet text
            path: File the text came from; imports resolve relative to it
            pipeline: Host pipeline used for every import
            excluded: Processors removed from imported files' chains
                      (default: the Sass engine)

        Raises:
            SassCompileError: If the compiler fails
        """
        path = normalize_path(path)
        tree = DependencyTree()
        coordinator = ImportCoordinator(
            pipeline,
            path,
            tree=tree,
            loader=ContentLoader(pipeline, excluded),
        )
        include_paths = [os.path.dirname(path)] + pipeline.search_roots()

        logger.debug(f"Compiling {path} (include paths: {include_paths})")
        try:
            css = self.compile_fn(
                string=source,
                importers=((0, coordinator.import_callback),),
                include_paths=include_paths,
                indented=path.endswith(SASS_EXTENSION),
                output_style=self.output_style,
            )
        except self.compile_errors as e:
            error = SassCompileError.from_compiler_error(e)
            if error.location is not None:
                error.location = self._absolute_location(error.location, path)
            failing_file = error.location.file if error.location else path
            error.import_chain = self._import_chain(tree, failing_file)
            raise error from e

        return CompilationResult(css=str(css), dependency_tree=tree, success=True)

    @staticmethod
    def _absolute_location(location: SourceLocation, path: str) -> SourceLocation:
        """
        Point location at a real file.

        The document is compiled from a string, so libsass names it "stdin";
        other files are reported relative to the working directory.
        """
        if location.file == STDIN_PATH:
            return replace(location, file=path)
        return replace(location, file=normalize_path(location.file))

    @staticmethod
    def _import_chain(tree: DependencyTree, failing_file: str) -> Optional[str]:
        """Pruned tree from the root to failing_file, rendered; None if unseen"""
        if not tree.has_path(failing_file):
            return None
        pruned = tree.materialize(failing_file)
        root = pruned.root if pruned.edges else failing_file
        return format_tree(pruned.render(root))
