"""Compiler: libsass driver, import coordinator and the pipeline engine."""

from .importer import ImportCoordinator, ImportPhase
from .driver import StylesheetCompiler, CompilationResult
from .engine import SassEngine, register_with

__all__ = [
    'ImportCoordinator',
    'ImportPhase',
    'StylesheetCompiler',
    'CompilationResult',
    'SassEngine',
    'register_with',
]
