"""Host pipeline: interface and the filesystem reference implementation."""

from .base import AssetPipeline, EvaluationResult, Processor
from .filesystem import FileSystemPipeline

__all__ = [
    'AssetPipeline',
    'EvaluationResult',
    'Processor',
    'FileSystemPipeline',
]
