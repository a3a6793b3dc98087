"""Import system: path candidates, search-path resolution, glob expansion, content loading."""

from .import_info import ImportRequest, ResolvedImport, SynthesizedGlobUnit
from .path_transformer import partialize, candidates_for, relative_to_search_roots
from .path_resolver import SearchPathResolver
from .glob_expander import GlobImportExpander, is_glob
from .content_loader import ContentLoader

__all__ = [
    'ImportRequest',
    'ResolvedImport',
    'SynthesizedGlobUnit',
    'partialize',
    'candidates_for',
    'relative_to_search_roots',
    'SearchPathResolver',
    'GlobImportExpander',
    'is_glob',
    'ContentLoader',
]
