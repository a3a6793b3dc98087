"""
Tests for search-path resolution through the pipeline.
"""

import logging
import pytest
from sasstrail.analysis.import_system.path_resolver import SearchPathResolver
from tests.test_utils import MemoryPipeline


class TestSearchPathResolver:
    """First requirable candidate wins; misses are soft"""

    def test_partial_next_to_importer(self):
        pipeline = MemoryPipeline({"/proj/styles/_foo.scss": "$c: red;"})
        resolver = SearchPathResolver(pipeline)
        assert resolver.resolve("foo", "/proj/styles/main.scss") == "/proj/styles/_foo.scss"

    def test_non_partial_wins_over_partial(self):
        pipeline = MemoryPipeline({
            "/proj/styles/foo.scss": "",
            "/proj/styles/_foo.scss": "",
        })
        resolver = SearchPathResolver(pipeline)
        assert resolver.resolve("foo", "/proj/styles/main.scss") == "/proj/styles/foo.scss"

    def test_root_relative_wins_over_bare(self):
        pipeline = MemoryPipeline({
            "/proj/_foo.scss": "",
            "/proj/styles/_foo.scss": "",
        })
        resolver = SearchPathResolver(pipeline)
        assert resolver.resolve("foo", "/proj/styles/main.scss") == "/proj/styles/_foo.scss"
        assert pipeline.resolve_calls[:2] == ["styles/foo", "styles/_foo"]

    def test_falls_back_to_search_root(self):
        pipeline = MemoryPipeline(
            {"/vendor/shared/_colors.scss": ""},
            roots=["/proj", "/vendor"],
        )
        resolver = SearchPathResolver(pipeline)
        assert resolver.resolve("shared/colors", "/proj/styles/main.scss") == "/vendor/shared/_colors.scss"

    def test_non_requirable_match_is_skipped(self):
        class PickyPipeline(MemoryPipeline):
            def is_requirable_asset(self, path):
                return not path.endswith("/foo.scss")

        pipeline = PickyPipeline({
            "/proj/styles/foo.scss": "",
            "/proj/styles/_foo.scss": "",
        })
        resolver = SearchPathResolver(pipeline)
        assert resolver.resolve("foo", "/proj/styles/main.scss") == "/proj/styles/_foo.scss"

    def test_unresolved_returns_none_and_logs(self, caplog):
        pipeline = MemoryPipeline({"/proj/styles/_foo.scss": ""})
        resolver = SearchPathResolver(pipeline)
        with caplog.at_level(logging.WARNING, logger="sasstrail"):
            assert resolver.resolve("missing", "/proj/styles/main.scss") is None
        assert "Unresolved import 'missing'" in caplog.text
        assert "styles/_missing" in caplog.text


if __name__ == "__main__":
    pytest.main([__file__])
