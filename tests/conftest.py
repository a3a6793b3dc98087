"""
Pytest configuration and shared fixtures for all sasstrail tests.

Filesystem fixtures build small stylesheet projects under tmp_path; every
test gets a fresh pipeline so registered dependencies never leak.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from sasstrail.compiler.engine import register_with
from sasstrail.pipeline.filesystem import FileSystemPipeline
from tests.test_utils import write_files


# =============================================================================
# Project fixtures
# =============================================================================

@pytest.fixture
def project(tmp_path):
    """
    Factory that writes stylesheet files under tmp_path.

    project({"styles/main.scss": "...", "styles/_foo.scss": "..."})
    returns relative name -> absolute path.
    """
    def _project(files):
        return write_files(tmp_path, files)
    return _project


@pytest.fixture
def pipeline(tmp_path):
    """FileSystemPipeline rooted at tmp_path with the Sass engine registered."""
    fs_pipeline = FileSystemPipeline([tmp_path])
    register_with(fs_pipeline)
    return fs_pipeline


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test organization."""
    config.addinivalue_line(
        "markers", "integration: marks tests that run the real libsass compiler"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
