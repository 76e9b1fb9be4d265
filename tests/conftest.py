"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from resonata.scales import ScaleCatalog


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def project_scales_dir(temp_dir: Path) -> Path:
    """Empty directory for project scale bundles."""
    path = temp_dir / "scales"
    path.mkdir()
    return path


@pytest.fixture
def catalog() -> ScaleCatalog:
    """Catalog over the built-in library only."""
    return ScaleCatalog()
