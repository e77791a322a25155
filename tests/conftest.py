"""
Shared pytest fixtures for the edgar-nc test suite.

This module provides common fixtures used across test modules:
- Project paths
- A fresh configuration cache per test

Usage:
    Fixtures are automatically discovered by pytest.
    Import them directly in test files - no explicit import needed.
"""

import pytest
from pathlib import Path
import sys

# Ensure edgar_nc is importable without an editable install
sys.path.insert(0, str(Path(__file__).parent.parent))

from edgar_nc.config import clear_config_cache


# ===========================
# Path Fixtures
# ===========================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def configs_dir(project_root: Path) -> Path:
    """Return the directory holding config.yaml."""
    return project_root / "configs"


# ===========================
# Configuration Fixtures
# ===========================

@pytest.fixture(autouse=True)
def _fresh_config_cache():
    """Drop cached YAML sections so env/config overrides never leak between tests."""
    clear_config_cache()
    yield
    clear_config_cache()


# ===========================
# Markers
# ===========================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
