"""Shared pytest fixtures for the gesture_lib test suite.

Fixtures:
    fixtures_dir: Directory holding the JSON gesture fixtures

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
    integration: Mark test as integration test
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# -----------------------------------------------------------------------------
# Pytest Markers
# -----------------------------------------------------------------------------

def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


# -----------------------------------------------------------------------------
# Path Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def fixtures_dir():
    """Return the directory with the JSON gesture fixtures."""
    return FIXTURES_DIR
