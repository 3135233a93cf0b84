"""
Pytest configuration and shared fixtures for httpcall tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

make_response_view = _common.make_response_view
make_requests_response = _common.make_requests_response


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def json_response():
    """A 200 response with an application/json body."""
    return make_response_view('{"a":1,"b":2}', content_type="application/json")


@pytest.fixture
def text_response():
    """A 200 response with a text/plain body."""
    return make_response_view("hello", content_type="text/plain")


@pytest.fixture
def mock_client(text_response):
    """An HttpClient stand-in whose get/post return text_response."""
    client = Mock()
    client.get.return_value = text_response
    client.post.return_value = text_response
    return client


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep HTTPCALL_* and NO_COLOR from the outer shell out of tests."""
    for name in ("NO_COLOR", "HTTPCALL_NO_COLOR", "HTTPCALL_STYLE", "HTTPCALL_TIMEOUT",
                 "HTTPCALL_PROXY", "HTTPCALL_LOG_LEVEL", "HTTPCALL_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
