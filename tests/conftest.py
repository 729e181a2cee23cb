"""Pytest configuration for tests.

Sets up Python path and shared fixtures for all tests.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

# Add project root to Python path so imports work correctly
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def mock_http():
    """Patch httpx.AsyncClient and return the instance GitHubAPIClient will open.

    The patched class is available as ``mock_http.class_mock``.
    """
    with patch("application.services.github.api.client.httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value = mock_client
        mock_client.class_mock = mock_client_class
        yield mock_client
