"""Shared test fixtures for the Omie SDK tests"""

from unittest.mock import MagicMock

import pytest

import omie
from omie.client import Connection
from omie.config import ENV_VAR_MAPPING


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep real OMIE_* variables and the process-wide connection out of tests"""
    for env_var in ENV_VAR_MAPPING:
        monkeypatch.delenv(env_var, raising=False)
    omie.reset()
    yield
    omie.reset()


@pytest.fixture
def mock_response():
    """Factory for creating mock HTTP responses.

    Usage:
        resp = mock_response(200, {"key": "value"})
        resp = mock_response(404, text="Not Found")
    """
    def _make(status_code=200, json_data=None, text=None):
        response = MagicMock()
        response.status_code = status_code
        if json_data is not None:
            response.json.return_value = json_data
            response.text = text or str(json_data)
        else:
            response.json.side_effect = ValueError("No JSON")
            response.text = text or ""
        return response
    return _make


@pytest.fixture
def connection():
    """Connection double whose send() return value tests set up"""
    return MagicMock(spec=Connection)
