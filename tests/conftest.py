#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Pytest configuration file for the HubSpot connector test suite.
"""

import os
import sys
import json
import logging
import pytest
from pathlib import Path
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import requests

# Add the src directory to Python path for accessing forms_hubspot_connector
project_root = Path(__file__).parent.parent
src_path = os.path.join(project_root, "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from forms_hubspot_connector.config import AppConfig
from forms_hubspot_connector.models.submission import Submission
from forms_hubspot_connector.reporter import ResultReporter
from forms_hubspot_connector.utils.logger import reset_loggers

TEST_API_BASE_URL = "https://api.hubapi.test"

# Marker for a body that is not valid JSON
INVALID_JSON = object()


# Define pytest markers
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line(
        "markers", "integration: mark test as requiring integration setup"
    )
    config.addinivalue_line(
        "markers", "hubspot: mark test as requiring HubSpot access"
    )


class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, status_code: int, payload: Any = None):
        self.status_code = status_code
        self.payload = payload
        if payload is INVALID_JSON:
            self.content = b"<html>Bad gateway</html>"
        elif payload is None:
            self.content = b""
        else:
            self.content = json.dumps(payload).encode("utf-8")

    def json(self) -> Any:
        if self.payload is INVALID_JSON or self.payload is None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


@pytest.fixture(autouse=True)
def _reset_loggers():
    """Drop handlers bound to captured streams between tests."""
    yield
    reset_loggers()


@pytest.fixture
def make_response():
    """Factory for fake HTTP responses."""
    def _make(status_code: int, payload: Any = None) -> FakeResponse:
        return FakeResponse(status_code, payload)
    return _make


@pytest.fixture
def mock_session() -> MagicMock:
    """HTTP session whose ``request`` results are set per test."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double; assertions count calls per severity."""
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def reporter(mock_logger) -> ResultReporter:
    return ResultReporter(mock_logger)


@pytest.fixture
def settings() -> AppConfig:
    """Process settings pointing at a fake API root."""
    return AppConfig(
        hubspot_api_base_url=TEST_API_BASE_URL,
        request_timeout=10,
        log_level=logging.DEBUG,
        log_file_path=None,
        json_logs=False,
    )


@pytest.fixture
def make_submission():
    """Factory for submissions of the ``test_form`` form."""
    def _make(data: Optional[Dict[str, Any]] = None, submission_id: str = "test_id") -> Submission:
        return Submission(form_handle="test_form", data=data or {}, id=submission_id)
    return _make


@pytest.fixture(scope="function")
def mock_env_vars(monkeypatch, tmp_path: Path):
    """
    Set up environment variables for testing.

    Args:
        monkeypatch: Pytest monkeypatch fixture
        tmp_path: Temporary directory for the log file
    """
    monkeypatch.setenv("HUBSPOT_API_BASE_URL", "https://api.hubapi.test/")
    monkeypatch.setenv("HUBSPOT_REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_FILE_PATH", str(tmp_path / "connector.log"))
    monkeypatch.setenv("LOG_JSON", "true")
