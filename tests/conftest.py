"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- Mock settings/configuration
- Sample email data
- Temporary files
"""

import os
from typing import Generator

import pytest

from mailparse.config import Settings
from .fixtures.emails import SAMPLE_EMAILS


@pytest.fixture
def mock_settings() -> Settings:
    """
    Create mock settings for testing with safe defaults.

    Returns:
        Settings instance with test configuration
    """
    return Settings(
        log_level="INFO",
        log_json=False,  # Easier to read in tests
        max_nesting_depth=64,
        max_email_size_mb=25,
    )


@pytest.fixture
def sample_eml_bytes() -> bytes:
    """Simple plain text email bytes for basic tests."""
    return SAMPLE_EMAILS["simple_plain_text"]


@pytest.fixture
def crlf_eml() -> bytes:
    """Plain text email with CRLF line endings."""
    return SAMPLE_EMAILS["crlf_plain_text"]


@pytest.fixture
def encoded_headers_eml() -> bytes:
    """Email with folded and RFC 2047 encoded headers."""
    return SAMPLE_EMAILS["encoded_headers"]


@pytest.fixture
def multipart_alternative_eml() -> bytes:
    """
    Get multipart email with both HTML and plain text.

    Returns:
        bytes of multipart/alternative email
    """
    return SAMPLE_EMAILS["multipart_alternative"]


@pytest.fixture
def nested_multipart_eml() -> bytes:
    """
    Get multipart/mixed email with a nested multipart/alternative.

    Returns:
        bytes of nested multipart email with a base64 attachment
    """
    return SAMPLE_EMAILS["nested_multipart"]


@pytest.fixture
def malformed_eml() -> bytes:
    """
    Get malformed email for error handling tests.

    Returns:
        bytes starting with an overhanging header line
    """
    return SAMPLE_EMAILS["malformed"]


@pytest.fixture
def tmp_eml_file(tmp_path) -> Generator[str, None, None]:
    """
    Create temporary .eml file for file-based tests.

    Args:
        tmp_path: pytest's temporary directory fixture

    Yields:
        Path to temporary .eml file
    """
    eml_path = tmp_path / "test_email.eml"
    eml_path.write_bytes(SAMPLE_EMAILS["simple_plain_text"])
    yield str(eml_path)


@pytest.fixture(autouse=True)
def reset_env_vars():
    """
    Reset environment variables before each test.

    This prevents test pollution from env var changes.
    """
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config):
    """
    Configure pytest with custom markers.
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (CLI, end-to-end)"
    )
