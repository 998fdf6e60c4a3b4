"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- HTTP clients
- Sample email data
- A stubbed PDF renderer (WeasyPrint needs native libraries)
"""

import os
from typing import AsyncGenerator, List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from eml_converter.parsing.eml_parser import parse_eml_bytes
from tests.fixtures.emails import FAKE_PDF, SAMPLE_EMAILS


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """
    Create async HTTP client for testing FastAPI endpoints.

    Yields:
        AsyncClient instance
    """
    from eml_converter.api.app import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_message():
    """
    Parse a sample email by its SAMPLE_EMAILS key.

    Returns:
        Callable returning a parsed email.Message
    """

    def _parse(name: str):
        return parse_eml_bytes(SAMPLE_EMAILS[name])

    return _parse


@pytest.fixture
def tmp_eml_file(tmp_path):
    """
    Write an email sample to disk.

    Returns:
        Callable returning the path of the written .eml file
    """

    def _write(name: str = "simple_plain_text", filename: str = "message.eml"):
        eml_path = tmp_path / filename
        eml_path.write_bytes(SAMPLE_EMAILS[name])
        return eml_path

    return _write


@pytest.fixture
def fake_pdf_renderer(monkeypatch) -> List[str]:
    """
    Replace WeasyPrint rendering with a stub.

    Returns:
        List collecting every HTML document handed to the renderer
    """
    rendered: List[str] = []

    def _render(document, target=None):
        rendered.append(document)
        if target is None:
            return FAKE_PDF
        with open(target, "wb") as f:
            f.write(FAKE_PDF)
        return None

    monkeypatch.setattr("eml_converter.converter.render_pdf", _render)
    return rendered


@pytest.fixture(autouse=True)
def reset_env_vars():
    """
    Reset environment variables after each test.

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
        "markers", "integration: Integration tests (API, end-to-end)"
    )
