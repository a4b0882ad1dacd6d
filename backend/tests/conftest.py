"""Shared test configuration and pytest markers."""

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the HTTP layer through FastAPI's TestClient"
    )
