"""Shared test fixtures for the btc-qr-tools test suite."""

from __future__ import annotations

import pytest


@pytest.fixture
def app_config():
    """Provide a test AppConfig with safe defaults."""
    from btc_qr.config.settings import AppConfig

    return AppConfig(debug=True)


@pytest.fixture
def test_client(app_config):
    """Provide a FastAPI TestClient with the app wired to test config."""
    from fastapi.testclient import TestClient

    from btc_qr.api.app import create_app

    app = create_app(config=app_config)
    return TestClient(app, raise_server_exceptions=False)
