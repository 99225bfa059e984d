"""Root pytest configuration for all tests."""

import pytest


@pytest.fixture(autouse=True)
def _isolate_confluence_env(monkeypatch):
    """Keep real CONFLUENCE_* settings (and .env files) out of unit tests."""
    for name in ("CONFLUENCE_BASE_URL", "CONFLUENCE_SPACE_KEY", "CONFLUENCE_AUTH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("src.confluence_client.auth.load_dotenv", lambda: False)
