# tests/conftest.py
import pytest
from checkcommit.config import get_settings


def pytest_collection_modifyitems(items):
    """Mark tests by folder: tests/unit -> unit, tests/integration -> integration."""
    for item in items:
        parts = item.path.parts
        if "integration" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def isolated_settings(request, monkeypatch):
    """Keep the developer's own Gemini key and cached settings out of offline tests."""
    if request.node.get_closest_marker("e2e") is None:
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
