"""Shared pytest fixtures for icon browser tests."""

import pytest
from httpx import ASGITransport, AsyncClient

from iconbrowser.config import Settings
from iconbrowser.main import create_app
from iconbrowser.search.router import get_search_service
from iconbrowser.search.service import LiveSnapshotSource, SearchService

from tests.fixtures import build_icon_tree


@pytest.fixture
def icon_root(tmp_path):
    """On-disk icon tree under tmp_path/icons."""
    return build_icon_tree(tmp_path / "icons")


@pytest.fixture
def settings(icon_root):
    return Settings(icon_root=icon_root)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app, icon_root):
    """Async test client with a live-scanning SearchService wired into the app."""
    service = SearchService(LiveSnapshotSource(icon_root))
    app.dependency_overrides[get_search_service] = lambda: service
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
    app.dependency_overrides.clear()
