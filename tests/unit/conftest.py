import pytest
import respx

from tests.unit.factories import API_URL
from tracker_client.client import TrackerAPIClient
from tracker_client.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from the developer's environment."""
    for var in (
        "TRACKER_API_URL",
        "TRACKER_REQUEST_TIMEOUT",
        "TRACKER_NORMALIZE_EMPTY_PROJECTS",
        "LOG_FORMAT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("TRACKER_API_URL", API_URL)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return Settings(api_url=API_URL)


@pytest.fixture
def client(settings):
    return TrackerAPIClient(settings)


@pytest.fixture
def api():
    """Respx router for the tracker backend."""
    with respx.mock(base_url=API_URL, assert_all_called=False) as respx_mock:
        yield respx_mock
