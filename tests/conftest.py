import pytest

from config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    # settings are lru_cached; make sure env tweaks never leak between tests
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
