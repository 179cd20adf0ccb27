import pytest

from tagtext.settings import get_settings


@pytest.fixture(autouse=True)
def clear_settings(monkeypatch):
    for name in ("TAGTEXT_DEFAULT_ENCODING", "TAGTEXT_INCLUDE_BOM", "TAGTEXT_INCLUDE_TERMINATOR", "TAGTEXT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
