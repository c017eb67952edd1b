"""
Pytest configuration and fixtures.
"""
import pytest

from slideloader.core import get_settings
from slideloader.services.slideshow import loader as loader_module


SETTINGS_ENV_VARS = [
    "APP_NAME",
    "DEBUG",
    "LOG_LEVEL",
    "HOST",
    "PORT",
    "SLIDES_DIR",
    "SLIDE_PARAM",
    "DEFAULT_SLIDE",
    "REMARK_JS_URL",
    "CORS_ORIGINS",
]


@pytest.fixture
def clean_environment(monkeypatch):
    """Provide a clean environment for tests."""
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Drop cached settings and the shared slide loader around each test."""
    get_settings.cache_clear()
    loader_module._slide_loader = None
    yield
    get_settings.cache_clear()
    loader_module._slide_loader = None


@pytest.fixture
def slides_dir(tmp_path):
    """Create a slides directory with a couple of decks."""
    directory = tmp_path / "slides"
    directory.mkdir()
    (directory / "monoids.md").write_text("# Monoids\n---\n# Laws\n")
    (directory / "category-theory.md").write_text("# Categories\n")
    return directory
