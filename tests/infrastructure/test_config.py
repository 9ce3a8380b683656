"""Tests for settings and the composition root."""

from pathlib import Path

import pytest

from bizstore.infrastructure.bootstrap import company_repository, store_path
from bizstore.infrastructure.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:

    def test_defaults(self):
        settings = get_settings()
        assert settings == Settings()
        assert settings.store_extension == ".dat"
        assert settings.log_level == "WARNING"

    def test_environment_is_ignored(self, monkeypatch):
        monkeypatch.setenv("BIZSTORE_LOG_LEVEL", "DEBUG")
        assert get_settings() == Settings()


class TestStorePath:

    @pytest.mark.parametrize(
        "typed, expected",
        [("acme", "acme.dat"), ("acme.dat", "acme.dat"), ("acme.txt", "acme.txt.dat")],
    )
    def test_canonical_extension_appended_only_when_missing(self, typed, expected):
        assert store_path(typed) == Path(expected)

    def test_repository_named_after_store(self):
        assert company_repository("acme").name == "acme"
