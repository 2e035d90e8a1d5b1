"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from deckcomposer.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        for name in ("DECK_SIZE", "MAX_DUPLICATES", "ENFORCE_OWNERSHIP", "DEFAULT_LOCALE"):
            monkeypatch.delenv(f"DECKCOMPOSER_{name}", raising=False)

        settings = Settings(_env_file=None)

        assert settings.deck_size == 30
        assert settings.max_duplicates == 3
        assert settings.enforce_ownership is True
        assert settings.default_locale == "ja"

    def test_environment_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("DECKCOMPOSER_DECK_SIZE", "40")
        monkeypatch.setenv("DECKCOMPOSER_MAX_DUPLICATES", "4")
        monkeypatch.setenv("DECKCOMPOSER_ENFORCE_OWNERSHIP", "false")

        settings = Settings(_env_file=None)

        assert settings.deck_size == 40
        assert settings.max_duplicates == 4
        assert settings.enforce_ownership is False

    def test_rejects_zero_deck_size(self, monkeypatch) -> None:
        monkeypatch.setenv("DECKCOMPOSER_DECK_SIZE", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
