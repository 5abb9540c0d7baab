"""Tests for pocatalog.configuration settings."""

import pytest
from pydantic import ValidationError

from pocatalog.configuration import I18nSettings, Settings

I18N_VARIABLES = (
    "I18N_TRANSLATIONS_DIR",
    "I18N_TRANSLATION_FORMAT",
    "I18N_DEFAULT_LOCALE",
    "I18N_FALLBACK_LOCALE",
    "I18N_USE_CACHE",
    "I18N_PRELOAD",
    "LOG_LEVEL",
    "ENVIRONMENT",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no relevant variables and no .env file in the working directory."""
    for name in I18N_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.mark.unit
class TestI18nSettings:
    """Tests for I18nSettings."""

    def test_defaults(self, clean_env):
        config = I18nSettings()

        assert config.TRANSLATIONS_DIR == "locales"
        assert config.TRANSLATION_FORMAT == "po"
        assert config.DEFAULT_LOCALE == "en-US"
        assert config.FALLBACK_LOCALE == "en-US"
        assert config.USE_CACHE is True
        assert config.PRELOAD is True
        assert config.fallback_locale == "en-US"

    def test_environment_overrides(self, clean_env):
        clean_env.setenv("I18N_TRANSLATIONS_DIR", "/srv/locales")
        clean_env.setenv("I18N_TRANSLATION_FORMAT", "YAML")
        clean_env.setenv("I18N_USE_CACHE", "false")
        clean_env.setenv("I18N_PRELOAD", "0")

        config = I18nSettings()

        assert config.TRANSLATIONS_DIR == "/srv/locales"
        assert config.TRANSLATION_FORMAT == "yaml"
        assert config.USE_CACHE is False
        assert config.PRELOAD is False

    def test_invalid_format(self, clean_env):
        clean_env.setenv("I18N_TRANSLATION_FORMAT", "json")
        with pytest.raises(ValidationError):
            I18nSettings()

    def test_empty_fallback_disables(self, clean_env):
        clean_env.setenv("I18N_FALLBACK_LOCALE", "")
        assert I18nSettings().fallback_locale is None

    def test_dotenv_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("I18N_DEFAULT_LOCALE=fr-FR\n", encoding="utf-8")
        assert I18nSettings().DEFAULT_LOCALE == "fr-FR"


@pytest.mark.unit
class TestSettings:
    """Tests for the Settings aggregator."""

    def test_defaults(self, clean_env):
        config = Settings()

        assert config.LOG_LEVEL == "INFO"
        assert config.ENVIRONMENT == "development"
        assert not config.is_production
        assert isinstance(config.i18n, I18nSettings)

    def test_is_production(self, clean_env):
        clean_env.setenv("ENVIRONMENT", "Production")
        assert Settings().is_production

    def test_subsettings_read_environment(self, clean_env):
        clean_env.setenv("I18N_DEFAULT_LOCALE", "de-DE")
        assert Settings().i18n.DEFAULT_LOCALE == "de-DE"

    def test_subsettings_override(self, clean_env):
        """An explicit section instance is used as given."""
        clean_env.setenv("I18N_FALLBACK_LOCALE", "")
        custom = I18nSettings()
        clean_env.delenv("I18N_FALLBACK_LOCALE")

        assert Settings().i18n.fallback_locale == "en-US"
        assert Settings(i18n=custom).i18n.fallback_locale is None
