"""pocatalog configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from pocatalog.configuration.i18n import I18nSettings


class Settings(BaseSettings):
    """pocatalog configuration settings - main aggregator.

    Aggregates application-level settings and the translation feature
    settings into a single configuration object.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: Deployment environment name ("production" enables
            JSON log rendering)

    Example:
        ```python
        from pocatalog.configuration import settings

        translations_dir = settings.i18n.TRANSLATIONS_DIR

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
