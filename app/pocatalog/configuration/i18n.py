"""Translation catalog feature settings."""

from pydantic import Field, field_validator

from pocatalog.configuration.base import FeatureSettings

SUPPORTED_FORMATS = ("po", "yaml")


class I18nSettings(FeatureSettings):
    """Translation loading configuration.

    Environment Variables:
        I18N_TRANSLATIONS_DIR: Directory holding ``<domain>.<locale>.po`` or
            ``<domain>.<locale>.yml`` files
        I18N_TRANSLATION_FORMAT: ``po`` or ``yaml``
        I18N_DEFAULT_LOCALE: Locale tag used when none is requested
        I18N_FALLBACK_LOCALE: Locale consulted when a key is missing
            (empty string disables fallback)
        I18N_USE_CACHE: Whether loaders cache parsed catalogs
        I18N_PRELOAD: Whether the factory loads every locale up front

    Example:
        ```python
        from pocatalog.configuration import settings

        translations_dir = settings.i18n.TRANSLATIONS_DIR
        fallback = settings.i18n.FALLBACK_LOCALE
        ```
    """

    TRANSLATIONS_DIR: str = Field(default="locales", alias="I18N_TRANSLATIONS_DIR")
    TRANSLATION_FORMAT: str = Field(default="po", alias="I18N_TRANSLATION_FORMAT")
    DEFAULT_LOCALE: str = Field(default="en-US", alias="I18N_DEFAULT_LOCALE")
    FALLBACK_LOCALE: str = Field(default="en-US", alias="I18N_FALLBACK_LOCALE")
    USE_CACHE: bool = Field(default=True, alias="I18N_USE_CACHE")
    PRELOAD: bool = Field(default=True, alias="I18N_PRELOAD")

    @field_validator("TRANSLATION_FORMAT")
    @classmethod
    def validate_format(cls, value: str) -> str:
        """Normalize and validate the translation file format."""
        normalized = value.strip().lower()
        if normalized not in SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported translation format: {value} "
                f"(expected one of {', '.join(SUPPORTED_FORMATS)})"
            )
        return normalized

    @property
    def fallback_locale(self) -> str | None:
        """Fallback locale tag, or None when fallback is disabled."""
        return self.FALLBACK_LOCALE or None
