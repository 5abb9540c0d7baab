"""Configuration module - public API.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation feature settings class

Example:
    ```python
    from pocatalog.configuration import settings

    if settings.i18n.PRELOAD:
        ...
    ```
"""

from pocatalog.configuration.i18n import I18nSettings
from pocatalog.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
