"""Factory functions for creating i18n components.

Wires configuration into a loader and a Translator.
"""

from pathlib import Path
from typing import Any, Mapping, Optional

import structlog

from pocatalog.configuration import settings
from pocatalog.i18n.loader import (
    FileTranslationLoader,
    POTranslationLoader,
    YAMLTranslationLoader,
)
from pocatalog.i18n.plurals import PluralRule
from pocatalog.i18n.translator import Translator

logger = structlog.get_logger()

LOADERS = {
    "po": POTranslationLoader,
    "yaml": YAMLTranslationLoader,
}

_UNSET = object()


def create_loader(
    translations_dir: Path,
    translation_format: str = "po",
    use_cache: bool = True,
) -> FileTranslationLoader:
    """Create the loader for a translation file format.

    Raises:
        ValueError: If the format is unknown or the directory does not exist.
    """
    loader_class = LOADERS.get(translation_format.lower())
    if loader_class is None:
        raise ValueError(f"Unsupported translation format: {translation_format}")
    return loader_class(translations_dir=translations_dir, use_cache=use_cache)


def create_translator(
    translations_dir: Path | None = None,
    fallback_locale: Any = _UNSET,
    translation_format: str | None = None,
    use_cache: bool | None = None,
    preload: bool | None = None,
    plural_rules: Optional[Mapping[str, PluralRule]] = None,
    default_locale: str | None = None,
) -> Translator:
    """Create and configure a Translator instance.

    Every argument left out is taken from ``settings.i18n``.

    Args:
        translations_dir: Directory of translation files.
        fallback_locale: Locale used when a key is missing; None disables it.
        translation_format: "po" or "yaml".
        use_cache: Whether the loader caches parsed catalogs.
        preload: Whether to load all locales immediately.
        plural_rules: Plural rule per locale tag.
        default_locale: Locale used when a call names none.

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If translations_dir does not exist or the format is unknown.

    Usage:
        # Defaults from the environment
        translator = create_translator()

        # Lazy loading of a custom directory
        translator = create_translator(translations_dir=Path("locales"), preload=False)
        translator.load_locale("fr-FR")
    """
    config = settings.i18n
    if translations_dir is None:
        translations_dir = Path(config.TRANSLATIONS_DIR)
    if fallback_locale is _UNSET:
        fallback_locale = config.fallback_locale
    if translation_format is None:
        translation_format = config.TRANSLATION_FORMAT
    if use_cache is None:
        use_cache = config.USE_CACHE
    if preload is None:
        preload = config.PRELOAD
    if default_locale is None:
        default_locale = config.DEFAULT_LOCALE

    loader = create_loader(translations_dir, translation_format, use_cache)
    translator = Translator(
        loader=loader,
        fallback_locale=fallback_locale,
        plural_rules=plural_rules,
        default_locale=default_locale,
    )

    if preload:
        translator.load_all()
        logger.info(
            "translator_created_with_preload",
            translations_dir=str(translations_dir),
            locale_count=len(translator.get_available_locales()),
        )
    else:
        logger.info(
            "translator_created_lazy",
            translations_dir=str(translations_dir),
        )

    return translator
