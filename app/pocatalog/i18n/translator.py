"""Translation service for resolving and interpolating messages.

Holds one catalog per locale and resolves keys against the requested
locale with a single fallback locale behind it.
"""

from typing import Any, Dict, List, Mapping, Optional

from pocatalog.i18n.catalog import TranslationCatalog
from pocatalog.i18n.loader import TranslationLoader
from pocatalog.i18n.plurals import PluralRule, default_plural_rule
from pocatalog.i18n.resolution import (
    Resolution,
    ResolutionContext,
    ResolutionSource,
    format_message,
)
from pocatalog.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Service for translating messages with context, plurals and variables.

    Attributes:
        loader: Optional TranslationLoader for loading catalogs.
        catalogs: Loaded TranslationCatalogs by locale tag.
        default_locale: Locale used when a call names none.
        fallback_locale: Locale consulted when a key is missing, or None.
        plural_rules: ``count -> PluralCategory`` callables by locale tag.
    """

    def __init__(
        self,
        loader: Optional[TranslationLoader] = None,
        fallback_locale: Optional[str] = "en-US",
        plural_rules: Optional[Mapping[str, PluralRule]] = None,
        default_rule: PluralRule = default_plural_rule,
        default_locale: str = "en-US",
    ):
        """Initialize Translator.

        Args:
            loader: TranslationLoader used by load_all/load_locale/reload.
            fallback_locale: Locale to use when a key is not found.
            plural_rules: Plural rule per locale tag.
            default_rule: Plural rule for locales without an entry.
            default_locale: Locale for resolve/translate/has_message calls
                that pass no locale.
        """
        self.loader = loader
        self.default_locale = default_locale
        self.fallback_locale = fallback_locale
        self.plural_rules: Dict[str, PluralRule] = dict(plural_rules or {})
        self.default_rule = default_rule
        self.catalogs: Dict[str, TranslationCatalog] = {}
        logger.info(
            "initialized_translator",
            default_locale=default_locale,
            fallback_locale=fallback_locale,
        )

    def _require_loader(self) -> TranslationLoader:
        if self.loader is None:
            raise RuntimeError("Translator has no loader configured")
        return self.loader

    def load_all(self) -> None:
        """Load all available locales from loader."""
        self.catalogs = self._require_loader().load_all()
        logger.info("loaded_all_translations", locale_count=len(self.catalogs))

    def load_locale(self, locale: str) -> None:
        """Load specific locale from loader.

        Raises:
            FileNotFoundError: If translation files not found.
        """
        self.catalogs[locale] = self._require_loader().load(locale)
        logger.info("loaded_locale_translations", locale=locale)

    def add_catalog(self, catalog: TranslationCatalog, locale: Optional[str] = None) -> None:
        """Register a catalog built elsewhere (PO text, literals, ...).

        Args:
            catalog: Catalog to register.
            locale: Locale tag; defaults to the catalog's own tag.

        Raises:
            ValueError: If neither the argument nor the catalog names a locale.
        """
        tag = locale or catalog.locale
        if tag is None:
            raise ValueError("Catalog has no locale; pass one explicitly")
        self.catalogs[tag] = catalog if catalog.locale == tag else catalog.with_locale(tag)
        logger.info("added_catalog", locale=tag, key_count=len(catalog))

    def plural_rule_for(self, locale: str) -> PluralRule:
        return self.plural_rules.get(locale, self.default_rule)

    def context_for(self, locale: Optional[str] = None) -> ResolutionContext:
        """Resolution context for a locale and the configured fallback."""
        locale = locale or self.default_locale
        primary = self.catalogs.get(locale)
        if primary is None:
            primary = TranslationCatalog(locale=locale)
        fallback = None
        if self.fallback_locale is not None and self.fallback_locale != locale:
            fallback = self.catalogs.get(self.fallback_locale)
        return ResolutionContext(
            primary=primary,
            fallback=fallback,
            locale=locale,
            fallback_locale=self.fallback_locale if fallback is not None else None,
            plural_rule=self.plural_rule_for(locale),
        )

    def resolve(
        self,
        key: str,
        locale: Optional[str] = None,
        context: Optional[str] = None,
        count: Optional[int] = None,
    ) -> Resolution:
        """Resolve a key without interpolation. Never raises on a miss."""
        resolution_context = self.context_for(locale)
        resolution = resolution_context.resolve(key, context=context, count=count)

        if resolution.source is ResolutionSource.FALLBACK:
            logger.info(
                "used_fallback_translation",
                key=resolution.key,
                requested_locale=resolution_context.locale,
                fallback_locale=self.fallback_locale,
            )
        elif resolution.source is ResolutionSource.MISSING:
            logger.warning(
                "translation_not_found",
                key=key,
                context=context,
                count=count,
                locale=resolution_context.locale,
                fallback_locale=self.fallback_locale,
            )
        return resolution

    def translate(
        self,
        key: str,
        locale: Optional[str] = None,
        context: Optional[str] = None,
        count: Optional[int] = None,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Resolve and interpolate a message.

        ``{name}`` placeholders are filled from ``variables``; ``count`` is
        available as ``{count}`` unless ``variables`` defines it. Unknown
        placeholders are left as written. A missing key yields
        ``key@context`` (or ``key``) rather than an error.
        """
        text = self.resolve(key, locale, context=context, count=count).text
        return format_message(text, count=count, variables=variables)

    def has_message(
        self,
        key: str,
        locale: Optional[str] = None,
        context: Optional[str] = None,
        count: Optional[int] = None,
    ) -> bool:
        """True if the requested locale itself resolves the key (no fallback)."""
        locale = locale or self.default_locale
        catalog = self.catalogs.get(locale)
        if catalog is None:
            return False
        resolution = ResolutionContext(
            primary=catalog, plural_rule=self.plural_rule_for(locale)
        ).resolve(key, context=context, count=count)
        return resolution.found

    def get_available_locales(self) -> List[str]:
        """Locale tags that have a catalog loaded."""
        return list(self.catalogs.keys())

    def get_catalog(self, locale: str) -> Optional[TranslationCatalog]:
        return self.catalogs.get(locale)

    def reload(self) -> None:
        """Reload all translations from loader."""
        self._require_loader().clear_cache()
        self.catalogs.clear()
        self.load_all()
        logger.info("reloaded_all_translations")
