"""i18n system - translation catalogs and key resolution.

Main components:
- models: PluralCategory, TranslationKey
- catalog: TranslationCatalog (immutable, prefix-queryable)
- plurals: PluralRule contract and default rule
- resolution: resolve_key, ResolutionContext, interpolate
- loader: TranslationLoader, POTranslationLoader, YAMLTranslationLoader
- translator: Translator service
- factory: create_translator
"""

from pocatalog.i18n.catalog import TranslationCatalog
from pocatalog.i18n.loader import (
    POTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from pocatalog.i18n.models import PluralCategory, TranslationKey
from pocatalog.i18n.plurals import PluralRule, default_plural_rule
from pocatalog.i18n.resolution import (
    Resolution,
    ResolutionContext,
    ResolutionSource,
    format_message,
    interpolate,
    resolve_key,
    resolve_translation,
)
from pocatalog.i18n.translator import Translator

__all__ = [
    "PluralCategory",
    "TranslationKey",
    "TranslationCatalog",
    "PluralRule",
    "default_plural_rule",
    "Resolution",
    "ResolutionContext",
    "ResolutionSource",
    "format_message",
    "interpolate",
    "resolve_key",
    "resolve_translation",
    "TranslationLoader",
    "POTranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
]
