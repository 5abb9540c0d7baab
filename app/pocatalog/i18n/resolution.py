"""Key resolution: context, pluralization and fallback over flat lookups.

Resolution never raises. A key missing from both the primary and the
fallback catalog resolves to a visibly untranslated string (``base@context``
or ``base``) so that gaps show up in the running application.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Optional

from pocatalog.i18n.catalog import TranslationCatalog
from pocatalog.i18n.models import PluralCategory, TranslationKey
from pocatalog.i18n.plurals import PluralRule, default_plural_rule

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


class ResolutionSource(str, Enum):
    """Where a resolved string came from."""

    PRIMARY = "primary"
    FALLBACK = "fallback"
    MISSING = "missing"


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one key.

    Attributes:
        text: Resolved string, or the literal miss string.
        key: Flat key that matched, or None on a miss.
        source: Which catalog supplied the text.
    """

    text: str
    key: Optional[str]
    source: ResolutionSource

    @property
    def found(self) -> bool:
        return self.source is not ResolutionSource.MISSING


def _category_name(category: Any) -> str:
    if isinstance(category, PluralCategory):
        return category.value
    if isinstance(category, Enum):
        return str(category.name).lower()
    return str(category).lower()


def candidate_keys(
    base_key: str,
    context: Optional[str] = None,
    count: Optional[int] = None,
    plural_rule: Optional[PluralRule] = None,
) -> List[str]:
    """Flat keys to try, in order, for one catalog.

    With a count the plural category from ``plural_rule`` is appended first,
    then ``.other`` as the catch-all when the catalog lacks that category.
    The context suffix is appended after the plural suffix.
    """
    key = TranslationKey(id=base_key, context=context)
    if count is None:
        return [key.flat]

    rule = plural_rule or default_plural_rule
    category = _category_name(rule(count))
    candidates = [key.with_category(category).flat]
    if category != PluralCategory.OTHER.value:
        candidates.append(key.with_category(PluralCategory.OTHER.value).flat)
    return candidates


def miss_text(base_key: str, context: Optional[str] = None) -> str:
    """Literal string returned when nothing matches."""
    return TranslationKey(id=base_key, context=context).flat


def resolve_translation(
    primary: TranslationCatalog,
    fallback: Optional[TranslationCatalog],
    base_key: str,
    context: Optional[str] = None,
    count: Optional[int] = None,
    plural_rule: Optional[PluralRule] = None,
) -> Resolution:
    """Resolve a key against primary then fallback.

    Args:
        primary: Catalog consulted first.
        fallback: Optional catalog consulted when primary has no match.
        base_key: Key without plural or context suffixes.
        context: Disambiguating context; None means no context.
        count: Plural count; None means no pluralization.
        plural_rule: ``count -> PluralCategory`` for the catalog's locale.

    Returns:
        Resolution describing the text and where it came from.
    """
    candidates = candidate_keys(base_key, context, count, plural_rule)
    catalogs = [(primary, ResolutionSource.PRIMARY)]
    if fallback is not None:
        catalogs.append((fallback, ResolutionSource.FALLBACK))

    for catalog, source in catalogs:
        for key in candidates:
            value = catalog.lookup(key)
            if value is not None:
                return Resolution(text=value, key=key, source=source)

    return Resolution(
        text=miss_text(base_key, context),
        key=None,
        source=ResolutionSource.MISSING,
    )


def resolve_key(
    primary: TranslationCatalog,
    fallback: Optional[TranslationCatalog],
    base_key: str,
    context: Optional[str] = None,
    count: Optional[int] = None,
    plural_rule: Optional[PluralRule] = None,
) -> str:
    """Resolve a key to its string; see resolve_translation."""
    return resolve_translation(
        primary, fallback, base_key, context, count, plural_rule
    ).text


def interpolate(message: str, variables: Optional[Mapping[str, Any]] = None) -> str:
    """Replace ``{name}`` placeholders with values from ``variables``.

    Placeholders without a matching variable are left verbatim.
    """
    if not variables:
        return message

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        if name in variables:
            return str(variables[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, message)


def format_message(
    text: str,
    count: Optional[int] = None,
    variables: Optional[Mapping[str, Any]] = None,
) -> str:
    """Interpolate a resolved message; ``count`` fills ``{count}`` unless overridden."""
    values = dict(variables or {})
    if count is not None:
        values.setdefault("count", count)
    return interpolate(text, values)


@dataclass(frozen=True)
class ResolutionContext:
    """A primary catalog, at most one fallback catalog, and the plural rule.

    Catalogs are immutable, so several contexts may share them.

    Attributes:
        primary: Catalog for the requested locale.
        fallback: Optional catalog for the fallback locale (no chaining).
        locale: Opaque tag of the primary locale.
        fallback_locale: Opaque tag of the fallback locale.
        plural_rule: ``count -> PluralCategory`` for the primary locale.
    """

    primary: TranslationCatalog
    fallback: Optional[TranslationCatalog] = None
    locale: Optional[str] = None
    fallback_locale: Optional[str] = None
    plural_rule: PluralRule = default_plural_rule

    def resolve(
        self,
        base_key: str,
        context: Optional[str] = None,
        count: Optional[int] = None,
    ) -> Resolution:
        return resolve_translation(
            self.primary,
            self.fallback,
            base_key,
            context=context,
            count=count,
            plural_rule=self.plural_rule,
        )

    def translate(
        self,
        base_key: str,
        context: Optional[str] = None,
        count: Optional[int] = None,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Resolve then interpolate; ``count`` is available as ``{count}``."""
        text = self.resolve(base_key, context=context, count=count).text
        return format_message(text, count=count, variables=variables)
