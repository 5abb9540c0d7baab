"""Plural rule contract consumed by key resolution.

Locale plural rule tables live outside this package. Resolution only needs
a ``count -> PluralCategory`` callable per locale; this module defines that
callable type, a one/other default, and the mapping between PO plural form
positions and catalog key suffixes.
"""

from typing import Callable

from pocatalog.i18n.models import PluralCategory

PluralRule = Callable[[int], PluralCategory]


def default_plural_rule(count: int) -> PluralCategory:
    """Two-form rule: ONE for exactly 1, OTHER for everything else."""
    return PluralCategory.ONE if count == 1 else PluralCategory.OTHER


def category_for_position(position: int) -> str:
    """Catalog key suffix for a PO plural form at a sorted position.

    Position 0 is "one", position 1 is "other", anything beyond is the
    decimal position itself.
    """
    if position < 0:
        raise ValueError(f"Plural form position must be non-negative: {position}")
    if position == 0:
        return PluralCategory.ONE.value
    if position == 1:
        return PluralCategory.OTHER.value
    return str(position)


def position_for_category(category: str) -> int | None:
    """Inverse of category_for_position, or None for named categories beyond one/other."""
    if category == PluralCategory.ONE.value:
        return 0
    if category == PluralCategory.OTHER.value:
        return 1
    if category.isdigit() and category.isascii():
        position = int(category)
        return position if position >= 2 else None
    return None
