"""Translation key models for the i18n system.

Flat keys are the storage format of a TranslationCatalog:

- bare key: ``"<id>"``
- context-qualified: ``"<id>@<context>"``
- plural-qualified: ``"<id>.<category>"``
- both: ``"<id>.<category>@<context>"`` (plural suffix first, context last)

TranslationKey is the structured view of the same key.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

CONTEXT_SEPARATOR = "@"
PLURAL_SEPARATOR = "."


class PluralCategory(str, Enum):
    """CLDR plural categories, valued by their lowercase English names."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"

    @classmethod
    def from_string(cls, name: str) -> "PluralCategory":
        """Convert a category name (any case) to PluralCategory.

        Raises:
            ValueError: If the name is not a plural category.
        """
        try:
            return cls(name.lower())
        except ValueError as e:
            raise ValueError(f"Unknown plural category: {name}") from e


def is_category_suffix(segment: str) -> bool:
    """True if segment is a plural category name or a non-negative integer."""
    if segment.isdigit() and segment.isascii():
        return True
    return segment in {category.value for category in PluralCategory}


@dataclass(frozen=True)
class TranslationKey:
    """Structured view of a flat catalog key.

    Frozen so it can be hashed and shared.

    Attributes:
        id: Base identifier (e.g., "ui.button.save").
        context: Disambiguating context, or None for no context.
        category: Plural category suffix ("one", "other", "2", ...), or None.
    """

    id: str
    context: Optional[str] = None
    category: Optional[str] = None

    @property
    def flat(self) -> str:
        """Storage key: ``id[.category][@context]``."""
        key = self.id
        if self.category is not None:
            key = f"{key}{PLURAL_SEPARATOR}{self.category}"
        if self.context is not None:
            key = f"{key}{CONTEXT_SEPARATOR}{self.context}"
        return key

    def __str__(self) -> str:
        return self.flat

    def with_category(self, category: Optional[str]) -> "TranslationKey":
        return TranslationKey(id=self.id, context=self.context, category=category)

    def with_context(self, context: Optional[str]) -> "TranslationKey":
        return TranslationKey(id=self.id, context=context, category=self.category)

    @classmethod
    def parse(cls, flat_key: str) -> "TranslationKey":
        """Split a flat key into its structured parts.

        The context is everything after the last ``@``. The plural category is
        the last dotted segment of the remainder when it names a plural
        category or is a non-negative integer.

        Args:
            flat_key: Flat key (e.g., "item.one@shop").

        Returns:
            TranslationKey instance.
        """
        base, separator, context = flat_key.rpartition(CONTEXT_SEPARATOR)
        if not separator:
            base, context_value = flat_key, None
        else:
            context_value = context

        head, dot, tail = base.rpartition(PLURAL_SEPARATOR)
        if dot and head and is_category_suffix(tail):
            return cls(id=head, context=context_value, category=tail)
        return cls(id=base, context=context_value)
