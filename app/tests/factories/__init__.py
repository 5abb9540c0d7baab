"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_resolution_context,
    make_translation_catalog,
    make_translation_key,
)
from tests.factories.po import make_plural_entry, make_po_entry, make_po_text

__all__ = [
    "make_resolution_context",
    "make_translation_catalog",
    "make_translation_key",
    "make_plural_entry",
    "make_po_entry",
    "make_po_text",
]
