"""Tests for pocatalog.i18n.resolution module."""

from enum import Enum

import pytest

from pocatalog.i18n import (
    ResolutionSource,
    TranslationCatalog,
    interpolate,
    resolve_key,
    resolve_translation,
)
from pocatalog.i18n.models import PluralCategory
from pocatalog.i18n.resolution import candidate_keys, miss_text
from pocatalog.po import entries_to_catalog, parse_po
from tests.factories.i18n import make_resolution_context


class CldrName(Enum):
    """Plural categories from another library, named rather than valued."""

    One = 1
    Few = 2
    Other = 3


@pytest.mark.unit
class TestCandidateKeys:
    """Tests for candidate_keys."""

    def test_no_count(self):
        assert candidate_keys("greeting") == ["greeting"]

    def test_context_only(self):
        assert candidate_keys("bank", context="river") == ["bank@river"]

    def test_count_adds_category_then_other(self):
        assert candidate_keys("item", count=1) == ["item.one", "item.other"]

    def test_other_is_not_repeated(self):
        assert candidate_keys("item", count=5) == ["item.other"]

    def test_count_and_context(self):
        """The plural suffix precedes the context suffix."""
        assert candidate_keys("file", context="upload", count=1) == [
            "file.one@upload",
            "file.other@upload",
        ]

    def test_custom_rule(self):
        rule = lambda count: PluralCategory.FEW  # noqa: E731
        assert candidate_keys("item", count=3, plural_rule=rule) == [
            "item.few",
            "item.other",
        ]

    def test_named_enum_rule(self):
        """Enum members without string values map by lowercase name."""
        assert candidate_keys("item", count=3, plural_rule=lambda n: CldrName.Few) == [
            "item.few",
            "item.other",
        ]

    def test_miss_text(self):
        assert miss_text("bank") == "bank"
        assert miss_text("bank", "unknown") == "bank@unknown"
        assert miss_text("bank", "") == "bank@"


@pytest.mark.unit
class TestResolveTranslation:
    """Tests for resolve_translation and resolve_key."""

    def test_bare_key(self, en_catalog):
        resolution = resolve_translation(en_catalog, None, "greeting")

        assert resolution.text == "Hello"
        assert resolution.key == "greeting"
        assert resolution.source is ResolutionSource.PRIMARY
        assert resolution.found

    def test_context(self, en_catalog):
        """Context selects the context-qualified entry."""
        assert resolve_key(en_catalog, None, "bank", context="river") == "river bank"
        assert resolve_key(en_catalog, None, "bank", context="finance") == (
            "financial institution"
        )
        assert resolve_key(en_catalog, None, "bank") == "bank"

    def test_context_miss_returns_literal(self, en_catalog):
        """An unknown context does not fall back to the bare key."""
        resolution = resolve_translation(en_catalog, None, "bank", context="unknown")

        assert resolution.text == "bank@unknown"
        assert resolution.key is None
        assert resolution.source is ResolutionSource.MISSING
        assert not resolution.found

    def test_missing_key_returns_base(self, en_catalog):
        assert resolve_key(en_catalog, None, "nope") == "nope"

    def test_plural_one(self, en_catalog):
        assert resolve_key(en_catalog, None, "item", count=1) == "{count} item"

    def test_plural_other(self, en_catalog):
        assert resolve_key(en_catalog, None, "item", count=5) == "{count} items"
        assert resolve_key(en_catalog, None, "item", count=0) == "{count} items"

    def test_plural_with_context(self, en_catalog):
        assert resolve_key(en_catalog, None, "file", context="upload", count=3) == (
            "{count} files uploaded"
        )

    def test_plural_miss_with_context(self, en_catalog):
        """A plural miss reports the base key with its context."""
        assert resolve_key(en_catalog, None, "file", context="download", count=3) == (
            "file@download"
        )

    def test_plural_miss_without_context(self, en_catalog):
        assert resolve_key(en_catalog, None, "nope", count=2) == "nope"

    def test_unknown_category_uses_other(self):
        """A category absent from the catalog falls through to .other."""
        catalog = TranslationCatalog.from_pairs(
            [("item.one", "one"), ("item.other", "other")]
        )
        few = lambda count: PluralCategory.FEW  # noqa: E731

        resolution = resolve_translation(catalog, None, "item", count=3, plural_rule=few)
        assert resolution.text == "other"
        assert resolution.key == "item.other"

    def test_numbered_forms_are_not_categories(self):
        """item.2 is only reachable as a flat key, not via a TWO category."""
        catalog = TranslationCatalog.from_pairs([("item.2", "two"), ("item.other", "many")])
        two = lambda count: PluralCategory.TWO  # noqa: E731

        assert resolve_key(catalog, None, "item", count=2, plural_rule=two) == "many"
        assert catalog.lookup("item.2") == "two"

    def test_fallback(self, fr_catalog, en_catalog):
        """Keys missing from the primary come from the fallback."""
        resolution = resolve_translation(fr_catalog, en_catalog, "farewell")

        assert resolution.text == "Goodbye"
        assert resolution.source is ResolutionSource.FALLBACK

    def test_primary_wins_over_fallback(self, fr_catalog, en_catalog):
        assert resolve_key(fr_catalog, en_catalog, "greeting") == "Bonjour"

    def test_fallback_with_context(self, fr_catalog, en_catalog):
        assert resolve_key(fr_catalog, en_catalog, "bank", context="river") == "rive"
        assert resolve_key(fr_catalog, en_catalog, "bank", context="finance") == (
            "financial institution"
        )

    def test_fallback_plural(self, fr_catalog, en_catalog):
        assert resolve_key(fr_catalog, en_catalog, "file", context="upload", count=1) == (
            "{count} file uploaded"
        )

    def test_primary_other_beats_fallback_category(self):
        """The primary's .other is tried before the fallback's exact category."""
        primary = TranslationCatalog.from_pairs([("item.other", "primary other")])
        fallback = TranslationCatalog.from_pairs([("item.one", "fallback one")])

        assert resolve_key(primary, fallback, "item", count=1) == "primary other"

    def test_miss_in_both(self, fr_catalog, en_catalog):
        resolution = resolve_translation(fr_catalog, en_catalog, "bank", context="unknown")
        assert resolution.text == "bank@unknown"
        assert resolution.source is ResolutionSource.MISSING

    def test_empty_context_is_distinct(self):
        """'' context looks up 'key@', not the bare key."""
        catalog = TranslationCatalog.from_pairs([("a", "bare"), ("a@", "empty")])

        assert resolve_key(catalog, None, "a", context="") == "empty"
        assert resolve_key(catalog, None, "a") == "bare"

    def test_empty_value_is_a_hit(self):
        """An empty translation does not trigger the fallback."""
        primary = TranslationCatalog.from_pairs([("a", "")])
        fallback = TranslationCatalog.from_pairs([("a", "fallback")])
        assert resolve_key(primary, fallback, "a") == ""


@pytest.mark.unit
class TestInterpolate:
    """Tests for interpolate."""

    def test_replaces_placeholders(self):
        assert interpolate("{count} items", {"count": 5}) == "5 items"

    def test_leaves_unknown_placeholders(self):
        assert interpolate("Welcome, {name}", {"count": 1}) == "Welcome, {name}"

    def test_no_variables(self):
        assert interpolate("Welcome, {name}") == "Welcome, {name}"

    def test_multiple_and_repeated(self):
        assert interpolate("{a}-{b}-{a}", {"a": 1, "b": "x"}) == "1-x-1"

    def test_non_identifier_braces_untouched(self):
        assert interpolate("{ a } {a-b} {}", {"a": 1}) == "{ a } {a-b} {}"

    def test_values_are_not_reinterpolated(self):
        assert interpolate("{a}", {"a": "{b}", "b": "no"}) == "{b}"


@pytest.mark.unit
class TestResolutionContext:
    """Tests for ResolutionContext."""

    def test_translate_counts(self):
        """Plural PO text resolves and interpolates by count."""
        catalog = entries_to_catalog(
            parse_po(
                'msgid "item"\nmsgid_plural "items"\n'
                'msgstr[0] "{count} item"\nmsgstr[1] "{count} items"\n'
            )
        )
        context = make_resolution_context(primary=catalog)

        assert context.translate("item", count=1) == "1 item"
        assert context.translate("item", count=5) == "5 items"

    def test_literal_singular_form(self):
        """A form without a placeholder is returned as written."""
        catalog = entries_to_catalog(
            parse_po(
                'msgid "item"\nmsgid_plural "items"\n'
                'msgstr[0] "1 item"\nmsgstr[1] "{count} items"'
            )
        )
        context = make_resolution_context(primary=catalog)

        assert context.resolve("item", count=1).text == "1 item"
        assert resolve_key(catalog, None, "item", count=5) == "{count} items"
        assert context.translate("item", count=5) == "5 items"

    def test_translate_variables(self, en_catalog):
        context = make_resolution_context(primary=en_catalog)
        assert context.translate("ui.title", variables={"name": "Ada"}) == "Welcome, Ada"

    def test_explicit_count_variable_wins(self, en_catalog):
        context = make_resolution_context(primary=en_catalog)
        assert context.translate("item", count=2, variables={"count": "two"}) == "two items"

    def test_miss_is_not_interpolated_away(self, en_catalog):
        context = make_resolution_context(primary=en_catalog)
        assert context.translate("bank", context="unknown") == "bank@unknown"

    def test_uses_fallback(self, fr_catalog, en_catalog):
        context = make_resolution_context(primary=fr_catalog, fallback=en_catalog)

        assert context.locale == "fr-FR"
        assert context.fallback_locale == "en-US"
        assert context.translate("farewell") == "Goodbye"

    def test_plural_rule(self, fr_catalog, french_plural_rule):
        context = make_resolution_context(
            primary=fr_catalog, plural_rule=french_plural_rule
        )
        assert context.translate("item", count=0) == "0 article"

    def test_shared_catalog(self, en_catalog, fr_catalog):
        """Several contexts can share one catalog."""
        first = make_resolution_context(primary=en_catalog)
        second = make_resolution_context(primary=fr_catalog, fallback=en_catalog)

        assert first.translate("farewell") == second.translate("farewell")
