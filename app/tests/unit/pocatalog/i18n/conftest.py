"""Feature-level fixtures for i18n tests.

Provides temporary translation directories in both supported formats.
"""

import pytest
import yaml

from pocatalog.i18n import POTranslationLoader, YAMLTranslationLoader
from pocatalog.i18n.models import PluralCategory
from tests.factories.po import make_po_text


@pytest.fixture
def po_translations_dir(tmp_path):
    """Directory with PO files for two locales.

    - messages.en-US.po
    - extra.en-US.po (sorts first; messages.en-US.po wins on collisions)
    - messages.fr-FR.po
    """
    (tmp_path / "messages.en-US.po").write_text(
        make_po_text(
            'msgid "greeting"\nmsgstr "Hello"',
            'msgid "farewell"\nmsgstr "Goodbye"',
            'msgctxt "river"\nmsgid "bank"\nmsgstr "river bank"',
            'msgid "item"\nmsgid_plural "items"\n'
            'msgstr[0] "{count} item"\nmsgstr[1] "{count} items"',
        ),
        encoding="utf-8",
    )
    (tmp_path / "extra.en-US.po").write_text(
        make_po_text(
            'msgid "greeting"\nmsgstr "Hi"',
            'msgid "ui.title"\nmsgstr "Welcome, {name}"',
        ),
        encoding="utf-8",
    )
    (tmp_path / "messages.fr-FR.po").write_text(
        make_po_text(
            'msgid "greeting"\nmsgstr "Bonjour"',
            'msgid "item"\nmsgid_plural "items"\n'
            'msgstr[0] "{count} article"\nmsgstr[1] "{count} articles"',
        ),
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def yaml_translations_dir(tmp_path):
    """Directory with nested YAML files for two locales."""
    en_us = {
        "greeting": "Hello",
        "ui": {"button": {"save": "Save", "cancel": "Cancel"}},
        "item": {"one": "{count} item", "other": "{count} items"},
    }
    fr_fr = {
        "greeting": "Bonjour",
        "ui": {"button": {"save": "Enregistrer"}},
    }
    with open(tmp_path / "messages.en-US.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_us, f, allow_unicode=True)
    with open(tmp_path / "messages.fr-FR.yml", "w", encoding="utf-8") as f:
        yaml.dump(fr_fr, f, allow_unicode=True)
    return tmp_path


@pytest.fixture
def po_loader(po_translations_dir):
    """POTranslationLoader without caching."""
    return POTranslationLoader(po_translations_dir, use_cache=False)


@pytest.fixture
def po_loader_with_cache(po_translations_dir):
    """POTranslationLoader with caching enabled."""
    return POTranslationLoader(po_translations_dir, use_cache=True)


@pytest.fixture
def yaml_loader(yaml_translations_dir):
    """YAMLTranslationLoader without caching."""
    return YAMLTranslationLoader(yaml_translations_dir, use_cache=False)


@pytest.fixture
def french_plural_rule():
    """French treats 0 and 1 as singular."""

    def rule(count):
        return PluralCategory.ONE if count in (0, 1) else PluralCategory.OTHER

    return rule
