import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `pocatalog.po`) works during pytest collection regardless of
# the directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from pocatalog.i18n import TranslationCatalog
from tests.factories.i18n import make_translation_catalog


@pytest.fixture
def empty_catalog():
    """An empty, untagged catalog."""
    return TranslationCatalog()


@pytest.fixture
def en_catalog():
    """English catalog with context, plural and nested keys."""
    return make_translation_catalog(locale="en-US")


@pytest.fixture
def fr_catalog():
    """French catalog missing some of the English keys."""
    return make_translation_catalog(
        locale="fr-FR",
        messages={
            "greeting": "Bonjour",
            "bank@river": "rive",
            "item.one": "{count} article",
            "item.other": "{count} articles",
        },
    )
