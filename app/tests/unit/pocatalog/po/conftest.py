"""Feature-level fixtures for PO parsing and export tests."""

import pytest

from tests.factories.po import make_po_text


@pytest.fixture
def simple_po_text():
    """Two plain entries, one with context."""
    return make_po_text(
        'msgid "greeting"\nmsgstr "Hello"',
        'msgctxt "river"\nmsgid "bank"\nmsgstr "river bank"',
    )


@pytest.fixture
def plural_po_text():
    """A plural entry with two forms."""
    return make_po_text(
        'msgid "item"\n'
        'msgid_plural "items"\n'
        'msgstr[0] "{count} item"\n'
        'msgstr[1] "{count} items"'
    )


@pytest.fixture
def annotated_po_text():
    """An entry carrying translator comments, references and flags."""
    return make_po_text(
        "# Shown on the landing page\n"
        "#: src/app.py:10 src/app.py:20\n"
        "#, fuzzy, python-format\n"
        'msgid "welcome"\n'
        'msgstr "Welcome, {name}"'
    )


@pytest.fixture
def escaped_token():
    """A quoted PO string exercising every supported escape."""
    return r'"Line one\nLine two\tTabbed\"Quoted\\"'
