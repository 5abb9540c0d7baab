"""Conversion between PO entries and translation catalogs.

entries_to_catalog maps each entry onto flat keys:

- non-plural: ``msgid`` or ``msgid@msgctxt``
- plural: one key per form, ``msgid.<category>[@msgctxt]`` where position 0
  is "one", position 1 is "other" and later positions are their number

catalog_to_entries goes the other way for export.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from pocatalog.i18n.catalog import TranslationCatalog
from pocatalog.i18n.models import CONTEXT_SEPARATOR, TranslationKey
from pocatalog.i18n.plurals import category_for_position, position_for_category
from pocatalog.po.models import PoEntry


def entry_pairs(entry: PoEntry) -> List[Tuple[str, str]]:
    """Flat (key, value) pairs contributed by one entry."""
    if not entry.is_plural:
        key = TranslationKey(id=entry.msgid, context=entry.msgctxt)
        return [(key.flat, entry.msgstr)]

    return [
        (
            TranslationKey(
                id=entry.msgid,
                context=entry.msgctxt,
                category=category_for_position(position),
            ).flat,
            form,
        )
        for position, form in enumerate(entry.msgstr_plural)
    ]


def entries_to_catalog(
    entries: Iterable[PoEntry],
    catalog: Optional[TranslationCatalog] = None,
    locale: Optional[str] = None,
) -> TranslationCatalog:
    """Insert every entry into a catalog; later colliding keys win.

    Args:
        entries: Parsed PO entries.
        catalog: Catalog to extend (a new one is returned either way).
        locale: Locale tag for a newly created catalog.

    Returns:
        TranslationCatalog holding the entries.
    """
    result = catalog if catalog is not None else TranslationCatalog(locale=locale)
    for entry in entries:
        result = result.update(entry_pairs(entry))
    return result


def split_context(flat_key: str) -> Tuple[str, Optional[str]]:
    """Split ``id@context`` at the last ``@``; no ``@`` means no context."""
    msgid, separator, context = flat_key.rpartition(CONTEXT_SEPARATOR)
    if not separator:
        return flat_key, None
    return msgid, context


def _plural_groups(
    catalog: TranslationCatalog,
) -> Dict[Tuple[str, Optional[str]], Dict[int, str]]:
    """Plural blocks that map back to a msgid/msgid_plural entry exactly.

    A group needs ``one`` and ``other``; numbered forms join it only while
    they continue 2, 3, ... without gaps. Anything else stays a flat entry.
    """
    candidates: Dict[Tuple[str, Optional[str]], Dict[int, str]] = defaultdict(dict)
    for flat_key, _ in catalog.items():
        key = TranslationKey.parse(flat_key)
        if key.category is None:
            continue
        position = position_for_category(key.category)
        if position is None:
            continue
        candidates[(key.id, key.context)][position] = flat_key

    groups = {}
    for group, positions in candidates.items():
        if 0 not in positions or 1 not in positions:
            continue
        members = {}
        position = 0
        while position in positions:
            members[position] = positions[position]
            position += 1
        groups[group] = members
    return groups


def catalog_to_entries(
    catalog: TranslationCatalog, combine_plurals: bool = False
) -> List[PoEntry]:
    """Entries for exporting a catalog, ordered by key.

    By default every key becomes its own entry, with ``id@context`` split
    into msgid and msgctxt. With ``combine_plurals`` the groups found by
    _plural_groups are emitted as single plural entries instead.
    """
    groups = _plural_groups(catalog) if combine_plurals else {}
    grouped_keys = {
        flat_key: group
        for group, members in groups.items()
        for flat_key in members.values()
    }

    entries: List[PoEntry] = []
    emitted = set()
    for flat_key, value in catalog.items():
        group = grouped_keys.get(flat_key)
        if group is None:
            msgid, context = split_context(flat_key)
            entries.append(PoEntry(msgid=msgid, msgstr=value, msgctxt=context))
            continue
        if group in emitted:
            continue
        emitted.add(group)
        members = groups[group]
        forms = tuple(catalog.lookup(members[position]) for position in sorted(members))
        msgid, context = group
        entries.append(
            PoEntry(
                msgid=msgid,
                msgstr=forms[0],
                msgid_plural=msgid,
                msgstr_plural=forms,
                msgctxt=context,
            )
        )
    return entries
