"""Immutable, prefix-queryable translation catalog.

Keys are split on ``.`` into segments and stored in a persistent trie.
Every insert copies only the nodes along the key's path, so catalogs share
structure and are never mutated once built.

The children of a trie node live in a persistent hash trie of 32-way
branches, so adding a segment under a node with many children copies a
few small branches rather than the node's whole child table. Flat keys
such as gettext msgids all sit under the root, and inserting one stays
proportional to the key length.

A prefix query for ``p`` returns keys equal to ``p`` or starting with
``p + "."``, which is exactly the set of keys whose segment path begins
with ``p``'s segment path.
"""

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from pocatalog.i18n.models import PLURAL_SEPARATOR

_BITS = 5
_WIDTH = 1 << _BITS
_MASK = _WIDTH - 1
_HASH_BITS = sys.hash_info.width


class _Branch:
    """Interior node of a child map: one slot per 5 bits of segment hash."""

    __slots__ = ("slots",)

    def __init__(self, slots: tuple):
        self.slots = slots


class _Bucket:
    """Segments whose hashes are equal in every bit."""

    __slots__ = ("pairs",)

    def __init__(self, pairs: tuple):
        self.pairs = pairs


# None is the empty map and a (segment, node) tuple is a single child.
_ChildMap = Union[None, Tuple[str, "_TrieNode"], _Branch, _Bucket]


def _child_get(entry: _ChildMap, segment: str) -> Optional["_TrieNode"]:
    hashed = hash(segment)
    shift = 0
    while isinstance(entry, _Branch):
        entry = entry.slots[(hashed >> shift) & _MASK]
        shift += _BITS
    if entry is None:
        return None
    if isinstance(entry, _Bucket):
        for key, child in entry.pairs:
            if key == segment:
                return child
        return None
    key, child = entry
    return child if key == segment else None


def _child_set(
    entry: _ChildMap, segment: str, hashed: int, shift: int, node: "_TrieNode"
) -> _ChildMap:
    if entry is None:
        return (segment, node)
    if isinstance(entry, _Branch):
        index = (hashed >> shift) & _MASK
        slots = list(entry.slots)
        slots[index] = _child_set(slots[index], segment, hashed, shift + _BITS, node)
        return _Branch(tuple(slots))
    if isinstance(entry, _Bucket):
        pairs = tuple(pair for pair in entry.pairs if pair[0] != segment)
        return _Bucket(pairs + ((segment, node),))
    if entry[0] == segment:
        return (segment, node)
    if shift >= _HASH_BITS:
        return _Bucket((entry, (segment, node)))
    slots = [None] * _WIDTH
    slots[(hash(entry[0]) >> shift) & _MASK] = entry
    return _child_set(_Branch(tuple(slots)), segment, hashed, shift, node)


def _child_items(entry: _ChildMap) -> Iterator[Tuple[str, "_TrieNode"]]:
    if entry is None:
        return
    if isinstance(entry, _Branch):
        for slot in entry.slots:
            yield from _child_items(slot)
    elif isinstance(entry, _Bucket):
        yield from entry.pairs
    else:
        yield entry


@dataclass(frozen=True)
class _TrieNode:
    """Trie node; ``children`` is a persistent child map."""

    value: Optional[str] = None
    children: _ChildMap = None


_EMPTY_NODE = _TrieNode()


def _split(key: str) -> List[str]:
    return key.split(PLURAL_SEPARATOR)


def _insert(node: _TrieNode, segments: List[str], index: int, value: str) -> _TrieNode:
    if index == len(segments):
        return _TrieNode(value=value, children=node.children)
    segment = segments[index]
    child = _child_get(node.children, segment) or _EMPTY_NODE
    updated = _insert(child, segments, index + 1, value)
    children = _child_set(node.children, segment, hash(segment), 0, updated)
    return _TrieNode(value=node.value, children=children)


def _walk(node: _TrieNode, key: str) -> Iterator[Tuple[str, str]]:
    if node.value is not None:
        yield key, node.value
    for segment, child in _child_items(node.children):
        yield from _walk(child, f"{key}{PLURAL_SEPARATOR}{segment}")


class TranslationCatalog:
    """Mapping from flat key to translated string with value semantics.

    Mutating operations (insert, update, merge) return a new catalog and
    leave the receiver untouched, so a catalog may be shared freely between
    translators and threads.

    Attributes:
        locale: Opaque locale tag this catalog belongs to, or None.
    """

    __slots__ = ("_root", "_size", "_locale")

    def __init__(self, locale: Optional[str] = None):
        self._root = _EMPTY_NODE
        self._size = 0
        self._locale = locale

    @classmethod
    def _build(
        cls, root: _TrieNode, size: int, locale: Optional[str]
    ) -> "TranslationCatalog":
        catalog = cls.__new__(cls)
        catalog._root = root
        catalog._size = size
        catalog._locale = locale
        return catalog

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[Tuple[str, str]],
        locale: Optional[str] = None,
    ) -> "TranslationCatalog":
        """Build a catalog from (key, value) pairs; later pairs win."""
        return cls(locale=locale).update(pairs)

    @property
    def locale(self) -> Optional[str]:
        return self._locale

    def with_locale(self, locale: Optional[str]) -> "TranslationCatalog":
        """Return the same entries tagged with another locale."""
        return self._build(self._root, self._size, locale)

    def insert(self, key: str, value: str) -> "TranslationCatalog":
        """Return a new catalog with key set to value.

        Inserting an existing key overwrites its value.

        Raises:
            TypeError: If key or value is not a string.
        """
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError(
                f"Catalog keys and values must be strings: {key!r} -> {value!r}"
            )
        size = self._size if key in self else self._size + 1
        root = _insert(self._root, _split(key), 0, value)
        return self._build(root, size, self._locale)

    def update(self, pairs: Iterable[Tuple[str, str]]) -> "TranslationCatalog":
        """Return a new catalog with every pair inserted in order."""
        catalog = self
        for key, value in pairs:
            catalog = catalog.insert(key, value)
        return catalog

    def merge(self, other: "TranslationCatalog") -> "TranslationCatalog":
        """Return a new catalog holding both; entries of ``other`` win."""
        return self.update(other.items())

    def _find(self, key: str) -> Optional[_TrieNode]:
        node = self._root
        for segment in _split(key):
            child = _child_get(node.children, segment)
            if child is None:
                return None
            node = child
        return node

    def lookup(self, key: str) -> Optional[str]:
        """Exact-match lookup; None when the key is absent."""
        node = self._find(key)
        return node.value if node is not None else None

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self.lookup(key)
        return default if value is None else value

    def prefix_query(self, prefix: str) -> List[Tuple[str, str]]:
        """All (key, value) pairs whose key is ``prefix`` or starts with ``prefix.``.

        Returns:
            Pairs sorted ascending by key.
        """
        node = self._find(prefix)
        if node is None:
            return []
        return sorted(_walk(node, prefix))

    def keys_with_prefix(self, prefix: str) -> List[str]:
        """Keys matched by prefix_query, sorted ascending."""
        return [key for key, _ in self.prefix_query(prefix)]

    def namespace(self, prefix: str) -> "TranslationCatalog":
        """Sub-catalog holding only the entries under ``prefix``."""
        return TranslationCatalog.from_pairs(self.prefix_query(prefix), self._locale)

    def items(self) -> List[Tuple[str, str]]:
        """Every (key, value) pair, sorted ascending by key."""
        pairs = []
        for segment, child in _child_items(self._root.children):
            pairs.extend(_walk(child, segment))
        return sorted(pairs)

    def keys(self) -> List[str]:
        return [key for key, _ in self.items()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TranslationCatalog):
            return NotImplemented
        return self._locale == other._locale and self.items() == other.items()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TranslationCatalog(locale={self._locale!r}, size={self._size})"
