"""gettext PO import/export.

- parser: parse_po / try_parse_po
- exporter: dump_entries / export_catalog
- conversion: entries_to_catalog / catalog_to_entries
"""

from pocatalog.po.conversion import (
    catalog_to_entries,
    entries_to_catalog,
    entry_pairs,
    split_context,
)
from pocatalog.po.errors import (
    InvalidEscapeSequenceError,
    InvalidFormatError,
    MissingMsgidError,
    MissingMsgidPluralError,
    MissingMsgstrError,
    MissingPluralFormZeroError,
    PoExportError,
    PoParseError,
)
from pocatalog.po.exporter import (
    dump_entries,
    encode_po_string,
    export_catalog,
    try_export_catalog,
)
from pocatalog.po.models import PoEntry
from pocatalog.po.parser import decode_po_string, parse_po, try_parse_po

__all__ = [
    "PoEntry",
    "parse_po",
    "try_parse_po",
    "decode_po_string",
    "dump_entries",
    "encode_po_string",
    "export_catalog",
    "try_export_catalog",
    "entries_to_catalog",
    "catalog_to_entries",
    "entry_pairs",
    "split_context",
    "PoParseError",
    "PoExportError",
    "MissingMsgidError",
    "MissingMsgstrError",
    "InvalidEscapeSequenceError",
    "InvalidFormatError",
    "MissingMsgidPluralError",
    "MissingPluralFormZeroError",
]
