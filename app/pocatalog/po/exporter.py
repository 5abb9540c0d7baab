"""PO exporter.

Writes entries, or whole catalogs, back to PO text that parse_po reads
into the same entries.
"""

from typing import Iterable, List

from pocatalog.i18n.catalog import TranslationCatalog
from pocatalog.logging import get_module_logger
from pocatalog.operations import OperationResult
from pocatalog.po.conversion import catalog_to_entries
from pocatalog.po.errors import PoExportError
from pocatalog.po.models import PoEntry

logger = get_module_logger()

# Line breaks str.splitlines() honours that have no PO escape
_LINE_BREAKS = frozenset("\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029")

_ENCODINGS = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\t", "\\t"),
)


def _check_line_breaks(text: str, allow_newline: bool = True) -> None:
    breaks = _LINE_BREAKS if allow_newline else _LINE_BREAKS | {"\n"}
    if any(char in breaks for char in text):
        raise PoExportError(text)


def encode_po_string(text: str) -> str:
    """Quote and escape a string for PO output.

    Raises:
        PoExportError: If the text holds a line break other than ``\\n``.
    """
    _check_line_breaks(text)
    for raw, escaped in _ENCODINGS:
        text = text.replace(raw, escaped)
    return f'"{text}"'


def _comment_line(prefix: str, text: str) -> str:
    _check_line_breaks(text, allow_newline=False)
    return f"{prefix} {text}" if text else prefix


def _entry_lines(entry: PoEntry) -> List[str]:
    lines = [_comment_line("#", comment) for comment in entry.comments]
    lines.extend(_comment_line("#:", reference) for reference in entry.references)
    if entry.flags:
        lines.append(_comment_line("#,", ", ".join(entry.flags)))

    if entry.msgctxt is not None:
        lines.append(f"msgctxt {encode_po_string(entry.msgctxt)}")
    lines.append(f"msgid {encode_po_string(entry.msgid)}")

    if entry.is_plural:
        lines.append(f"msgid_plural {encode_po_string(entry.msgid_plural)}")
        forms = entry.msgstr_plural or (entry.msgstr,)
        for position, form in enumerate(forms):
            lines.append(f"msgstr[{position}] {encode_po_string(form)}")
    else:
        lines.append(f"msgstr {encode_po_string(entry.msgstr)}")
    return lines


def dump_entries(entries: Iterable[PoEntry]) -> str:
    """Serialize entries to PO text, one blank line between entries.

    Plural forms are written with consecutive indices starting at 0.

    Raises:
        PoExportError: If a value holds a line break PO cannot encode.
    """
    blocks = ["\n".join(_entry_lines(entry)) for entry in entries]
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"


def export_catalog(catalog: TranslationCatalog, combine_plurals: bool = False) -> str:
    """Serialize a catalog to PO text, one entry per key in key order.

    Args:
        catalog: Catalog to export.
        combine_plurals: Rebuild msgid/msgid_plural blocks from
            ``id.one``/``id.other``/``id.2``... keys where that is exact.

    Raises:
        PoExportError: If a key or value holds a line break PO cannot encode.
    """
    entries = catalog_to_entries(catalog, combine_plurals=combine_plurals)
    text = dump_entries(entries)
    logger.debug(
        "po_export_completed",
        locale=catalog.locale,
        key_count=len(catalog),
        entry_count=len(entries),
        combine_plurals=combine_plurals,
    )
    return text


def try_export_catalog(
    catalog: TranslationCatalog, combine_plurals: bool = False
) -> OperationResult:
    """export_catalog reporting failure as a value instead of raising."""
    try:
        text = export_catalog(catalog, combine_plurals=combine_plurals)
    except PoExportError as e:
        logger.warning("po_export_failed", locale=catalog.locale, error=str(e))
        return OperationResult.permanent_error(str(e), error_code=e.code)
    return OperationResult.success(data=text, message=f"exported {len(catalog)} keys")
