"""PO entry model."""

from dataclasses import dataclass
from typing import Optional, Tuple

FUZZY_FLAG = "fuzzy"


@dataclass(frozen=True)
class PoEntry:
    """One logical translation unit parsed from PO text.

    Attributes:
        msgid: Source identifier.
        msgstr: Singular translation, or plural form 0 for plural entries.
        msgid_plural: Plural source identifier; set only for plural entries.
        msgstr_plural: Plural forms ordered by declared index, empty for
            non-plural entries. Positions follow the sorted declared indices,
            so gaps in the declared indices are not padded.
        msgctxt: Disambiguating context, or None.
        comments: Translator comments (``#``) in file order.
        references: Source references (``#:``), one string per line.
        flags: Flags (``#,``) split on commas, in file order.
    """

    msgid: str
    msgstr: str = ""
    msgid_plural: Optional[str] = None
    msgstr_plural: Tuple[str, ...] = ()
    msgctxt: Optional[str] = None
    comments: Tuple[str, ...] = ()
    references: Tuple[str, ...] = ()
    flags: Tuple[str, ...] = ()

    @property
    def is_plural(self) -> bool:
        return self.msgid_plural is not None

    @property
    def is_fuzzy(self) -> bool:
        return FUZZY_FLAG in self.flags
