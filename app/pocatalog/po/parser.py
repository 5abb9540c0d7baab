"""Line-oriented gettext PO parser.

The parser is a single pass over the input lines. The entry under
construction is an immutable ``_EntryState`` value; ``_step`` takes the state
and one line and returns the next state plus the entry closed by that line,
if any. Nothing outside the current entry is buffered.

Supported grammar::

    #  <translator comment>
    #: <source reference>
    #, <comma,separated,flags>
    msgctxt "<context>"
    msgid "<id>" ["<continuation>"]*
    msgid_plural "<plural id>" ["<continuation>"]*
    msgstr "<value>" ["<continuation>"]*
    msgstr[<n>] "<value>" ["<continuation>"]*

Entries are separated by blank lines.
"""

import re
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from pocatalog.logging import get_module_logger
from pocatalog.operations import OperationResult
from pocatalog.po.errors import (
    InvalidEscapeSequenceError,
    InvalidFormatError,
    MissingMsgidError,
    MissingMsgidPluralError,
    MissingMsgstrError,
    MissingPluralFormZeroError,
    PoParseError,
)
from pocatalog.po.models import PoEntry

logger = get_module_logger()

ESCAPES = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "t": "\t",
}

KEYWORDS = ("msgctxt", "msgid", "msgid_plural", "msgstr")

_KEYWORD_LINE = re.compile(
    r"^(?P<keyword>[A-Za-z_]+)(?:\[(?P<index>[^\]]*)\])?\s*(?P<value>.*)$"
)
_PLURAL_INDEX = re.compile(r"^[0-9]+$")

# Fields a continuation line can extend
_MSGCTXT = "msgctxt"
_MSGID = "msgid"
_MSGID_PLURAL = "msgid_plural"
_MSGSTR = "msgstr"
_MSGSTR_INDEXED = "msgstr[]"
_DISCARD = "discard"


def decode_po_string(token: str) -> str:
    """Decode one double-quoted PO string.

    Args:
        token: The quoted token, delimiters included (e.g. ``"a\\tb"``).

    Returns:
        The unescaped content.

    Raises:
        InvalidFormatError: If the delimiters are missing, the string is
            unterminated, or it holds an unescaped quote.
        InvalidEscapeSequenceError: For any escape other than
            ``\\"``, ``\\\\``, ``\\n`` and ``\\t``.
    """
    if len(token) < 2 or not token.startswith('"') or not token.endswith('"'):
        raise InvalidFormatError(f"expected a double-quoted string, got {token!r}")

    body = token[1:-1]
    chars: List[str] = []
    index = 0
    while index < len(body):
        char = body[index]
        if char == "\\":
            if index + 1 >= len(body):
                raise InvalidFormatError(f"unterminated quoted string {token!r}")
            escaped = body[index + 1]
            if escaped not in ESCAPES:
                raise InvalidEscapeSequenceError(f"\\{escaped}")
            chars.append(ESCAPES[escaped])
            index += 2
            continue
        if char == '"':
            raise InvalidFormatError(f"unescaped quote in {token!r}")
        chars.append(char)
        index += 1
    return "".join(chars)


@dataclass(frozen=True)
class _EntryState:
    """Fields of the entry under construction."""

    msgctxt: Optional[str] = None
    msgid: Optional[str] = None
    msgid_plural: Optional[str] = None
    msgstr: Optional[str] = None
    indexed: Tuple[Tuple[int, str], ...] = ()
    comments: Tuple[str, ...] = ()
    references: Tuple[str, ...] = ()
    flags: Tuple[str, ...] = ()
    last_field: Optional[str] = None

    @property
    def has_message(self) -> bool:
        """True once a msgid, msgid_plural or any msgstr has been seen."""
        return (
            self.msgid is not None
            or self.msgid_plural is not None
            or self.msgstr is not None
            or bool(self.indexed)
        )

    @property
    def is_empty(self) -> bool:
        return (
            not self.has_message
            and self.msgctxt is None
            and not self.comments
            and not self.references
            and not self.flags
        )


_EMPTY_STATE = _EntryState()


def _finalize(state: _EntryState, line_number: int) -> PoEntry:
    """Turn a closed entry state into a PoEntry.

    Raises:
        MissingMsgidError: If no msgid was seen (callers drop the entry).
        MissingMsgstrError: If a non-plural entry has no msgstr.
        MissingPluralFormZeroError: If a plural entry has no msgstr[0].
    """
    if state.msgid is None:
        raise MissingMsgidError(line_number)

    if state.msgid_plural is None:
        if state.msgstr is None:
            raise MissingMsgstrError(state.msgid, line_number)
        return PoEntry(
            msgid=state.msgid,
            msgstr=state.msgstr,
            msgctxt=state.msgctxt,
            comments=state.comments,
            references=state.references,
            flags=state.flags,
        )

    forms = {}
    for index, text in state.indexed:
        forms[index] = text
    if 0 not in forms:
        raise MissingPluralFormZeroError(state.msgid, line_number)

    plural = tuple(forms[index] for index in sorted(forms))
    return PoEntry(
        msgid=state.msgid,
        msgstr=plural[0],
        msgid_plural=state.msgid_plural,
        msgstr_plural=plural,
        msgctxt=state.msgctxt,
        comments=state.comments,
        references=state.references,
        flags=state.flags,
    )


def _close(state: _EntryState, line_number: int) -> Optional[PoEntry]:
    """Finalize the current entry, dropping it when it has no msgid."""
    if state.is_empty:
        return None
    try:
        return _finalize(state, line_number)
    except MissingMsgidError:
        logger.debug(
            "po_entry_skipped",
            reason=MissingMsgidError.code,
            line=line_number,
            has_msgstr=state.msgstr is not None,
        )
        return None


def _continue(state: _EntryState, text: str) -> _EntryState:
    field = state.last_field
    if field is None:
        raise InvalidFormatError("continuation string without a preceding keyword")
    if field == _DISCARD:
        return state
    if field == _MSGSTR_INDEXED:
        index, current = state.indexed[-1]
        return replace(state, indexed=state.indexed[:-1] + ((index, current + text),))
    return replace(state, **{field: getattr(state, field) + text})


def _drop_one_space(text: str) -> str:
    return text[1:] if text.startswith(" ") else text


def _comment(state: _EntryState, line: str) -> _EntryState:
    """Fold a comment line; ``line`` keeps its trailing whitespace."""
    if line.startswith("#:"):
        reference = _drop_one_space(line[2:])
        if not reference:
            return replace(state, last_field=None)
        return replace(
            state, references=state.references + (reference,), last_field=None
        )
    if line.startswith("#,"):
        flags = tuple(flag.strip() for flag in line[2:].split(",") if flag.strip())
        return replace(state, flags=state.flags + flags, last_field=None)

    text = _drop_one_space(line[1:])
    return replace(state, comments=state.comments + (text,), last_field=None)


def _keyword(
    state: _EntryState, line: str, line_number: int
) -> Tuple[_EntryState, Optional[PoEntry]]:
    match = _KEYWORD_LINE.match(line)
    if match is None:
        raise InvalidFormatError(f"unrecognized line {line!r}")

    keyword = match.group("keyword")
    index = match.group("index")
    value = match.group("value")

    if keyword not in KEYWORDS:
        raise InvalidFormatError(f"unknown keyword {keyword!r}")
    if index is not None and keyword != "msgstr":
        raise InvalidFormatError(f"{keyword} does not take a plural index")
    if not value:
        raise InvalidFormatError(f"{keyword} without a quoted string")

    text = decode_po_string(value)
    closed: Optional[PoEntry] = None

    if keyword == "msgctxt":
        if state.has_message:
            closed = _close(state, line_number)
            state = _EMPTY_STATE
        return replace(state, msgctxt=text, last_field=_MSGCTXT), closed

    if keyword == "msgid":
        if state.has_message:
            closed = _close(state, line_number)
            state = _EMPTY_STATE
        return replace(state, msgid=text, last_field=_MSGID), closed

    if keyword == "msgid_plural":
        if state.msgid is None:
            raise MissingMsgidPluralError()
        return replace(state, msgid_plural=text, last_field=_MSGID_PLURAL), None

    if index is None:
        return replace(state, msgstr=text, last_field=_MSGSTR), None

    if not _PLURAL_INDEX.match(index):
        logger.debug("po_plural_index_skipped", index=index, line=line_number)
        return replace(state, last_field=_DISCARD), None

    return (
        replace(
            state,
            indexed=state.indexed + ((int(index), text),),
            last_field=_MSGSTR_INDEXED,
        ),
        None,
    )


def _step(
    state: _EntryState, line_number: int, raw_line: str
) -> Tuple[_EntryState, Optional[PoEntry]]:
    """Consume one line; return the next state and any entry it closed."""
    line = raw_line.strip()
    try:
        if not line:
            return _EMPTY_STATE, _close(state, line_number)

        if line.startswith("#"):
            closed = None
            if state.has_message:
                closed = _close(state, line_number)
                state = _EMPTY_STATE
            return _comment(state, raw_line.lstrip()), closed

        if line.startswith('"'):
            return _continue(state, decode_po_string(line)), None

        return _keyword(state, line, line_number)
    except PoParseError as e:
        if e.line_number is None:
            e.line_number = line_number
        raise


def parse_po(text: str) -> List[PoEntry]:
    """Parse PO text into entries, in source order.

    Entries without a msgid are dropped silently. Any other grammar
    violation aborts the whole parse.

    Args:
        text: Complete PO file content.

    Returns:
        List of PoEntry.

    Raises:
        PoParseError: Subclass describing the first fatal error.
    """
    if text.startswith("\ufeff"):
        text = text[1:]

    entries: List[PoEntry] = []
    state = _EMPTY_STATE
    line_number = 0
    for line_number, line in enumerate(text.splitlines(), start=1):
        state, closed = _step(state, line_number, line)
        if closed is not None:
            entries.append(closed)

    closed = _close(state, line_number)
    if closed is not None:
        entries.append(closed)

    logger.debug("po_parse_completed", entry_count=len(entries), line_count=line_number)
    return entries


def try_parse_po(text: str) -> OperationResult:
    """Parse PO text, reporting failure as a value instead of raising.

    Returns:
        OperationResult.success with the entry list as ``data``, or
        OperationResult.permanent_error with the error's code.
    """
    try:
        entries = parse_po(text)
    except PoParseError as e:
        logger.warning(
            "po_parse_failed",
            error_code=e.code,
            line=e.line_number,
            error=e.message,
        )
        return OperationResult.permanent_error(str(e), error_code=e.code)
    return OperationResult.success(
        data=entries, message=f"parsed {len(entries)} entries"
    )
