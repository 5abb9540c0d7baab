"""PO parse errors.

Every fatal parse error derives from PoParseError (a ValueError) and carries
a machine ``code`` plus the 1-based ``line_number`` where it was detected.
"""

from typing import Optional


class PoParseError(ValueError):
    """Base class for PO parse failures."""

    code = "po_parse_error"

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class MissingMsgidError(PoParseError):
    """Entry closed without a msgid.

    Raised and handled inside the parser only; such entries are dropped.
    """

    code = "missing_msgid"

    def __init__(self, line_number: Optional[int] = None):
        super().__init__("entry has no msgid", line_number)


class MissingMsgstrError(PoParseError):
    """Non-plural entry closed without a msgstr."""

    code = "missing_msgstr"

    def __init__(self, msgid: str, line_number: Optional[int] = None):
        super().__init__(f"entry {msgid!r} has no msgstr", line_number)
        self.msgid = msgid


class InvalidEscapeSequenceError(PoParseError):
    """Backslash escape other than \\", \\\\, \\n or \\t."""

    code = "invalid_escape_sequence"

    def __init__(self, token: str, line_number: Optional[int] = None):
        super().__init__(f"invalid escape sequence {token!r}", line_number)
        self.token = token


class InvalidFormatError(PoParseError):
    """Line that does not fit the PO grammar."""

    code = "invalid_format"

    def __init__(self, reason: str, line_number: Optional[int] = None):
        super().__init__(reason, line_number)
        self.reason = reason


class MissingMsgidPluralError(PoParseError):
    """msgid_plural declared before any msgid."""

    code = "missing_msgid_plural"

    def __init__(self, line_number: Optional[int] = None):
        super().__init__("msgid_plural without a preceding msgid", line_number)


class MissingPluralFormZeroError(PoParseError):
    """Plural entry without a msgstr[0] form."""

    code = "missing_plural_form_zero"

    def __init__(self, msgid: str, line_number: Optional[int] = None):
        super().__init__(f"plural entry {msgid!r} has no msgstr[0]", line_number)
        self.msgid = msgid


class PoExportError(ValueError):
    """Value that cannot be written as a single-line PO string."""

    code = "unrepresentable_value"

    def __init__(self, text: str):
        super().__init__(f"value contains a line break PO strings cannot encode: {text!r}")
        self.text = text
