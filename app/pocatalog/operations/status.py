"""Operation status enumeration."""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        PERMANENT_ERROR: Input cannot be processed (malformed PO text, unencodable values)
    """

    SUCCESS = "success"
    PERMANENT_ERROR = "permanent_error"
