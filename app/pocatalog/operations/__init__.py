"""Operation result types and status enums."""

from pocatalog.operations.result import OperationResult
from pocatalog.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
