"""Operation result types and status enums.

Standardized result types for directory operations, including the status
enum, the result dataclass and the Slack error classifier.
"""

from infrastructure.operations.classifiers import classify_slack_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_slack_error",
]
