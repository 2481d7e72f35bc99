"""OperationResult: outcome of a single Slack directory call as a value.

Per-user lookups never raise; they hand one of these back and the caller
decides whether a failure simply means "no record".
"""

from dataclasses import dataclass
from typing import Any, Optional

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Status, payload and error details of one call.

    Attributes:
        status: Outcome category
        message: Short description for logs
        data: Payload of a successful call (a member dict or DirectoryRecord)
        error_code: Machine code such as ``RATE_LIMITED`` or ``SLACK_USER_NOT_FOUND``
        retry_after: Seconds Slack asked us to wait, for rate limits
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    retry_after: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @property
    def is_transient(self) -> bool:
        """True when repeating the same call later could succeed."""
        return self.status == OperationStatus.TRANSIENT_ERROR

    def data_or_none(self) -> Optional[Any]:
        """The payload when successful; None for every failure variant."""
        return self.data if self.is_success else None

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Build a failure result of any status.

        ``data`` is kept for diagnostics only; data_or_none() still returns
        None for it.
        """
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            retry_after=retry_after,
            data=data,
        )

    @classmethod
    def transient_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
    ) -> "OperationResult":
        """Timeouts, dropped connections, 5xx and rate limits."""
        return cls.error(
            OperationStatus.TRANSIENT_ERROR, message, error_code, retry_after
        )

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code)

    @classmethod
    def unauthorized(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Bad, revoked or under-scoped token."""
        return cls.error(OperationStatus.UNAUTHORIZED, message, error_code)

    @classmethod
    def not_found(
        cls, message: str, error_code: Optional[str] = "NOT_FOUND"
    ) -> "OperationResult":
        return cls.error(OperationStatus.NOT_FOUND, message, error_code)
