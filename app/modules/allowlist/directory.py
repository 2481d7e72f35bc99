"""Slack user directory adapter.

Exposes the three directory operations the resolution strategies need, each
returning normalized DirectoryRecord values:

- fetch_by_id: users.info (Tier 4), failures collapse to None
- fetch_by_email: users.lookupByEmail (Tier 3), failures collapse to None
- list_all: users.list (Tier 2), failures raise DirectoryListingError
"""

from typing import List, Optional, Protocol

from slack_sdk import WebClient

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult
from integrations.slack import users
from modules.allowlist.models import DirectoryRecord, record_from_member

logger = get_module_logger()


class DirectoryListingError(Exception):
    """The full user listing could not be completed.

    Attributes:
        result: Classified Slack failure, if one is available.
    """

    def __init__(self, message: str, result: Optional[OperationResult] = None):
        super().__init__(message)
        self.result = result


class UserDirectory(Protocol):
    """Directory operations consumed by the resolution strategies."""

    def fetch_by_id(self, user_id: str) -> Optional[DirectoryRecord]: ...

    def fetch_by_email(self, email: str) -> Optional[DirectoryRecord]: ...

    def list_all(self) -> List[DirectoryRecord]: ...


class SlackUserDirectory:
    """Directory operations backed by a Slack WebClient.

    Args:
        client: Configured slack_sdk.WebClient
        page_size: Members requested per users.list page
    """

    def __init__(
        self, client: WebClient, page_size: int = users.USERS_LIST_PAGE_SIZE
    ):
        self._client = client
        self._page_size = page_size

    def lookup_by_id(self, user_id: str) -> OperationResult:
        """users.info as an OperationResult carrying a DirectoryRecord."""
        return self._to_record(users.get_user_by_id(self._client, user_id))

    def lookup_by_email(self, email: str) -> OperationResult:
        """users.lookupByEmail as an OperationResult carrying a DirectoryRecord."""
        return self._to_record(users.get_user_by_email(self._client, email))

    def fetch_by_id(self, user_id: str) -> Optional[DirectoryRecord]:
        return self.lookup_by_id(user_id).data_or_none()

    def fetch_by_email(self, email: str) -> Optional[DirectoryRecord]:
        return self.lookup_by_email(email).data_or_none()

    def list_all(self) -> List[DirectoryRecord]:
        """Every usable member of the workspace, in listing order.

        Raises:
            DirectoryListingError: If any users.list page fails.
        """
        try:
            members = users.list_all_users(self._client, page_size=self._page_size)
        except users.SlackUserListError as e:
            raise DirectoryListingError(str(e), result=e.result) from e

        records = []
        for member in members:
            record = record_from_member(member)
            if record is not None:
                records.append(record)
        skipped = len(members) - len(records)
        if skipped:
            logger.debug("slack_members_skipped", skipped=skipped)
        return records

    @staticmethod
    def _to_record(result: OperationResult) -> OperationResult:
        if not result.is_success:
            return result
        record = record_from_member(result.data)
        if record is None:
            return OperationResult.not_found("Slack user is missing an id or handle")
        return OperationResult.success(data=record)
