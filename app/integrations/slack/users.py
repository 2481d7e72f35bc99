"""Slack User Modules.

Raw users.* Web API calls used by the allowlist resolver, one per rate-limit
tier:

- users.info (Tier 4): ``get_user_by_id``
- users.lookupByEmail (Tier 3): ``get_user_by_email``
- users.list (Tier 2): ``list_all_users``

Per-user lookups report failures as OperationResult values. The full listing
raises, since a partial listing would silently under-resolve every name.
"""

from typing import Any, Dict, List, Optional

from slack_sdk import WebClient

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, classify_slack_error

USERS_LIST_PAGE_SIZE = 200

logger = get_module_logger()


class SlackUserListError(Exception):
    """Raised when users.list pagination cannot be completed.

    Attributes:
        result: Classified failure, when the cause was a Slack API error.
    """

    def __init__(self, message: str, result: Optional[OperationResult] = None):
        super().__init__(message)
        self.result = result


def _user_from_response(response) -> Optional[Dict[str, Any]]:
    if not response.get("ok"):
        return None
    user = response.get("user")
    return user if isinstance(user, dict) and user else None


def get_user_by_id(client: WebClient, user_id: str) -> OperationResult:
    """Fetch a single member via users.info.

    Args:
        client (WebClient): The Slack client instance.
        user_id (str): Slack user ID, e.g. "U123ABC".

    Returns:
        OperationResult: SUCCESS with the raw member dict, NOT_FOUND, or a
        classified error. Never raises.
    """
    try:
        response = client.users_info(user=user_id)
    except Exception as e:
        result = classify_slack_error(e)
        logger.warning(
            "slack_user_lookup_failed",
            method="users.info",
            user_id=user_id,
            error_code=result.error_code,
            retryable=result.is_transient,
            error=str(e),
        )
        return result

    user = _user_from_response(response)
    if user is None:
        return OperationResult.not_found(f"No Slack user with id {user_id}")
    return OperationResult.success(data=user)


def get_user_by_email(client: WebClient, email: str) -> OperationResult:
    """Fetch a single member via users.lookupByEmail.

    Args:
        client (WebClient): The Slack client instance.
        email (str): Email address, already lower-cased.

    Returns:
        OperationResult: SUCCESS with the raw member dict, NOT_FOUND, or a
        classified error. Never raises.
    """
    try:
        response = client.users_lookupByEmail(email=email)
    except Exception as e:
        result = classify_slack_error(e)
        logger.warning(
            "slack_user_lookup_failed",
            method="users.lookupByEmail",
            error_code=result.error_code,
            retryable=result.is_transient,
            error=str(e),
        )
        return result

    user = _user_from_response(response)
    if user is None:
        return OperationResult.not_found("No Slack user with that email")
    return OperationResult.success(data=user)


def list_all_users(
    client: WebClient, page_size: int = USERS_LIST_PAGE_SIZE
) -> List[Dict[str, Any]]:
    """Get every member of the Slack workspace, deleted users and bots included.

    Follows ``response_metadata.next_cursor`` until Slack reports no further
    pages. There is no retry loop here; the client transport owns retries.

    Args:
        client (WebClient): The Slack client instance.
        page_size (int, optional): Members per page. Defaults to 200.

    Returns:
        list: Raw member dicts in the order Slack returned them.

    Raises:
        SlackUserListError: If any page fails.
    """
    members: List[Dict[str, Any]] = []
    cursor = None
    pages = 0
    while True:
        try:
            response = client.users_list(cursor=cursor, limit=page_size)
        except Exception as e:
            result = classify_slack_error(e)
            logger.error(
                "slack_users_list_failed",
                pages_fetched=pages,
                error_code=result.error_code,
                error=str(e),
            )
            raise SlackUserListError(
                f"users.list failed after {pages} page(s): {result.message}",
                result=result,
            ) from e

        if not response.get("ok"):
            error = response.get("error", "unknown_error")
            logger.error("slack_users_list_failed", pages_fetched=pages, error=error)
            raise SlackUserListError(f"users.list failed: {error}")

        pages += 1
        members.extend(response.get("members") or [])
        metadata = response.get("response_metadata") or {}
        cursor = (metadata.get("next_cursor") or "").strip()
        if not cursor:
            break

    logger.info("slack_users_listed", pages=pages, member_count=len(members))
    return members
