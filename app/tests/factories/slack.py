"""Factory functions for Slack user test data."""

from typing import Any, Dict, List, Optional

from modules.allowlist.models import DirectoryRecord


def make_slack_member(
    user_id: str = "U00AAAAAAA0",
    name: str = "user0",
    display_name: Optional[str] = None,
    real_name: Optional[str] = None,
    email: Optional[str] = None,
    deleted: bool = False,
    is_bot: bool = False,
    is_app_user: bool = False,
) -> Dict[str, Any]:
    """Create a raw member payload as returned by users.list / users.info."""
    profile: Dict[str, Any] = {}
    if display_name is not None:
        profile["display_name"] = display_name
    if real_name is not None:
        profile["real_name"] = real_name
    if email is not None:
        profile["email"] = email
    return {
        "id": user_id,
        "name": name,
        "deleted": deleted,
        "is_bot": is_bot,
        "is_app_user": is_app_user,
        "profile": profile,
    }


def make_users_list_pages(
    members: List[Dict[str, Any]], page_size: int = 2
) -> List[Dict[str, Any]]:
    """Split members into users.list responses linked by next_cursor."""
    chunks = [
        members[start : start + page_size]
        for start in range(0, len(members), page_size)
    ] or [[]]
    pages = []
    for index, chunk in enumerate(chunks):
        next_cursor = f"cursor-{index + 1}" if index + 1 < len(chunks) else ""
        pages.append(
            {
                "ok": True,
                "members": chunk,
                "response_metadata": {"next_cursor": next_cursor},
            }
        )
    return pages


def make_directory_record(
    user_id: str = "U1",
    name: str = "user",
    display_name: Optional[str] = None,
    real_name: Optional[str] = None,
    email: Optional[str] = None,
    deleted: bool = False,
    is_bot: bool = False,
    is_app_user: bool = False,
) -> DirectoryRecord:
    """Create a normalized DirectoryRecord."""
    return DirectoryRecord(
        id=user_id,
        name=name,
        display_name=display_name,
        real_name=real_name,
        email=email,
        deleted=deleted,
        is_bot=is_bot,
        is_app_user=is_app_user,
    )
