"""Tests for modules.allowlist.directory."""

import pytest
from slack_sdk.errors import SlackApiError

from infrastructure.operations import OperationStatus
from modules.allowlist.directory import DirectoryListingError, SlackUserDirectory
from modules.allowlist.models import DirectoryRecord


@pytest.mark.unit
class TestFetchById:
    def test_returns_record(self, slack_client, slack_member):
        slack_client.users_info.return_value = {
            "ok": True,
            "user": slack_member(user_id="U1", name="jane", email="Jane@X.com"),
        }

        record = SlackUserDirectory(slack_client).fetch_by_id("U1")

        assert record == DirectoryRecord(id="U1", name="jane", email="jane@x.com")
        slack_client.users_info.assert_called_once_with(user="U1")

    def test_api_error_is_no_record(self, slack_client):
        slack_client.users_info.side_effect = SlackApiError(
            message="user_not_found",
            response={"ok": False, "error": "user_not_found"},
        )
        directory = SlackUserDirectory(slack_client)

        assert directory.fetch_by_id("U404") is None
        assert directory.lookup_by_id("U404").status == OperationStatus.NOT_FOUND

    def test_network_error_is_no_record(self, slack_client):
        slack_client.users_info.side_effect = ConnectionError("reset")

        assert SlackUserDirectory(slack_client).fetch_by_id("U1") is None

    def test_member_without_handle_is_no_record(self, slack_client):
        slack_client.users_info.return_value = {"ok": True, "user": {"id": "U1"}}
        directory = SlackUserDirectory(slack_client)

        assert directory.fetch_by_id("U1") is None
        assert directory.lookup_by_id("U1").status == OperationStatus.NOT_FOUND


@pytest.mark.unit
class TestFetchByEmail:
    def test_returns_record(self, slack_client, slack_member):
        slack_client.users_lookupByEmail.return_value = {
            "ok": True,
            "user": slack_member(user_id="U2", name="bob", email="bob@x.com"),
        }

        record = SlackUserDirectory(slack_client).fetch_by_email("bob@x.com")

        assert record.id == "U2"
        slack_client.users_lookupByEmail.assert_called_once_with(email="bob@x.com")

    def test_permission_error_is_no_record(self, slack_client):
        slack_client.users_lookupByEmail.side_effect = SlackApiError(
            message="missing_scope",
            response={"ok": False, "error": "missing_scope"},
        )
        directory = SlackUserDirectory(slack_client)

        assert directory.fetch_by_email("bob@x.com") is None
        result = directory.lookup_by_email("bob@x.com")
        assert result.status == OperationStatus.UNAUTHORIZED


@pytest.mark.unit
class TestListAll:
    def test_paginates_and_normalizes(
        self, slack_client, slack_member, users_list_pages
    ):
        members = [
            slack_member(user_id="U1", name="a"),
            slack_member(user_id="U2", name="b", deleted=True),
            {"id": "U3"},
            slack_member(user_id="U4", name="d", is_bot=True),
        ]
        slack_client.users_list.side_effect = users_list_pages(members, page_size=2)

        records = SlackUserDirectory(slack_client, page_size=2).list_all()

        assert [record.id for record in records] == ["U1", "U2", "U4"]
        assert slack_client.users_list.call_count == 2
        first, second = slack_client.users_list.call_args_list
        assert first.kwargs == {"cursor": None, "limit": 2}
        assert second.kwargs == {"cursor": "cursor-1", "limit": 2}

    def test_failure_raises_listing_error(self, slack_client):
        slack_client.users_list.side_effect = SlackApiError(
            message="ratelimited",
            response={"ok": False, "error": "ratelimited"},
        )

        with pytest.raises(DirectoryListingError) as exc_info:
            SlackUserDirectory(slack_client).list_all()

        assert exc_info.value.result.error_code == "RATE_LIMITED"
        assert isinstance(exc_info.value.__cause__.__cause__, SlackApiError)
