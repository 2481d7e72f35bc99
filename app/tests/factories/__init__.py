"""Test data factories for deterministic test data generation."""

from tests.factories.slack import (
    make_directory_record,
    make_slack_member,
    make_users_list_pages,
)

__all__ = [
    "make_directory_record",
    "make_slack_member",
    "make_users_list_pages",
]
