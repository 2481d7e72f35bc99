"""Fixtures for modules.allowlist tests."""

import pytest
from unittest.mock import Mock

from modules.allowlist.directory import SlackUserDirectory
from tests.factories.slack import make_directory_record


@pytest.fixture
def make_record():
    """Factory for DirectoryRecord instances."""
    return make_directory_record


@pytest.fixture
def directory():
    """SlackUserDirectory mock with nothing found and an empty listing."""
    mock_directory = Mock(spec=SlackUserDirectory)
    mock_directory.fetch_by_id.return_value = None
    mock_directory.fetch_by_email.return_value = None
    mock_directory.list_all.return_value = []
    return mock_directory
