import sys
from pathlib import Path
from unittest.mock import MagicMock

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `modules.allowlist`) works during pytest collection regardless
# of the invocation directory.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402
from tests.factories.slack import (  # noqa: E402
    make_slack_member,
    make_users_list_pages,
)


@pytest.fixture
def slack_client():
    """MagicMock standing in for slack_sdk.WebClient."""
    return MagicMock()


@pytest.fixture
def slack_member():
    """Factory for raw Slack member payloads."""
    return make_slack_member


@pytest.fixture
def users_list_pages():
    """Factory turning member lists into paginated users.list responses."""
    return make_users_list_pages
