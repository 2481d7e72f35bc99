"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    get_settings: Accessor returning the singleton
    Settings: Main settings class (for testing/overrides)
    SlackSettings: Slack client settings class
    AllowlistSettings: Allowlist resolution settings class

Example:
    ```python
    from infrastructure.configuration import settings

    token = settings.slack.SLACK_TOKEN
    workers = settings.allowlist.lookup_workers
    ```
"""

from infrastructure.configuration.settings import Settings, get_settings, settings
from infrastructure.configuration.integrations import SlackSettings
from infrastructure.configuration.features import AllowlistSettings

__all__ = [
    "Settings",
    "SlackSettings",
    "AllowlistSettings",
    "settings",
    "get_settings",
]
