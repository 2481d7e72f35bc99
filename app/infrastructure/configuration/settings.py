"""Allowlist resolver configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.integrations import SlackSettings
from infrastructure.configuration.features import AllowlistSettings


class Settings(BaseSettings):
    """Application configuration settings - main aggregator.

    Settings are organized by concern:

    - **Integrations**: external service configuration (Slack)
    - **Features**: feature module configuration (allowlist resolution)

    Environment Variables:
        PREFIX: Environment prefix; empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from infrastructure.configuration import settings

        slack_token = settings.slack.SLACK_TOKEN
        workers = settings.allowlist.lookup_workers

        if settings.is_production:
            ...
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    slack: SlackSettings
    allowlist: AllowlistSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "slack": SlackSettings,
            "allowlist": AllowlistSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()


def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return settings
