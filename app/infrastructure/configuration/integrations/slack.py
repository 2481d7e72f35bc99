"""Slack integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class SlackSettings(IntegrationSettings):
    """Slack Web API client configuration.

    Environment Variables:
        SLACK_TOKEN: Slack bot token (xoxb-*) used when no client is supplied
        SLACK_TIMEOUT: HTTP timeout for a single Web API call (seconds)
        SLACK_RETRY_COUNT: Retries per call on connection errors / HTTP 429
        SLACK_RETRY_FACTOR: Exponential backoff factor between retries
        SLACK_RETRY_MIN_TIMEOUT: First retry delay (seconds)
        SLACK_RETRY_MAX_TIMEOUT: Upper bound on any retry delay (seconds)
        SLACK_RETRY_RANDOMIZE: Multiply each delay by a random factor in [1, 2)

    Example:
        ```python
        from infrastructure.configuration import settings

        token = settings.slack.SLACK_TOKEN
        retries = settings.slack.SLACK_RETRY_COUNT
        ```
    """

    SLACK_TOKEN: str = ""
    SLACK_TIMEOUT: int = Field(
        default=30, description="HTTP timeout for Slack Web API calls (seconds)"
    )
    SLACK_RETRY_COUNT: int = Field(
        default=2, ge=0, description="Retries per Slack call before giving up"
    )
    SLACK_RETRY_FACTOR: float = Field(
        default=2.0, gt=0, description="Exponential backoff factor"
    )
    SLACK_RETRY_MIN_TIMEOUT: float = Field(
        default=0.5, ge=0, description="First retry delay (seconds)"
    )
    SLACK_RETRY_MAX_TIMEOUT: float = Field(
        default=3.0, ge=0, description="Maximum retry delay (seconds)"
    )
    SLACK_RETRY_RANDOMIZE: bool = Field(
        default=True, description="Apply random jitter to retry delays"
    )
