"""Slack Web API client factories.

Two flavours are provided:

- ``create_slack_web_client``: retries connection errors and HTTP 429
  responses, waiting per the configured backoff / ``Retry-After``.
- ``create_slack_web_client_bulk``: retries connection errors only. A rate
  limited call raises ``SlackApiError`` immediately instead of sleeping, so
  long paginations (users.list) cannot starve a shared Socket Mode connection.
"""

import random
from typing import Callable, List, Optional

from pydantic import BaseModel, Field
from slack_sdk import WebClient
from slack_sdk.http_retry import RetryHandler
from slack_sdk.http_retry.builtin_handlers import (
    ConnectionErrorRetryHandler,
    RateLimitErrorRetryHandler,
)
from slack_sdk.http_retry.interval_calculator import RetryIntervalCalculator

from infrastructure.configuration import settings


class SlackRetryOptions(BaseModel):
    """Retry policy applied by the Slack client transport.

    Attributes:
        retries: Retries per call after the first attempt
        factor: Exponential backoff factor
        min_timeout: Delay before the first retry (seconds)
        max_timeout: Upper bound on any single delay (seconds)
        randomize: Multiply each delay by a random factor in [1, 2)
    """

    retries: int = Field(default=2, ge=0)
    factor: float = Field(default=2.0, gt=0)
    min_timeout: float = Field(default=0.5, ge=0)
    max_timeout: float = Field(default=3.0, ge=0)
    randomize: bool = True

    @classmethod
    def from_settings(cls) -> "SlackRetryOptions":
        """Build the default policy from ``settings.slack``."""
        slack = settings.slack
        return cls(
            retries=slack.SLACK_RETRY_COUNT,
            factor=slack.SLACK_RETRY_FACTOR,
            min_timeout=slack.SLACK_RETRY_MIN_TIMEOUT,
            max_timeout=slack.SLACK_RETRY_MAX_TIMEOUT,
            randomize=slack.SLACK_RETRY_RANDOMIZE,
        )


class BoundedBackoffIntervalCalculator(RetryIntervalCalculator):
    """Exponential backoff capped at ``max_timeout``.

    delay(attempt) = min(max_timeout, min_timeout * factor ** attempt * jitter)
    where jitter is in [1, 2) when ``randomize`` is set, otherwise 1.
    """

    def __init__(
        self,
        options: SlackRetryOptions,
        random_func: Callable[[], float] = random.random,
    ):
        self.options = options
        self._random = random_func

    def calculate_sleep_duration(self, current_attempt: int) -> float:
        jitter = 1.0 + self._random() if self.options.randomize else 1.0
        delay = self.options.min_timeout * (self.options.factor**current_attempt)
        return min(self.options.max_timeout, delay * jitter)


def build_retry_handlers(
    options: Optional[SlackRetryOptions] = None,
    retry_rate_limited: bool = True,
) -> List[RetryHandler]:
    """Build the retry handler chain for a WebClient.

    Args:
        options: Retry policy. Defaults to ``SlackRetryOptions.from_settings()``.
        retry_rate_limited: Also retry HTTP 429 responses. The wait follows
            Slack's ``Retry-After`` header.

    Returns:
        List of slack_sdk retry handlers.
    """
    options = options or SlackRetryOptions.from_settings()
    calculator = BoundedBackoffIntervalCalculator(options)
    handlers: List[RetryHandler] = [
        ConnectionErrorRetryHandler(
            max_retry_count=options.retries, interval_calculator=calculator
        )
    ]
    if retry_rate_limited:
        handlers.append(
            RateLimitErrorRetryHandler(
                max_retry_count=options.retries, interval_calculator=calculator
            )
        )
    return handlers


def create_slack_web_client(
    token: str,
    retry_options: Optional[SlackRetryOptions] = None,
    **kwargs,
) -> WebClient:
    """Create a WebClient that retries connection errors and rate limits.

    Args:
        token: Slack bot token (xoxb-*)
        retry_options: Optional retry policy override
        **kwargs: Extra WebClient arguments. ``retry_handlers`` passed here
            replaces the built handler chain.

    Returns:
        Configured slack_sdk.WebClient
    """
    kwargs.setdefault("timeout", settings.slack.SLACK_TIMEOUT)
    if "retry_handlers" not in kwargs:
        kwargs["retry_handlers"] = build_retry_handlers(retry_options)
    return WebClient(token=token, **kwargs)


def create_slack_web_client_bulk(
    token: str,
    retry_options: Optional[SlackRetryOptions] = None,
    **kwargs,
) -> WebClient:
    """Create a WebClient that fails fast on rate-limited calls.

    Use this for bulk operations (users.list pagination) where a 429 retry
    loop would block other traffic for minutes. Connection errors are still
    retried.
    """
    kwargs.setdefault("timeout", settings.slack.SLACK_TIMEOUT)
    kwargs["retry_handlers"] = build_retry_handlers(
        retry_options, retry_rate_limited=False
    )
    return WebClient(token=token, **kwargs)
