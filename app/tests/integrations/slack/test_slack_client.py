import pytest
from unittest.mock import patch
from slack_sdk.http_retry.builtin_handlers import (
    ConnectionErrorRetryHandler,
    RateLimitErrorRetryHandler,
)

from integrations.slack.client import (
    BoundedBackoffIntervalCalculator,
    SlackRetryOptions,
    build_retry_handlers,
    create_slack_web_client,
    create_slack_web_client_bulk,
)


class TestSlackRetryOptions:
    def test_defaults(self):
        options = SlackRetryOptions()

        assert options.retries == 2
        assert options.factor == 2
        assert options.min_timeout == 0.5
        assert options.max_timeout == 3.0
        assert options.randomize is True

    @patch("integrations.slack.client.settings.slack.SLACK_RETRY_COUNT", 5)
    @patch("integrations.slack.client.settings.slack.SLACK_RETRY_RANDOMIZE", False)
    def test_from_settings(self):
        options = SlackRetryOptions.from_settings()

        assert options.retries == 5
        assert options.randomize is False

    def test_rejects_negative_retries(self):
        with pytest.raises(ValueError):
            SlackRetryOptions(retries=-1)


class TestBoundedBackoffIntervalCalculator:
    def test_exponential_and_capped(self):
        calculator = BoundedBackoffIntervalCalculator(
            SlackRetryOptions(randomize=False)
        )

        assert [calculator.calculate_sleep_duration(n) for n in range(5)] == [
            0.5,
            1.0,
            2.0,
            3.0,
            3.0,
        ]

    def test_randomize_applies_jitter(self):
        calculator = BoundedBackoffIntervalCalculator(
            SlackRetryOptions(), random_func=lambda: 0.5
        )

        assert calculator.calculate_sleep_duration(0) == 0.75
        assert calculator.calculate_sleep_duration(2) == 3.0


class TestBuildRetryHandlers:
    def test_default_chain_retries_rate_limits(self):
        handlers = build_retry_handlers(SlackRetryOptions(retries=3))

        assert [type(h) for h in handlers] == [
            ConnectionErrorRetryHandler,
            RateLimitErrorRetryHandler,
        ]
        assert all(h.max_retry_count == 3 for h in handlers)
        assert all(
            isinstance(h.interval_calculator, BoundedBackoffIntervalCalculator)
            for h in handlers
        )

    def test_fail_fast_chain(self):
        handlers = build_retry_handlers(SlackRetryOptions(), retry_rate_limited=False)

        assert [type(h) for h in handlers] == [ConnectionErrorRetryHandler]


class TestCreateSlackWebClient:
    def test_default_client(self):
        client = create_slack_web_client("xoxb-test")

        assert client.token == "xoxb-test"
        assert any(
            isinstance(h, RateLimitErrorRetryHandler) for h in client.retry_handlers
        )

    def test_bulk_client_fails_fast_on_rate_limits(self):
        client = create_slack_web_client_bulk("xoxb-test")

        assert client.token == "xoxb-test"
        assert not any(
            isinstance(h, RateLimitErrorRetryHandler) for h in client.retry_handlers
        )
        assert any(
            isinstance(h, ConnectionErrorRetryHandler) for h in client.retry_handlers
        )

    @patch("integrations.slack.client.settings.slack.SLACK_TIMEOUT", 12)
    @patch("integrations.slack.client.WebClient")
    def test_passes_timeout_and_kwargs(self, mock_web_client):
        client = create_slack_web_client("xoxb-test", base_url="https://x/api/")

        kwargs = mock_web_client.call_args.kwargs
        assert kwargs["token"] == "xoxb-test"
        assert kwargs["timeout"] == 12
        assert kwargs["base_url"] == "https://x/api/"
        assert len(kwargs["retry_handlers"]) == 2
        assert client == mock_web_client.return_value

    @patch("integrations.slack.client.WebClient")
    def test_explicit_retry_handlers_win(self, mock_web_client):
        create_slack_web_client("xoxb-test", retry_handlers=[])

        assert mock_web_client.call_args.kwargs["retry_handlers"] == []
