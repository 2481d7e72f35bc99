"""Error classifiers for Slack Web API exceptions.

Converts exceptions raised by ``slack_sdk`` into standardized OperationResult
objects so directory lookups can report failures as values.

Usage:
    from infrastructure.operations.classifiers import classify_slack_error

    try:
        response = client.users_info(user="U123ABC")
    except Exception as exc:
        return classify_slack_error(exc)
"""

from typing import Optional

from slack_sdk.errors import SlackApiError

from infrastructure.operations.result import OperationResult

NOT_FOUND_ERRORS = frozenset({"user_not_found", "users_not_found"})

UNAUTHORIZED_ERRORS = frozenset(
    {
        "not_authed",
        "invalid_auth",
        "account_inactive",
        "token_revoked",
        "token_expired",
        "no_permission",
        "missing_scope",
        "not_allowed_token_type",
    }
)

DEFAULT_RETRY_AFTER = 60


def _slack_error_name(exc: SlackApiError) -> str:
    response = getattr(exc, "response", None)
    error = None
    if response is not None and hasattr(response, "get"):
        error = response.get("error")
    return str(error or "unknown_error")


def _retry_after(exc: SlackApiError) -> int:
    headers = getattr(getattr(exc, "response", None), "headers", None) or {}
    header_value = headers.get("Retry-After") or headers.get("retry-after")
    if header_value:
        try:
            return int(header_value)
        except (ValueError, TypeError):
            pass
    return DEFAULT_RETRY_AFTER


def classify_slack_error(exc: Exception) -> OperationResult:
    """Classify Slack Web API errors into OperationResult.

    Mapping:
    - HTTP 429 / ``ratelimited``: TRANSIENT_ERROR with retry_after
    - HTTP 5xx: TRANSIENT_ERROR
    - ``user_not_found`` / ``users_not_found``: NOT_FOUND
    - auth and scope errors: UNAUTHORIZED
    - other API errors: PERMANENT_ERROR
    - non-Slack exceptions (connection reset, timeout): TRANSIENT_ERROR

    Args:
        exc: Exception raised by slack_sdk.WebClient

    Returns:
        OperationResult with status, message, error_code and retry_after
        (if applicable)
    """
    if not isinstance(exc, SlackApiError):
        return OperationResult.transient_error(
            f"Connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    error = _slack_error_name(exc)
    status_code: Optional[int] = getattr(
        getattr(exc, "response", None), "status_code", None
    )

    if status_code == 429 or error == "ratelimited":
        return OperationResult.transient_error(
            "Slack API rate limited",
            error_code="RATE_LIMITED",
            retry_after=_retry_after(exc),
        )

    if isinstance(status_code, int) and 500 <= status_code < 600:
        return OperationResult.transient_error(
            f"Slack API server error ({status_code}): {error}",
            error_code="SERVER_ERROR",
        )

    if error in NOT_FOUND_ERRORS:
        return OperationResult.not_found(
            f"Slack user not found: {error}",
            error_code=f"SLACK_{error.upper()}",
        )

    if error in UNAUTHORIZED_ERRORS:
        return OperationResult.unauthorized(
            f"Slack API authorization failed: {error}",
            error_code=f"SLACK_{error.upper()}",
        )

    return OperationResult.permanent_error(
        f"Slack API error: {error}",
        error_code=f"SLACK_{error.upper()}",
    )
