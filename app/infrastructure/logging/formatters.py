"""structlog processors that keep Slack credentials out of log output.

Two layers:
    - keys that look like credentials (``token``, ``slack_token``, ...) have
      their value replaced outright
    - string values are scanned for Slack token literals (``xoxb-...``),
      which can leak through exception messages and request echoes
"""

import re
from typing import Any

SENSITIVE_PATTERNS = frozenset(
    {
        "token",
        "secret",
        "password",
        "authorization",
        "bearer",
        "cookie",
        "credential",
        "api_key",
        "apikey",
    }
)

SLACK_TOKEN_REGEX = re.compile(r"xox[abpres]-[A-Za-z0-9-]+")


def _is_sensitive_key(key: str, patterns: frozenset[str]) -> bool:
    lowered = key.lower()
    return any(pattern in lowered for pattern in patterns)


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: frozenset[str] | None = None,
):
    """Build a processor that redacts credentials from an event dict.

    Args:
        mask_value: Replacement for redacted values and token literals.
        additional_patterns: Extra key fragments to treat as sensitive.

    Returns:
        A structlog processor.
    """
    patterns = SENSITIVE_PATTERNS | (additional_patterns or frozenset())

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        redacted = {}
        for key, value in event_dict.items():
            if value is None:
                redacted[key] = value
            elif _is_sensitive_key(key, patterns):
                redacted[key] = mask_value
            elif isinstance(value, str):
                redacted[key] = SLACK_TOKEN_REGEX.sub(mask_value, value)
            else:
                redacted[key] = value
        return redacted

    return processor
