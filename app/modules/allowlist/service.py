"""Allowlist resolution entry point.

Selects a strategy from the caller's rate-limit policy, builds a Slack client
when none is supplied, and returns one ResolutionRecord per entry.

Usage:
    from modules.allowlist import resolve_allowlist

    results = resolve_allowlist(
        token="xoxb-...",
        entries=["<@U123ABC>", "jane@example.com", "@jane"],
        rate_limit_policy="fail-fast",
    )
"""

from typing import List, Optional, Sequence, Union

from slack_sdk import WebClient

from infrastructure.configuration import settings
from infrastructure.logging import get_module_logger
from integrations.slack.client import create_slack_web_client
from modules.allowlist.directory import SlackUserDirectory
from modules.allowlist.models import RateLimitPolicy, ResolutionRecord
from modules.allowlist.strategies import resolve_exhaustive, resolve_targeted

logger = get_module_logger()


def resolve_allowlist(
    token: Optional[str],
    entries: Sequence[str],
    client: Optional[WebClient] = None,
    rate_limit_policy: Optional[Union[RateLimitPolicy, str]] = None,
    max_workers: Optional[int] = None,
) -> List[ResolutionRecord]:
    """Resolve allowlist entries to Slack users.

    Args:
        token: Slack bot token, used only when ``client`` is not given.
            Falls back to settings.slack.SLACK_TOKEN when empty.
        entries: Raw allowlist entries (IDs, mentions, emails, names).
        client: Optional pre-built WebClient.
        rate_limit_policy: ``"retry"`` (default) lists the directory once and
            matches in memory; ``"fail-fast"`` uses per-entry lookups and lists
            only for display names. None always means ``"retry"``.
        max_workers: Concurrent per-entry lookups for ``"fail-fast"``.
            Defaults to settings.allowlist.lookup_workers.

    Returns:
        One ResolutionRecord per entry, in entry order.

    Raises:
        ValueError: If ``rate_limit_policy`` is not recognized.
        DirectoryListingError: If users.list fails. Never caught here.
    """
    policy = RateLimitPolicy.coerce(rate_limit_policy)
    entries = list(entries)
    if client is None:
        client = create_slack_web_client(token or settings.slack.SLACK_TOKEN)
    directory = SlackUserDirectory(client, page_size=settings.allowlist.page_size)

    log = logger.bind(policy=policy.value, entries=len(entries))
    log.info("resolving_allowlist")

    if policy is RateLimitPolicy.FAIL_FAST:
        workers = max_workers or settings.allowlist.lookup_workers
        results = resolve_targeted(directory, entries, max_workers=workers)
    else:
        results = resolve_exhaustive(directory, entries)

    resolved = sum(1 for result in results if result.resolved)
    log.info(
        "allowlist_resolved",
        resolved=resolved,
        unresolved=len(results) - resolved,
    )
    return results
