"""Allowlist resolution module.

Turns administrator-authored allowlist entries (Slack user IDs, mentions,
emails, display names) into Slack user records.

Usage:
    from modules.allowlist import resolve_allowlist, RateLimitPolicy

    results = resolve_allowlist(
        token, ["U123ABC", "jane@example.com"], rate_limit_policy=RateLimitPolicy.RETRY
    )
"""

from modules.allowlist.directory import (
    DirectoryListingError,
    SlackUserDirectory,
    UserDirectory,
)
from modules.allowlist.models import (
    MULTIPLE_MATCHES_NOTE,
    DirectoryRecord,
    ParsedReference,
    RateLimitPolicy,
    ReferenceKind,
    ResolutionRecord,
    ScoredRecord,
)
from modules.allowlist.parsing import parse_entry
from modules.allowlist.scoring import pick_best, score_record
from modules.allowlist.service import resolve_allowlist
from modules.allowlist.strategies import resolve_exhaustive, resolve_targeted

__all__ = [
    "resolve_allowlist",
    "resolve_targeted",
    "resolve_exhaustive",
    "parse_entry",
    "score_record",
    "pick_best",
    "SlackUserDirectory",
    "UserDirectory",
    "DirectoryListingError",
    "DirectoryRecord",
    "ParsedReference",
    "RateLimitPolicy",
    "ReferenceKind",
    "ResolutionRecord",
    "ScoredRecord",
    "MULTIPLE_MATCHES_NOTE",
]
