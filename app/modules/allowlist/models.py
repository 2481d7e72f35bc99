"""Data models for allowlist resolution.

Key distinctions:
  - ParsedReference, DirectoryRecord, ScoredRecord: internal structures
    (dataclasses, no runtime validation beyond basic invariants)
  - ResolutionRecord: the output contract returned to callers (Pydantic)
  - RateLimitPolicy: explicit strategy selector

Usage:
  - integrations.slack.users returns raw member dicts; record_from_member()
    normalizes them into DirectoryRecord
  - Strategies turn ParsedReference + DirectoryRecord into ResolutionRecord
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field

MULTIPLE_MATCHES_NOTE = "multiple matches; chose best"


class RateLimitPolicy(str, Enum):
    """How resolution should treat the users.list rate-limit tier.

    RETRY: list the whole directory once and match in memory (exhaustive).
    FAIL_FAST: prefer per-entry lookups; list only for display names (targeted).
    """

    RETRY = "retry"
    FAIL_FAST = "fail-fast"

    @classmethod
    def coerce(cls, value: "Optional[RateLimitPolicy | str]") -> "RateLimitPolicy":
        """Normalize a caller-supplied policy; None means RETRY.

        Strings are matched after trimming and lower-casing, so "FAIL-FAST"
        selects FAIL_FAST. Anything else is rejected rather than quietly
        treated as RETRY, so a misspelt "fail-fast" cannot fall back to
        listing the whole directory.

        Raises:
            ValueError: If the value is not a recognized policy.
        """
        if value is None:
            return cls.RETRY
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown rate limit policy {value!r}; expected 'retry' or 'fail-fast'"
            ) from None


class ReferenceKind(str, Enum):
    """Which field of a ParsedReference is populated."""

    ID = "id"
    EMAIL = "email"
    NAME = "name"
    EMPTY = "empty"


@dataclass(frozen=True)
class ParsedReference:
    """Classification of one raw allowlist entry.

    At most one of ``id``, ``email`` and ``name`` is set. An entry that is
    blank or cannot be classified has none set.
    """

    id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self):
        populated = [f for f in (self.id, self.email, self.name) if f is not None]
        if len(populated) > 1:
            raise ValueError("ParsedReference accepts only one of id, email, name")

    @property
    def kind(self) -> ReferenceKind:
        if self.id is not None:
            return ReferenceKind.ID
        if self.email is not None:
            return ReferenceKind.EMAIL
        if self.name is not None:
            return ReferenceKind.NAME
        return ReferenceKind.EMPTY


@dataclass(frozen=True)
class DirectoryRecord:
    """Snapshot of one Slack workspace member.

    Attributes:
        id: Slack user ID (stable identifier)
        name: Slack handle
        display_name: profile.display_name, if set
        real_name: profile.real_name or the top-level real_name, if set
        email: profile.email lower-cased, if visible to the token
        deleted: Account is deactivated
        is_bot: Bot user
        is_app_user: App (integration) user
    """

    id: str
    name: str
    display_name: Optional[str] = None
    real_name: Optional[str] = None
    email: Optional[str] = None
    deleted: bool = False
    is_bot: bool = False
    is_app_user: bool = False

    @property
    def best_name(self) -> str:
        """Display name, else real name, else handle."""
        return self.display_name or self.real_name or self.name

    @property
    def is_human(self) -> bool:
        return not self.is_bot and not self.is_app_user


def _clean(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def record_from_member(member: Dict[str, Any]) -> Optional[DirectoryRecord]:
    """Convert a raw Slack member dict into a DirectoryRecord.

    Returns None when the member has no usable ``id`` or ``name``.
    """
    if not isinstance(member, dict):
        return None
    user_id = _clean(member.get("id"))
    name = _clean(member.get("name"))
    if not user_id or not name:
        return None

    profile = member.get("profile") or {}
    email = _clean(profile.get("email"))
    return DirectoryRecord(
        id=user_id,
        name=name,
        display_name=_clean(profile.get("display_name")),
        real_name=_clean(profile.get("real_name")) or _clean(member.get("real_name")),
        email=email.lower() if email else None,
        deleted=bool(member.get("deleted")),
        is_bot=bool(member.get("is_bot")),
        is_app_user=bool(member.get("is_app_user")),
    )


class ScoredRecord(NamedTuple):
    """A candidate record paired with its match score."""

    record: DirectoryRecord
    score: int


class ResolutionRecord(BaseModel):
    """Outcome of resolving one allowlist entry.

    Unresolved entries carry only ``input`` and ``resolved=False``.
    """

    model_config = ConfigDict(frozen=True)

    input: str = Field(..., description="The raw entry, exactly as supplied")
    resolved: bool = Field(..., description="Whether a user was found")
    id: Optional[str] = Field(default=None, description="Slack user ID")
    name: Optional[str] = Field(
        default=None, description="Display name, real name or handle"
    )
    email: Optional[str] = Field(default=None, description="Lower-cased email")
    deleted: Optional[bool] = Field(default=None, description="Deactivated account")
    is_bot: Optional[bool] = Field(default=None, description="Bot account")
    note: Optional[str] = Field(default=None, description="Resolution remark")

    @classmethod
    def unresolved(cls, raw: str) -> "ResolutionRecord":
        return cls(input=raw, resolved=False)

    @classmethod
    def from_record(
        cls, raw: str, record: DirectoryRecord, note: Optional[str] = None
    ) -> "ResolutionRecord":
        return cls(
            input=raw,
            resolved=True,
            id=record.id,
            name=record.best_name,
            email=record.email,
            deleted=record.deleted,
            is_bot=record.is_bot,
            note=note,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize without unset fields."""
        return self.model_dump(exclude_none=True)
