"""Candidate scoring for ambiguous allowlist matches.

Live, human, precisely matched accounts win over deactivated accounts, bots
and partial matches:

    +3  not deleted
    +2  neither a bot nor an app user
    +5  reference email equals the record email
    +2  reference name equals the handle, display name or real name
        (case-insensitive)
"""

from typing import List, Optional, Sequence

from modules.allowlist.models import DirectoryRecord, ScoredRecord
from modules.allowlist.parsing import normalize_name

ACTIVE_POINTS = 3
HUMAN_POINTS = 2
EMAIL_POINTS = 5
NAME_POINTS = 2


def matches_name(record: DirectoryRecord, name: str) -> bool:
    """True if ``name`` equals any of the record's names, ignoring case."""
    target = normalize_name(name)
    candidates = (record.name, record.display_name, record.real_name)
    return any(
        candidate and normalize_name(candidate) == target for candidate in candidates
    )


def score_record(
    record: DirectoryRecord,
    email: Optional[str] = None,
    name: Optional[str] = None,
) -> int:
    score = 0
    if not record.deleted:
        score += ACTIVE_POINTS
    if record.is_human:
        score += HUMAN_POINTS
    if email and record.email == email:
        score += EMAIL_POINTS
    if name and matches_name(record, name):
        score += NAME_POINTS
    return score


def rank_candidates(
    records: Sequence[DirectoryRecord],
    email: Optional[str] = None,
    name: Optional[str] = None,
) -> List[ScoredRecord]:
    """Score candidates, highest first. Equal scores keep their input order."""
    scored = [
        ScoredRecord(record, score_record(record, email, name)) for record in records
    ]
    return sorted(scored, key=lambda item: item.score, reverse=True)


def pick_best(
    records: Sequence[DirectoryRecord],
    email: Optional[str] = None,
    name: Optional[str] = None,
) -> DirectoryRecord:
    """Return the highest scoring candidate; the first one seen wins ties.

    Raises:
        ValueError: If ``records`` is empty.
    """
    if not records:
        raise ValueError("pick_best requires at least one candidate")
    return rank_candidates(records, email, name)[0].record
