"""Allowlist resolution strategies.

Two interchangeable batch transforms share the classifier and the scorer:

- resolve_targeted: users.info per ID, users.lookupByEmail per email, and a
  single users.list only when display names need matching. Keeps the strict
  Tier 2 budget free unless it is unavoidable.
- resolve_exhaustive: a single users.list upfront, then everything is
  matched in memory. Never issues per-entry lookups.

Both return one ResolutionRecord per entry, in entry order.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Sequence

from infrastructure.logging import get_module_logger
from modules.allowlist.directory import UserDirectory
from modules.allowlist.models import (
    MULTIPLE_MATCHES_NOTE,
    DirectoryRecord,
    ParsedReference,
    ReferenceKind,
    ResolutionRecord,
)
from modules.allowlist.parsing import parse_entry
from modules.allowlist.scoring import matches_name, pick_best

logger = get_module_logger()

DEFAULT_LOOKUP_WORKERS = 4


def resolve_from_matches(
    raw: str,
    matches: Sequence[DirectoryRecord],
    email: Optional[str] = None,
    name: Optional[str] = None,
) -> ResolutionRecord:
    """Resolve an entry from its candidate set, scoring when ambiguous."""
    if not matches:
        return ResolutionRecord.unresolved(raw)
    best = pick_best(matches, email=email, name=name)
    note = MULTIPLE_MATCHES_NOTE if len(matches) > 1 else None
    return ResolutionRecord.from_record(raw, best, note=note)


def _name_matches(
    records: Sequence[DirectoryRecord], name: str
) -> List[DirectoryRecord]:
    return [record for record in records if matches_name(record, name)]


def _lookup(
    directory: UserDirectory, reference: ParsedReference
) -> Optional[DirectoryRecord]:
    if reference.kind is ReferenceKind.ID:
        return directory.fetch_by_id(reference.id)
    return directory.fetch_by_email(reference.email)


def resolve_targeted(
    directory: UserDirectory,
    entries: Sequence[str],
    max_workers: int = DEFAULT_LOOKUP_WORKERS,
) -> List[ResolutionRecord]:
    """Resolve entries with per-entry lookups, listing only for names.

    ID and email lookups are independent and run on a thread pool of
    ``max_workers`` (1 means sequential). users.list is called at most once,
    and only if at least one entry classified as a display name.

    Args:
        directory: Directory adapter
        entries: Raw allowlist entries
        max_workers: Concurrent per-entry lookups

    Returns:
        One ResolutionRecord per entry, in entry order.

    Raises:
        DirectoryListingError: If users.list fails while matching names.
    """
    parsed = [parse_entry(raw) for raw in entries]
    results: List[Optional[ResolutionRecord]] = [None] * len(parsed)

    lookup_indexes = [
        index
        for index, reference in enumerate(parsed)
        if reference.kind in (ReferenceKind.ID, ReferenceKind.EMAIL)
    ]
    name_indexes = [
        index
        for index, reference in enumerate(parsed)
        if reference.kind is ReferenceKind.NAME
    ]

    references = [parsed[index] for index in lookup_indexes]
    if max_workers > 1 and len(references) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            found = list(
                executor.map(lambda ref: _lookup(directory, ref), references)
            )
    else:
        found = [_lookup(directory, reference) for reference in references]

    for index, record in zip(lookup_indexes, found):
        raw = entries[index]
        results[index] = (
            ResolutionRecord.from_record(raw, record)
            if record is not None
            else ResolutionRecord.unresolved(raw)
        )

    if name_indexes:
        records = directory.list_all()
        for index in name_indexes:
            name = parsed[index].name
            results[index] = resolve_from_matches(
                entries[index], _name_matches(records, name), name=name
            )

    logger.info(
        "targeted_resolution_completed",
        entries=len(entries),
        lookups=len(lookup_indexes),
        name_entries=len(name_indexes),
        listed_directory=bool(name_indexes),
    )
    return [
        result if result is not None else ResolutionRecord.unresolved(raw)
        for raw, result in zip(entries, results)
    ]


def resolve_exhaustive(
    directory: UserDirectory, entries: Sequence[str]
) -> List[ResolutionRecord]:
    """Resolve entries against one full users.list snapshot.

    Args:
        directory: Directory adapter
        entries: Raw allowlist entries

    Returns:
        One ResolutionRecord per entry, in entry order.

    Raises:
        DirectoryListingError: If users.list fails.
    """
    records = directory.list_all()
    by_id: Dict[str, DirectoryRecord] = {}
    for record in records:
        by_id.setdefault(record.id, record)

    results = []
    for raw in entries:
        reference = parse_entry(raw)
        kind = reference.kind

        if kind is ReferenceKind.ID:
            record = by_id.get(reference.id)
            results.append(
                ResolutionRecord.from_record(raw, record)
                if record is not None
                else ResolutionRecord.unresolved(raw)
            )
            continue

        if kind is ReferenceKind.EMAIL:
            matches = [r for r in records if r.email == reference.email]
            if matches:
                results.append(
                    resolve_from_matches(raw, matches, email=reference.email)
                )
                continue

        if reference.name is not None:
            results.append(
                resolve_from_matches(
                    raw, _name_matches(records, reference.name), name=reference.name
                )
            )
            continue

        results.append(ResolutionRecord.unresolved(raw))

    logger.info(
        "exhaustive_resolution_completed",
        entries=len(entries),
        directory_size=len(records),
    )
    return results
