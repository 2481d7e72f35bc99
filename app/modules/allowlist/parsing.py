"""Allowlist entry classification and normalization.

Every casing rule used during resolution is defined here: IDs are
upper-cased, emails lower-cased and names compared lower-cased. Matching code
imports these helpers instead of calling str.lower()/upper() itself.
"""

import re
from typing import Optional

from modules.allowlist.models import ParsedReference

MENTION_REGEX = re.compile(r"^<@([A-Z0-9]+)>$", re.IGNORECASE)
PREFIX_REGEX = re.compile(r"^(slack:|user:)", re.IGNORECASE)
USER_ID_REGEX = re.compile(r"^[A-Z][A-Z0-9]+$", re.IGNORECASE)
DIGIT_REGEX = re.compile(r"\d")


def normalize_id(value: str) -> str:
    return value.strip().upper()


def normalize_email(value: str) -> str:
    return value.strip().lower()


def normalize_name(value: Optional[str]) -> Optional[str]:
    """Comparison key for handles, display names and real names."""
    if value is None:
        return None
    return value.lower()


def parse_entry(raw: str) -> ParsedReference:
    """Classify a raw allowlist entry.

    Recognition order, first match wins:
      1. ``<@U123>`` mention -> id
      2. optional ``slack:``/``user:`` prefix + alphanumeric token starting
         with a letter (2+ chars) -> id. Without a prefix the token must also
         contain a digit, so a bare handle such as ``jane`` stays a name.
      3. contains ``@`` but does not start with it -> email
      4. anything else, minus a leading ``@`` -> name

    Args:
        raw: The entry as the administrator wrote it.

    Returns:
        ParsedReference with at most one field populated.
    """
    trimmed = (raw or "").strip()
    if not trimmed:
        return ParsedReference()

    mention = MENTION_REGEX.match(trimmed)
    if mention:
        return ParsedReference(id=normalize_id(mention.group(1)))

    unprefixed = PREFIX_REGEX.sub("", trimmed, count=1)
    prefixed = unprefixed != trimmed
    if USER_ID_REGEX.match(unprefixed) and (
        prefixed or DIGIT_REGEX.search(unprefixed)
    ):
        return ParsedReference(id=normalize_id(unprefixed))

    if "@" in trimmed and not trimmed.startswith("@"):
        return ParsedReference(email=normalize_email(trimmed))

    name = trimmed[1:].strip() if trimmed.startswith("@") else trimmed
    return ParsedReference(name=name) if name else ParsedReference()
