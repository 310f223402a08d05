"""
Identifier helpers.

Every ID-like filter and path parameter goes through these helpers. Values
that do not look like a 36-character UUID are treated as absent instead of
being rejected: a malformed `companyId` in a feed query simply does not
filter, and a malformed path ID resolves to "not found".
"""

import re
from typing import Iterable, Optional
from uuid import UUID

# Same shape the public API has always accepted: 36 hex digits or dashes.
ID_PATTERN = re.compile(r"^[0-9a-fA-F-]{36}$")


def parse_id(value: Optional[str]) -> Optional[UUID]:
    """Return the UUID for a well-shaped identifier, None otherwise."""
    if not value:
        return None
    value = value.strip()
    if not ID_PATTERN.match(value):
        return None
    try:
        return UUID(value)
    except ValueError:
        # Right length and alphabet but misplaced dashes
        return None


def parse_id_list(values: Iterable[str]) -> list[UUID]:
    """Parse several identifiers, dropping malformed ones and duplicates."""
    seen: set[UUID] = set()
    result: list[UUID] = []
    for raw in values:
        parsed = parse_id(raw)
        if parsed is not None and parsed not in seen:
            seen.add(parsed)
            result.append(parsed)
    return result
