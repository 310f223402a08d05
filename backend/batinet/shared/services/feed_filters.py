"""
Feed Filters

Normalized criteria of a feed query.

Sanitize-then-default:
======================
The feed is lenient with its query string. Raw values are first
sanitized, then anything missing or unusable falls back to its default:

    ?tagIds=abc,<uuid>,<uuid>   → tag_ids = (<uuid>,)         malformed and duplicate IDs dropped
    ?companyId=nope             → company_id = None           filter ignored
    ?page=0 / ?page=x           → page = 1                    clamped / default
    ?page=10**20                → page * page_size ≤ 2**63-2  clamped so OFFSET fits
    ?search=%20%20              → search = None               whitespace-only is absent
    ?pageSize=500               → page_size = 100             clamped into 1..100
    ?type=all / ?type=          → kind = None                 unfiltered

Because the cache key is computed from the sanitized value, requests that
differ only in parameter order, omitted-vs-explicit defaults or dropped
garbage share one key.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional
from uuid import UUID

from batinet.config.settings import settings
from batinet.shared.models.enums import ContentType
from batinet.shared.utils.identifiers import parse_id, parse_id_list


ALL_KINDS = "all"

# Largest row offset a signed 64-bit OFFSET accepts once a page is added
MAX_OFFSET = 2**63 - 2


def _parse_int(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        return default


@dataclass(frozen=True)
class FeedFilters:
    """
    Sanitized feed criteria.

    Attributes:
        kind: Raw content type discriminant, None when unfiltered
        tag_ids: Sorted, de-duplicated tag IDs; empty means no tag filter
        company_id: Owning company filter
        author_id: Author filter
        search: Case-insensitive substring over title or body
        page: 1-based page number
        page_size: Rows per page
    """

    kind: Optional[str] = None
    tag_ids: tuple[UUID, ...] = ()
    company_id: Optional[UUID] = None
    author_id: Optional[UUID] = None
    search: Optional[str] = None
    page: int = 1
    page_size: int = settings.FEED_DEFAULT_PAGE_SIZE

    @classmethod
    def from_query(
        cls,
        *,
        kind: Optional[str] = None,
        tag_ids: Optional[str] = None,
        company_id: Optional[str] = None,
        author_id: Optional[str] = None,
        search: Optional[str] = None,
        page: Optional[str] = None,
        page_size: Optional[str] = None,
    ) -> "FeedFilters":
        """
        Build filters from raw query-string values.

        Never raises: every malformed value is dropped or replaced by its
        default.

        Args:
            kind: "type" parameter; "all" or empty means every type
            tag_ids: Comma-separated tag IDs
            company_id / author_id: Single IDs
            search: Free text matched as given; empty or whitespace-only
                means no search
            page / page_size: Integers as strings
        """
        kind = (kind or "").strip()
        if kind == ALL_KINDS:
            kind = ""

        parsed_tags = parse_id_list((tag_ids or "").split(","))

        if not (search or "").strip():
            search = None

        size = _parse_int(page_size, settings.FEED_DEFAULT_PAGE_SIZE)
        size = min(max(size, 1), settings.FEED_MAX_PAGE_SIZE)
        page_number = min(max(_parse_int(page, 1), 1), MAX_OFFSET // size)

        return cls(
            kind=kind or None,
            tag_ids=tuple(sorted(parsed_tags, key=str)),
            company_id=parse_id(company_id),
            author_id=parse_id(author_id),
            search=search,
            page=page_number,
            page_size=size,
        )

    @property
    def content_type(self) -> Optional[ContentType]:
        """The kind as an enum member, None when absent or unknown."""
        if self.kind is None:
            return None
        try:
            return ContentType(self.kind)
        except ValueError:
            return None

    @property
    def kind_is_unknown(self) -> bool:
        """True when a kind was requested that no content can have."""
        return self.kind is not None and self.content_type is None

    @property
    def offset(self) -> int:
        """Rows to skip for the current page."""
        return (self.page - 1) * self.page_size

    def cache_fields(self) -> dict[str, Any]:
        """JSON-ready view of every field that shapes the response."""
        return {
            "kind": self.kind,
            "tag_ids": [str(tag_id) for tag_id in self.tag_ids] or None,
            "company_id": str(self.company_id) if self.company_id else None,
            "author_id": str(self.author_id) if self.author_id else None,
            "search": self.search,
            "page": self.page,
            "page_size": self.page_size,
        }

    def cache_key(self) -> str:
        """Deterministic serialization; equal filters give equal keys."""
        return json.dumps(self.cache_fields(), sort_keys=True, separators=(",", ":"))
