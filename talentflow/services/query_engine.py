"""
Generic list pipeline: search, filter, sort, paginate.

The same four stages run for every collection. The only per-collection input
is the ``CollectionDescriptor`` (filter parameter names, searchable and
sortable fields, default page size).
"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from talentflow.repositories.collections import CollectionDescriptor
from talentflow.utils.time import parse_datetime

Record = dict[str, Any]

ALL = "all"
_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


@dataclass
class QueryParams:
    """A caller's list request, already parsed from query parameters."""

    search: Optional[str] = None
    filters: Mapping[str, Any] = field(default_factory=dict)
    sort_by: Optional[str] = None
    sort_order: str = "asc"
    page: int = 1
    limit: Optional[int] = None


def stringify(value: Any) -> str:
    """String form of a field value as used by free-text search."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Mapping):
        return " ".join(stringify(item) for item in value.values())
    if isinstance(value, (list, tuple, set)):
        return ",".join(stringify(item) for item in value)
    return str(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float))


def _is_date_field(field_name: str) -> bool:
    return "_at" in field_name or "date" in field_name


def search_records(
    records: Iterable[Record],
    term: Optional[str],
    fields: Optional[Sequence[str]] = None,
) -> List[Record]:
    """Keep records where any (or any listed) field contains ``term``, case-insensitively."""
    records = list(records)
    if not term:
        return records
    needle = term.lower()

    def matches(record: Record) -> bool:
        values = record.values() if fields is None else (record.get(name) for name in fields)
        return any(needle in stringify(value).lower() for value in values)

    return [record for record in records if matches(record)]


def filter_records(
    records: Iterable[Record],
    filters: Mapping[str, Any],
    descriptor: CollectionDescriptor,
) -> List[Record]:
    """Apply the descriptor's equality filters; absent, empty or "all" means no constraint."""
    records = list(records)
    for param, field_filter in descriptor.filters.items():
        raw = filters.get(param)
        if raw is None or raw == "" or raw == ALL:
            continue
        try:
            expected = field_filter.cast(raw)
        except (TypeError, ValueError):
            return []
        records = [record for record in records if record.get(field_filter.field) == expected]
    return records


def sort_records(records: Iterable[Record], sort_by: str, sort_order: str = "asc") -> List[Record]:
    """
    Stable sort on one field.

    Dates when the field name contains "_at" or "date", case-insensitive
    strings when any value is not a number, numbers otherwise. Records
    without a value (or with an unparseable date) always come last.
    """
    descending = str(sort_order).lower() == "desc"
    present: List[tuple[Any, Record]] = []
    missing: List[Record] = []

    if _is_date_field(sort_by):
        for record in records:
            when = parse_datetime(record.get(sort_by))
            if when is None:
                missing.append(record)
            else:
                present.append((when, record))
    else:
        for record in records:
            value = record.get(sort_by)
            if value is None:
                missing.append(record)
            else:
                present.append((value, record))
        if any(not _is_number(value) for value, _ in present):
            present = [(stringify(value).lower(), record) for value, record in present]

    # reverse=True keeps equal keys in their original order
    present.sort(key=lambda pair: pair[0], reverse=descending)
    return [record for _, record in present] + missing


def default_order(records: Iterable[Record]) -> List[Record]:
    """Manual ``order`` ascending first, then everything else newest first."""
    ranked: List[Record] = []
    unranked: List[Record] = []
    for record in records:
        (ranked if _is_number(record.get("order")) else unranked).append(record)
    ranked.sort(key=lambda record: record["order"])
    unranked.sort(key=lambda record: parse_datetime(record.get("created_at")) or _EPOCH, reverse=True)
    return ranked + unranked


def paginate(records: Sequence[Record], page: int = 1, limit: int = 10) -> dict[str, Any]:
    """Slice one page and describe it. ``total`` counts records before slicing."""
    page = max(int(page), 1)
    limit = max(int(limit), 1)
    offset = (page - 1) * limit
    total = len(records)
    return {
        "data": list(records[offset:offset + limit]),
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "total_pages": math.ceil(total / limit),
            "has_more": offset + limit < total,
        },
    }


class QueryEngine:
    """Runs the list pipeline for one collection."""

    def __init__(self, descriptor: CollectionDescriptor):
        self.descriptor = descriptor

    def order(self, records: Iterable[Record], sort_by: Optional[str], sort_order: str) -> List[Record]:
        if not sort_by and self.descriptor.default_sort:
            sort_by, sort_order = self.descriptor.default_sort
        if sort_by and self.descriptor.can_sort_by(sort_by):
            return sort_records(records, sort_by, sort_order)
        return default_order(records)

    def select(self, records: Iterable[Record], params: QueryParams) -> List[Record]:
        """Search, filter and sort without paginating."""
        matched = search_records(records, params.search, self.descriptor.searchable_fields)
        matched = filter_records(matched, params.filters, self.descriptor)
        return self.order(matched, params.sort_by, params.sort_order)

    def run(self, records: Iterable[Record], params: QueryParams) -> dict[str, Any]:
        limit = params.limit or self.descriptor.default_limit
        return paginate(self.select(records, params), params.page, limit)
