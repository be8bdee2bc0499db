"""
Deterministic JSON serialization utilities.

Used to turn record bodies into plain JSON documents before they are
persisted, so datetimes and sets survive the JSON column round trip.
"""

import json
from datetime import date, datetime
from decimal import Decimal
from typing import Any


def _canonical_default(value: Any) -> Any:
    """Serialize unsupported types into stable JSON-friendly values."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, set):
        return sorted(value)
    raise TypeError(f"Type {type(value)} not serializable")


def canonical_dumps(value: Any) -> str:
    """Return deterministic JSON with sorted keys and tight separators."""
    return json.dumps(
        value,
        sort_keys=True,
        separators=(",", ":"),
        default=_canonical_default,
        ensure_ascii=True,
    )


def to_document(value: Any) -> Any:
    """Return a JSON-native copy of ``value`` (dicts, lists, str, numbers)."""
    return json.loads(canonical_dumps(value))
