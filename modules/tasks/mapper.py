"""
Response mapping for task documents.

Firestore returns timestamps as datetime subclasses; the web client expects
the same ISO strings the JavaScript SDK produces (`toISOString()`).
"""

from datetime import datetime, timezone
from typing import Any

TIMESTAMP_FIELDS = ("created_at", "updated_at")


def to_iso_string(value: datetime) -> str:
    """Format a datetime as UTC ISO-8601 with milliseconds and a Z suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (
        value.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def normalize_timestamps(
    data: dict[str, Any],
    fields: tuple[str, ...] = TIMESTAMP_FIELDS,
) -> dict[str, Any]:
    """
    Return a copy of a document with timestamp fields converted to strings.

    Only the named fields are touched. Values that are not timestamps
    (already strings, numbers, None) pass through unchanged.
    """
    result = dict(data)
    for field in fields:
        value = result.get(field)
        if isinstance(value, datetime):
            result[field] = to_iso_string(value)
    return result


def with_document_id(doc_id: str, data: dict[str, Any]) -> dict[str, Any]:
    """Annotate document fields with the storage-assigned identifier."""
    return {"id": doc_id, **data}
