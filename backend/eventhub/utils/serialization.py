"""
Field decoding shared by the Event and Participant models.

JSON timestamps are RFC 3339 strings; BSON stores naive UTC datetimes.
Every helper raises ModelDecodeError when a value has the wrong type so
views can answer 400 and list iteration can skip the document.
"""
import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

# RFC 3339 allows any number of fraction digits
_FRACTION = re.compile(r"\.(\d+)")


class ModelDecodeError(ValueError):
    """A payload or stored document does not match the model's field types."""


def decode_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ModelDecodeError(f"field '{key}' must be a string")
    return value


def decode_datetime(data: Dict[str, Any], key: str) -> datetime:
    """Accept an RFC 3339 string (JSON) or a datetime (BSON)."""
    value = data.get(key)
    if value is None:
        return ZERO_TIME
    if isinstance(value, datetime):
        return as_utc(value)
    if not isinstance(value, str):
        raise ModelDecodeError(f"field '{key}' must be an RFC 3339 timestamp")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise ModelDecodeError(f"field '{key}' must be an RFC 3339 timestamp")
    if parsed.tzinfo is None:
        raise ModelDecodeError(f"field '{key}' must carry a timezone offset")
    # BSON dates keep milliseconds only
    parsed = parsed.replace(microsecond=parsed.microsecond // 1000 * 1000)
    return as_utc(parsed)


def decode_object_id(data: Dict[str, Any], key: str) -> Optional[ObjectId]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, ObjectId):
        raise ModelDecodeError(f"field '{key}' must be an ObjectId")
    return value


def decode_object_id_list(data: Dict[str, Any], key: str) -> List[ObjectId]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, ObjectId) for v in value):
        raise ModelDecodeError(f"field '{key}' must be a list of ObjectIds")
    return list(value)


def as_utc(value: datetime) -> datetime:
    # pymongo hands back naive datetimes that are already UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_datetime(value: datetime) -> str:
    """RFC 3339 in UTC with trailing fraction zeros trimmed."""
    value = as_utc(value)
    text = value.replace(microsecond=0, tzinfo=None).isoformat()
    if value.microsecond:
        text += ("." + "%06d" % value.microsecond).rstrip("0")
    return text + "Z"
