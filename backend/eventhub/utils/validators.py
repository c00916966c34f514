"""Request validators."""
from bson import ObjectId, errors


def safe_object_id(value):
    """Parse a 24-hex identifier, returning None when it is malformed."""
    if not isinstance(value, str):
        return None
    try:
        return ObjectId(value)
    except errors.InvalidId:
        return None


def get_json_object(request):
    """Return the body as a dict whatever its Content-Type, or None if it is not a JSON object."""
    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        return None
    return payload
