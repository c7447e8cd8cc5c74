"""JSON serialization utilities."""
import json


def json_dump(payload: object) -> str:
    """Serialize object to pretty JSON string."""
    return json.dumps(payload, ensure_ascii=False, indent=2)


def json_dump_compact(payload: object) -> str:
    """Serialize object to compact JSON string (for storage columns)."""
    return json.dumps(payload, ensure_ascii=False)


def json_load(data: str) -> object:
    """Deserialize JSON string to object."""
    return json.loads(data)


def json_load_dict(data: str | None) -> dict[str, object]:
    """Deserialize a stored JSON object, falling back to an empty dict."""
    if not data:
        return {}
    loaded = json_load(data)
    return loaded if isinstance(loaded, dict) else {}
