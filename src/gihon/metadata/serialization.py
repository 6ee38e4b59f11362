# ABOUTME: Converts between the ComicMetadata dataclass and its metadata.json form.
# ABOUTME: Wraps JSON failures in SerializationError so callers see one error type.

import json
from typing import Any

from gihon.errors import SerializationError
from gihon.metadata.types import ComicMetadata

_FIELDS = ("title", "series", "writer", "summary", "year")


def metadata_to_dict(metadata: ComicMetadata) -> dict[str, str]:
    """Convert a ComicMetadata instance to a plain dict in field order."""
    return {name: getattr(metadata, name) for name in _FIELDS}


def metadata_from_dict(data: Any) -> ComicMetadata:
    """Build a ComicMetadata from a decoded JSON object.

    Missing keys default to "". Unknown keys are ignored.

    Raises:
        SerializationError: If data is not an object or a field is not a string.
    """
    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object for metadata, got {type(data).__name__}"
        )

    values: dict[str, str] = {}
    for name in _FIELDS:
        value = data.get(name, "")
        if not isinstance(value, str):
            raise SerializationError(
                f"Metadata field '{name}' must be a string, got {type(value).__name__}"
            )
        values[name] = value
    return ComicMetadata(**values)


def metadata_to_json(metadata: ComicMetadata) -> str:
    """Serialize metadata as pretty-printed JSON."""
    return json.dumps(metadata_to_dict(metadata), indent=2, ensure_ascii=False)


def metadata_from_json(text: str) -> ComicMetadata:
    """Parse metadata.json content.

    Raises:
        SerializationError: If the text is not valid metadata JSON.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Failed to parse metadata: {exc}") from exc
    return metadata_from_dict(data)
