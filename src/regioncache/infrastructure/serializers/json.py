"""JSON serializer implementation."""

import json
from datetime import date, datetime
from typing import Any

_RESERVED_KEYS = frozenset({"__date__", "__datetime__", "__dict__"})


class SerializationError(Exception):
    """Raised when serialization or deserialization fails."""

    pass


class JsonSerializer:
    """JSON serializer for values kept in a remote store.

    Dates and datetimes are tagged on the way in and restored on the way
    out. Dicts that use one of the tag keys themselves are wrapped so they
    read back unchanged. Other objects are stored through their
    ``__dict__`` and come back as plain dicts.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the JSON serializer.

        Args:
            encoding: Character encoding to use.
        """
        self._encoding = encoding

    def serialize(self, value: Any) -> bytes:
        """Serialize value to bytes.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        try:
            json_str = json.dumps(self._escape(value), default=self._default_encoder)
            return json_str.encode(self._encoding)
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e

    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes to value.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        try:
            json_str = data.decode(self._encoding)
            return json.loads(json_str, object_hook=self._object_hook)
        except (json.JSONDecodeError, UnicodeDecodeError, ValueError) as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e

    def _escape(self, value: Any) -> Any:
        """Wrap dicts using a reserved key so they decode as plain dicts.

        Such dicts are written as ``{"__dict__": [[key, value], ...]}``.
        """
        if isinstance(value, dict):
            escaped = {k: self._escape(v) for k, v in value.items()}
            if _RESERVED_KEYS.intersection(escaped):
                return {"__dict__": [[k, v] for k, v in escaped.items()]}
            return escaped
        if isinstance(value, (list, tuple)):
            return [self._escape(v) for v in value]
        return value

    def _default_encoder(self, obj: Any) -> Any:
        if isinstance(obj, datetime):
            return {"__datetime__": obj.isoformat()}
        if isinstance(obj, date):
            return {"__date__": obj.isoformat()}
        if hasattr(obj, "__dict__"):
            return self._escape(obj.__dict__)
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

    @staticmethod
    def _object_hook(obj: dict[str, Any]) -> Any:
        if len(obj) == 1:
            if "__datetime__" in obj:
                return datetime.fromisoformat(obj["__datetime__"])
            if "__date__" in obj:
                return date.fromisoformat(obj["__date__"])
            if "__dict__" in obj:
                return dict(obj["__dict__"])
        return obj
