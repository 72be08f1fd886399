"""JSON payload codec for cache entries."""

import json
from typing import Any

from gencache.domain.exceptions import SerializationException


class JsonSerializer:
    """Encode values to UTF-8 JSON text and back. No envelope, no compression."""

    def encode(self, value: Any) -> str:
        """Return the JSON text of value.

        Raises:
            SerializationException: If value is not JSON-serializable.
        """
        try:
            return json.dumps(value)
        except (TypeError, ValueError) as e:
            raise SerializationException("encode", str(e)) from e

    def decode(self, text: str | bytes) -> Any:
        """Return the value held by a JSON payload.

        Raises:
            SerializationException: If text is not valid JSON (or not UTF-8).
        """
        try:
            return json.loads(text)
        except (TypeError, ValueError) as e:
            raise SerializationException("decode", str(e)) from e
