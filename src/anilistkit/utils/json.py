"""JSON serialization helpers for anilistkit.

Provides an encoder for types not natively supported by the standard library,
used when the CLI prints results as JSON.
- datetime objects are stored in ISO 8601 format for portability.
"""

import json
from datetime import datetime
from typing import Any, Self


class DateTimeEncoder(json.JSONEncoder):
    """Custom JSON encoder for anilistkit results."""

    def default(self: Self, obj: object) -> Any:  # noqa: ANN401
        """Convert objects to JSON-serializable format.

        Args:
            obj: Object to serialize (may be datetime or other types)

        Returns:
            JSON-serializable representation of the object.
            - datetime: ISO 8601 string
            - Otherwise: falls back to base class
        """
        if isinstance(obj, datetime):
            return obj.isoformat()
        # Let the base class default method handle it or raise TypeError
        return super().default(obj)
