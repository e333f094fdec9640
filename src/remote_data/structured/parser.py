"""JSON parsing utilities for RemoteData decoding."""

from __future__ import annotations

import json
from typing import Any

from .errors import DecodeError


def parse_json_if_needed(value: str | bytes | Any) -> Any:
    """Parse JSON text if the value is a string or bytes.

    Any other value is returned as-is.

    Args:
        value: The value to potentially parse as JSON

    Returns:
        The parsed JSON object, or the original value if not text

    Raises:
        DecodeError: If the value is text but cannot be parsed as JSON
    """
    if isinstance(value, (str, bytes, bytearray)):
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            raise DecodeError(f"Invalid JSON: {e.msg} at position {e.pos}", value) from e
        except UnicodeDecodeError as e:
            raise DecodeError(f"Failed to parse JSON: {e}", value) from e
    return value
