"""
utils/json_fields.py
--------------------
Normalization helpers applied once at the storage boundary.

JSONB columns usually come back from psycopg2 already decoded, but rows
written by other clients (or read through a text cast) may hold the
encoded string instead. Every row mapper goes through `decode_json` so
callers only ever see native structures.
"""

import json
from datetime import date, datetime
from typing import Any, Optional

from utils.logger import get_logger

logger = get_logger(__name__)


def decode_json(value: Any, default: Any = None) -> Any:
    """
    Return a JSON column value as a native Python structure.

    Args:
        value: Raw value from the driver (native structure, encoded
            str/bytes, or None).
        default: Returned for NULL or undecodable input.

    Returns:
        The decoded structure, the value itself if it was already native,
        or `default`.
    """
    if value is None:
        return default
    if isinstance(value, (bytes, bytearray, memoryview)):
        value = bytes(value).decode("utf-8")
    if isinstance(value, str):
        try:
            return json.loads(value)
        except ValueError as e:
            logger.warning(f"Undecodable JSON field, using default: {e}")
            return default
    return value


def to_iso(value: Any) -> Optional[str]:
    """Convert a timestamp from the driver to an ISO-8601 string."""
    if value is None:
        return None
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)
