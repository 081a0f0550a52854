"""
utils/ids.py
------------
Primary key and timestamp generation for new rows.
"""

import uuid
from datetime import datetime, timezone
from typing import Any


def new_id() -> str:
    """Generate a random UUID4 primary key as a string."""
    return str(uuid.uuid4())


def is_uuid(value: Any) -> bool:
    """
    True if `value` is a UUID in canonical hyphenated hex form (either case).

    Repositories treat keys that fail this as not found without querying.
    Other spellings `uuid.UUID` takes (e.g. `urn:uuid:...`, which PostgreSQL
    rejects) fail too.
    """
    text = str(value).lower()
    try:
        return str(uuid.UUID(text)) == text
    except ValueError:
        return False


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
