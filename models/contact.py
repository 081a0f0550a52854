"""
models/contact.py
-----------------
Domain model for the single-row Contact section.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Contact:
    """
    Contact details.

    Attributes:
        email: Required, non-empty. Not checked for syntax.
        phone: Optional phone number.
        socials: Optional mapping of platform name to profile URL.
        address: Optional postal address or city.
        id: UUID string (None until persisted).
        created_at: ISO-8601 creation timestamp.
    """
    email: str
    phone: Optional[str] = None
    socials: Optional[dict[str, str]] = None
    address: Optional[str] = None
    id: Optional[str] = None
    created_at: Optional[str] = None
