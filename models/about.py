"""
models/about.py
---------------
Domain model for the single-row About section.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class About:
    """
    Bio, skills, work history and hero banner.

    Attributes:
        bio: Free text biography (required, non-empty).
        skills: Ordered list of skill names.
        experience: Ordered entries shaped like
            {'company', 'role', 'start', 'end'?, 'description'?}.
        hero: Optional {'headline', 'subheadline'?, 'image'?}.
        id: UUID string (None until persisted).
        created_at: ISO-8601 creation timestamp.
    """
    bio: str
    skills: list[str] = field(default_factory=list)
    experience: Optional[list[dict]] = None
    hero: Optional[dict] = None
    id: Optional[str] = None
    created_at: Optional[str] = None
