"""
models/project.py
-----------------
Domain model for portfolio projects.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Project:
    """
    A single portfolio entry.

    Attributes:
        title: Display title.
        slug: Unique public identifier used in `/projects/<slug>`.
        category: Free-form category (e.g. 'branding', 'web').
        description: Short description shown on cards and detail pages.
        thumbnail: Media descriptor, e.g. {'url': 'a.png', 'alt': '...'}.
        tags: Ordered list of tag strings.
        images: Ordered list of media descriptors.
        client: Optional client name.
        year: Optional year of delivery.
        challenge: Optional long-form "the challenge" text.
        solution: Optional long-form "the solution" text.
        featured: Shown on the home page when True.
        id: UUID string (None until persisted).
        created_at: ISO-8601 creation timestamp (None until persisted).
    """
    title: str
    slug: str
    category: str
    description: str
    thumbnail: dict = field(default_factory=dict)
    tags: list[str] = field(default_factory=list)
    images: list[dict] = field(default_factory=list)
    client: Optional[str] = None
    year: Optional[int] = None
    challenge: Optional[str] = None
    solution: Optional[str] = None
    featured: bool = False
    id: Optional[str] = None
    created_at: Optional[str] = None
