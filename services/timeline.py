"""
services/timeline.py
--------------------
Experience timeline for the about page.

Pure functions: they take already-fetched entries and return text,
with no database access.
"""

from dataclasses import dataclass
from typing import Optional

WORK = "work"
EDUCATION = "education"

_DEFAULT_ICONS = {WORK: "💼", EDUCATION: "🎓"}

DEFAULT_TITLE = "My Journey"
DEFAULT_SUBTITLE = "A timeline of my professional experience and education in graphic design."


@dataclass
class TimelineItem:
    """One entry on the timeline, as shown to visitors."""
    title: str
    organization: str
    description: str
    date: str
    icon: Optional[str] = None
    type: Optional[str] = None


@dataclass
class TimelineCard:
    """A TimelineItem with its layout resolved."""
    item: TimelineItem
    index: int
    side: str  # 'right' | 'left'
    icon: str
    type: str

    @property
    def is_work(self) -> bool:
        return self.type == WORK


def experience_to_timeline(experience: Optional[list[dict]]) -> list[TimelineItem]:
    """
    Map stored about.experience entries to timeline items.

    Entries without an `end` are shown as ongoing ("start – Present").
    """
    items = []
    for entry in experience or []:
        start = entry.get("start", "")
        end = entry.get("end") or "Present"
        items.append(TimelineItem(
            title=entry.get("role", ""),
            organization=entry.get("company", ""),
            description=entry.get("description") or "",
            date=f"{start} – {end}" if start else end,
            icon=entry.get("icon"),
            type=entry.get("type"),
        ))
    return items


def build_timeline(items: list[TimelineItem]) -> list[TimelineCard]:
    """
    Resolve layout for each item.

    Even indexes slide in from the right and odd ones from the left.
    Items without a type are work entries; items without an icon get the
    icon of their type.
    """
    cards = []
    for index, item in enumerate(items):
        kind = item.type or WORK
        cards.append(TimelineCard(
            item=item,
            index=index,
            side="right" if index % 2 == 0 else "left",
            icon=item.icon or _DEFAULT_ICONS.get(kind, _DEFAULT_ICONS[WORK]),
            type=kind,
        ))
    return cards


def render_timeline(
    items: list[TimelineItem],
    title: str = DEFAULT_TITLE,
    subtitle: str = DEFAULT_SUBTITLE,
) -> Optional[str]:
    """
    Render the timeline section as Telegram Markdown.

    Returns:
        The section text, or None if there are no items.
    """
    if not items:
        return None

    lines = [f"*{title}*", f"_{subtitle}_", ""]
    for card in build_timeline(items):
        # Right-side cards are flush, left-side cards are indented.
        indent = "" if card.side == "right" else "    "
        lines.append(f"{indent}{card.icon} `{card.item.date}` *{card.item.title}*")
        if card.item.organization:
            lines.append(f"{indent}   {card.item.organization}")
        if card.item.description:
            lines.append(f"{indent}   {card.item.description}")
    return "\n".join(lines)
