"""
services/pages.py
-----------------
Renderers for the portfolio pages, as Telegram Markdown.

Every function here is a pure function of already-fetched models.
User-supplied text is escaped so titles with `_` or `*` can't break
the message formatting.
"""

from typing import Optional

from telegram.helpers import escape_markdown

from config import SITE_NAME
from models.about import About
from models.contact import Contact
from models.project import Project
from services.timeline import experience_to_timeline, render_timeline


def _md(text) -> str:
    return escape_markdown(str(text), version=1)


def render_project_card(project: Project) -> str:
    """One-paragraph summary used in listings."""
    star = "⭐ " if project.featured else ""
    header = f"{star}*{_md(project.title)}* · {_md(project.category)}"
    meta = [f"/project {_md(project.slug)}"]
    if project.year:
        meta.append(str(project.year))
    if project.tags:
        meta.append(" ".join(f"#{_md(tag)}" for tag in project.tags))
    return f"{header}\n{_md(project.description)}\n" + " | ".join(meta)


def render_project_list(projects: list[Project], heading: str = "Projects") -> str:
    if not projects:
        return f"*{_md(heading)}*\n\n📭 Nothing here yet."
    cards = "\n\n".join(render_project_card(p) for p in projects)
    return f"*{_md(heading)}* ({len(projects)})\n\n{cards}"


def render_project_detail(project: Project, related: Optional[list[Project]] = None) -> str:
    """Full project page with its related projects underneath."""
    lines = [f"*{_md(project.title)}*", f"🏷️ {_md(project.category)}"]
    if project.client:
        lines.append(f"👤 Client: {_md(project.client)}")
    if project.year:
        lines.append(f"📅 {project.year}")
    if project.tags:
        lines.append(" ".join(f"#{_md(tag)}" for tag in project.tags))
    lines += ["", _md(project.description)]
    if project.challenge:
        lines += ["", "*The challenge*", _md(project.challenge)]
    if project.solution:
        lines += ["", "*The solution*", _md(project.solution)]

    images = [img.get("url") for img in project.images if isinstance(img, dict) and img.get("url")]
    if images:
        lines += ["", "🖼️ " + "\n🖼️ ".join(_md(url) for url in images)]

    if related:
        lines += ["", "*Related projects*"]
        lines += [f"• {_md(p.title)} · /project {_md(p.slug)}" for p in related]
    return "\n".join(lines)


def render_about(about: Optional[About]) -> str:
    if about is None:
        return "📭 The about section hasn't been written yet."
    lines = []
    if about.hero and about.hero.get("headline"):
        lines.append(f"*{_md(about.hero['headline'])}*")
        if about.hero.get("subheadline"):
            lines.append(f"_{_md(about.hero['subheadline'])}_")
        lines.append("")
    lines.append(_md(about.bio))
    if about.skills:
        lines += ["", "*Skills*", ", ".join(_md(s) for s in about.skills)]

    timeline = render_timeline(experience_to_timeline(
        [{k: _md(v) if isinstance(v, str) else v for k, v in entry.items()}
         for entry in about.experience or []]
    ))
    if timeline:
        lines += ["", timeline]
    return "\n".join(lines)


def render_contact(contact: Optional[Contact]) -> str:
    if contact is None:
        return "📭 No contact details yet."
    lines = ["*Get in touch*", f"✉️ {_md(contact.email)}"]
    if contact.phone:
        lines.append(f"📞 {_md(contact.phone)}")
    if contact.address:
        lines.append(f"📍 {_md(contact.address)}")
    for platform, url in (contact.socials or {}).items():
        lines.append(f"🔗 {_md(platform)}: {_md(url)}")
    return "\n".join(lines)


def render_home(about: Optional[About], featured: list[Project]) -> str:
    """Landing page: hero banner and featured work."""
    headline = SITE_NAME
    subheadline = None
    if about and about.hero:
        headline = about.hero.get("headline") or SITE_NAME
        subheadline = about.hero.get("subheadline")

    lines = [f"*{_md(headline)}*"]
    if subheadline:
        lines.append(f"_{_md(subheadline)}_")
    lines.append("")
    if featured:
        lines.append(render_project_list(featured, heading="Featured work"))
    else:
        lines.append("/projects to browse all work.")
    return "\n".join(lines)


def render_admin(
    projects: list[Project],
    about: Optional[About],
    contact: Optional[Contact],
) -> str:
    """Admin overview with the ids needed by the edit/delete commands."""
    lines = ["*Admin*", ""]
    lines.append(f"About: `{about.id}`" if about else "About: not set (/set\\_about)")
    lines.append(f"Contact: `{contact.id}`" if contact else "Contact: not set (/set\\_contact)")
    lines += ["", f"*Projects* ({len(projects)})"]
    for p in projects:
        star = "⭐ " if p.featured else ""
        lines.append(f"{star}`{p.id}` {_md(p.slug)}")
    return "\n".join(lines)
