"""
services/portfolio_service.py
------------------------------
Business logic behind the bot's pages and admin commands.
Reads go through the page cache; writes go through the repositories,
which revalidate the affected pages once the write is committed.
"""

from typing import Any, Optional

from psycopg2 import errors

from config import FEATURED_PROJECTS_LIMIT, RELATED_PROJECTS_LIMIT
from repositories.about_repo import AboutRepository
from repositories.contact_repo import ContactRepository
from repositories.project_repo import ProjectRepository
from services import pages
from services.page_cache import PageCache, page_cache
from services.payloads import (
    about_from_payload,
    clean_about_fields,
    clean_contact_fields,
    clean_project_fields,
    contact_from_payload,
    project_from_payload,
)
from utils.logger import get_logger

logger = get_logger(__name__)


class PortfolioService:
    """
    Renders portfolio pages and applies admin edits.

    Page methods return Markdown text (or None for an unknown slug).
    Admin methods return a short status message for the editor.
    """

    def __init__(self, cache: Optional[PageCache] = None):
        self.projects = ProjectRepository()
        self.about = AboutRepository()
        self.contact = ContactRepository()
        self.cache = cache if cache is not None else page_cache

    # ── PAGES ─────────────────────────────────────────────

    def home_page(self) -> str:
        return self.cache.get_or_render("/", lambda: pages.render_home(
            self.about.get(), self.projects.get_featured(FEATURED_PROJECTS_LIMIT),
        ))

    def projects_page(self) -> str:
        return self.cache.get_or_render(
            "/projects", lambda: pages.render_project_list(self.projects.get_all()),
        )

    def project_page(self, slug: str) -> Optional[str]:
        """Detail page for `slug`, or None if there is no such project."""
        path = f"/projects/{slug}"
        cached = self.cache.get(path)
        if cached is not None:
            return cached
        project = self.projects.get_by_slug(slug)
        if project is None:
            return None
        related = self.projects.get_related(slug, RELATED_PROJECTS_LIMIT)
        return self.cache.get_or_render(
            path, lambda: pages.render_project_detail(project, related),
        )

    def about_page(self) -> str:
        return self.cache.get_or_render("/about", lambda: pages.render_about(self.about.get()))

    def contact_page(self) -> str:
        return self.cache.get_or_render("/contact", lambda: pages.render_contact(self.contact.get()))

    def admin_page(self) -> str:
        return self.cache.get_or_render("/admin", lambda: pages.render_admin(
            self.projects.get_all(), self.about.get(), self.contact.get(),
        ))

    # ── PROJECT EDITS ─────────────────────────────────────

    def create_project(self, data: dict[str, Any]) -> str:
        """
        Create a project from a payload.

        Raises:
            ValueError: If the payload is incomplete or malformed.
        """
        project = project_from_payload(data)
        try:
            saved = self.projects.add(project)
        except errors.UniqueViolation:
            return f"⚠️ A project with slug '{project.slug}' already exists."
        return f"✅ Project created: {saved.title}\n🔖 {saved.id}\n/project {saved.slug}"

    def edit_project(self, project_id: str, data: dict[str, Any]) -> str:
        fields = clean_project_fields(data)
        if not fields:
            return "⚠️ Nothing to change. Give at least one field."
        try:
            updated = self.projects.update(project_id, fields)
        except errors.UniqueViolation:
            return f"⚠️ A project with slug '{fields.get('slug')}' already exists."
        if updated is None:
            return f"⚠️ No project with id {project_id}."
        return f"✏️ Updated {updated.title}: {', '.join(fields)}"

    def delete_project(self, project_id: str) -> str:
        if self.projects.delete(project_id):
            return f"🗑️ Project {project_id} deleted."
        return f"⚠️ No project with id {project_id}."

    # ── SINGLETON EDITS ───────────────────────────────────

    def save_about(self, data: dict[str, Any]) -> str:
        """Create the about section, or update the given fields if it exists."""
        current = self.about.get()
        if current is None:
            saved = self.about.add(about_from_payload(data))
            return f"✅ About section created ({saved.id})."
        fields = clean_about_fields(data)
        if not fields:
            return "⚠️ Nothing to change. Give at least one field."
        if self.about.update(current.id, fields) is None:
            return "⚠️ The about section was removed meanwhile. Try again."
        return f"✏️ About section updated: {', '.join(fields)}"

    def delete_about(self) -> str:
        current = self.about.get()
        if current is None or not self.about.delete(current.id):
            return "⚠️ There is no about section."
        return "🗑️ About section deleted."

    def save_contact(self, data: dict[str, Any]) -> str:
        """Create the contact details, or update the given fields if they exist."""
        current = self.contact.get()
        if current is None:
            saved = self.contact.add(contact_from_payload(data))
            return f"✅ Contact details created ({saved.id})."
        fields = clean_contact_fields(data)
        if not fields:
            return "⚠️ Nothing to change. Give at least one field."
        if self.contact.update(current.id, fields) is None:
            return "⚠️ The contact details were removed meanwhile. Try again."
        return f"✏️ Contact details updated: {', '.join(fields)}"

    def delete_contact(self) -> str:
        current = self.contact.get()
        if current is None or not self.contact.delete(current.id):
            return "⚠️ There are no contact details."
        return "🗑️ Contact details deleted."
