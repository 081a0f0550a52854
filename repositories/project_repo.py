"""
repositories/project_repo.py
-----------------------------
Data access layer for portfolio projects.
All SQL queries related to the `projects` table live here.
"""

from typing import Any, Optional

from psycopg2.extras import Json

from db.connection import get_connection, release_connection
from models.project import Project
from services.revalidation import PROJECT_PAGES, revalidate_paths
from utils.ids import is_uuid, new_id, utc_now
from utils.json_fields import decode_json, to_iso
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = (
    "id, title, slug, category, tags, thumbnail, images, client, year, "
    "description, challenge, solution, featured, created_at"
)
_JSON_FIELDS = frozenset({"tags", "thumbnail", "images"})
UPDATABLE_FIELDS = frozenset({
    "title", "slug", "category", "tags", "thumbnail", "images", "client",
    "year", "description", "challenge", "solution", "featured",
})


class ProjectRepository:
    """Repository for CRUD operations on the projects table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, project: Project) -> Project:
        """
        Insert a new project with a generated id and creation time.

        Args:
            project: The Project to persist (`id`/`created_at` are ignored).

        Returns:
            The stored project as read back from the database.

        Raises:
            psycopg2.errors.UniqueViolation: If the slug is already taken.
        """
        sql = f"""
            INSERT INTO projects
                (id, title, slug, category, tags, thumbnail, images, client, year,
                 description, challenge, solution, featured, created_at)
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
            RETURNING {_COLUMNS};
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (
                    new_id(), project.title, project.slug, project.category,
                    Json(project.tags), Json(project.thumbnail), Json(project.images),
                    project.client, project.year, project.description,
                    project.challenge, project.solution, project.featured, utc_now(),
                ))
                row = cur.fetchone()
            conn.commit()
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add project '{project.slug}': {e}")
            raise
        finally:
            release_connection(conn)

        saved = self._row_to_project(row)
        logger.info(f"Added project '{saved.slug}' #{saved.id}")
        revalidate_paths(PROJECT_PAGES)
        return saved

    # ── READ ──────────────────────────────────────────────

    def get_all(self) -> list[Project]:
        """Get every project, newest first."""
        sql = f"SELECT {_COLUMNS} FROM projects ORDER BY created_at DESC;"
        return self._fetch_all(sql, ())

    def get_by_id(self, project_id: str) -> Optional[Project]:
        """Fetch a single project by primary key, or None."""
        if not is_uuid(project_id):
            return None
        sql = f"SELECT {_COLUMNS} FROM projects WHERE id = %s;"
        return self._fetch_one(sql, (project_id,))

    def get_by_slug(self, slug: str) -> Optional[Project]:
        """Fetch a single project by its slug (case-sensitive), or None."""
        sql = f"SELECT {_COLUMNS} FROM projects WHERE slug = %s;"
        return self._fetch_one(sql, (slug,))

    def get_related(self, slug: str, limit: int = 3) -> list[Project]:
        """
        Pick projects to show next to `slug`.

        Same-category projects come first; if there are fewer than `limit`
        of them the rest is filled from other categories. The project
        itself is never included.

        Args:
            slug: Slug of the project being viewed.
            limit: Maximum number of projects returned.

        Returns:
            Up to `limit` projects; empty if the slug is unknown.
        """
        if limit <= 0:
            return []
        current = self.get_by_slug(slug)
        if current is None:
            return []

        related = self._fetch_all(
            f"""
            SELECT {_COLUMNS} FROM projects
            WHERE category = %s AND slug <> %s
            ORDER BY created_at DESC
            LIMIT %s;
            """,
            (current.category, slug, limit),
        )
        if len(related) < limit:
            related += self._fetch_all(
                f"""
                SELECT {_COLUMNS} FROM projects
                WHERE category <> %s AND slug <> %s
                ORDER BY created_at DESC
                LIMIT %s;
                """,
                (current.category, slug, limit - len(related)),
            )
        return related

    def get_featured(self, limit: int = 3) -> list[Project]:
        """Get up to `limit` featured projects, newest first."""
        if limit <= 0:
            return []
        sql = f"""
            SELECT {_COLUMNS} FROM projects
            WHERE featured = TRUE
            ORDER BY created_at DESC
            LIMIT %s;
        """
        return self._fetch_all(sql, (limit,))

    # ── UPDATE ────────────────────────────────────────────

    def update(self, project_id: str, fields: dict[str, Any]) -> Optional[Project]:
        """
        Overwrite only the given fields of a project.

        Args:
            project_id: Primary key.
            fields: Column name -> new value. Must be a subset of
                UPDATABLE_FIELDS.

        Returns:
            The updated project, or None if no project has that id.

        Raises:
            ValueError: If `fields` names a column that cannot be updated.
        """
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update project field(s): {', '.join(sorted(unknown))}")
        if not fields:
            return self.get_by_id(project_id)
        if not is_uuid(project_id):
            return None

        assignments = ", ".join(f"{name} = %s" for name in fields)
        params = [
            Json(value) if name in _JSON_FIELDS else value
            for name, value in fields.items()
        ]
        params.append(project_id)
        sql = f"UPDATE projects SET {assignments} WHERE id = %s RETURNING {_COLUMNS};"

        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
            conn.commit()
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to update project #{project_id}: {e}")
            raise
        finally:
            release_connection(conn)

        if row is None:
            return None
        logger.info(f"Updated project #{project_id}: {', '.join(fields)}")
        revalidate_paths(PROJECT_PAGES)
        return self._row_to_project(row)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, project_id: str) -> bool:
        """
        Delete a project by id.

        Returns:
            True if a row was deleted, False otherwise.
        """
        if not is_uuid(project_id):
            return False
        sql = "DELETE FROM projects WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (project_id,))
                deleted = cur.rowcount > 0
            conn.commit()
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to delete project #{project_id}: {e}")
            raise
        finally:
            release_connection(conn)

        if deleted:
            logger.info(f"Deleted project #{project_id}")
            revalidate_paths(PROJECT_PAGES)
        return deleted

    # ── HELPERS ───────────────────────────────────────────

    def _fetch_one(self, sql: str, params) -> Optional[Project]:
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
                return self._row_to_project(row) if row else None
        finally:
            release_connection(conn)

    def _fetch_all(self, sql: str, params) -> list[Project]:
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                return [self._row_to_project(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)

    @staticmethod
    def _row_to_project(row: tuple) -> Project:
        """Convert a database row tuple (in `_COLUMNS` order) to a Project."""
        return Project(
            id=str(row[0]),
            title=row[1],
            slug=row[2],
            category=row[3],
            tags=decode_json(row[4], []),
            thumbnail=decode_json(row[5], {}),
            images=decode_json(row[6], []),
            client=row[7],
            year=row[8],
            description=row[9],
            challenge=row[10],
            solution=row[11],
            featured=bool(row[12]),
            created_at=to_iso(row[13]),
        )
