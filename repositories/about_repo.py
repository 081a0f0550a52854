"""
repositories/about_repo.py
---------------------------
Data access layer for the single-row `about` table.
"""

from typing import Any, Optional

from psycopg2.extras import Json

from db.connection import get_connection, release_connection
from models.about import About
from services.revalidation import ABOUT_PAGES, revalidate_paths
from utils.ids import is_uuid, new_id, utc_now
from utils.json_fields import decode_json, to_iso
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, bio, skills, experience, hero, created_at"
_JSON_FIELDS = frozenset({"skills", "experience", "hero"})
UPDATABLE_FIELDS = frozenset({"bio", "skills", "experience", "hero"})


def _json_or_null(value: Any):
    return None if value is None else Json(value)


class AboutRepository:
    """Repository for the about section. The table holds at most one row."""

    def add(self, about: About) -> About:
        """
        Create the about row.

        Raises:
            psycopg2.errors.UniqueViolation: If the row already exists.
            psycopg2.errors.CheckViolation: If `bio` is empty.
        """
        sql = f"""
            INSERT INTO about (id, bio, skills, experience, hero, created_at)
            VALUES (%s, %s, %s, %s, %s, %s)
            RETURNING {_COLUMNS};
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (
                    new_id(), about.bio, Json(about.skills),
                    _json_or_null(about.experience), _json_or_null(about.hero), utc_now(),
                ))
                row = cur.fetchone()
            conn.commit()
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add about section: {e}")
            raise
        finally:
            release_connection(conn)

        saved = self._row_to_about(row)
        logger.info(f"Added about section #{saved.id}")
        revalidate_paths(ABOUT_PAGES)
        return saved

    def get(self) -> Optional[About]:
        """Return the about section, or None if it has not been created."""
        sql = f"SELECT {_COLUMNS} FROM about LIMIT 1;"
        return self._fetch_one(sql, ())

    def get_by_id(self, about_id: str) -> Optional[About]:
        if not is_uuid(about_id):
            return None
        sql = f"SELECT {_COLUMNS} FROM about WHERE id = %s;"
        return self._fetch_one(sql, (about_id,))

    def update(self, about_id: str, fields: dict[str, Any]) -> Optional[About]:
        """
        Overwrite only the given fields.

        Returns:
            The updated row, or None if no row has that id.

        Raises:
            ValueError: If `fields` names a column that cannot be updated.
        """
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update about field(s): {', '.join(sorted(unknown))}")
        if not fields:
            return self.get_by_id(about_id)
        if not is_uuid(about_id):
            return None

        assignments = ", ".join(f"{name} = %s" for name in fields)
        params = [
            _json_or_null(value) if name in _JSON_FIELDS else value
            for name, value in fields.items()
        ]
        params.append(about_id)
        sql = f"UPDATE about SET {assignments} WHERE id = %s RETURNING {_COLUMNS};"

        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
            conn.commit()
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to update about section #{about_id}: {e}")
            raise
        finally:
            release_connection(conn)

        if row is None:
            return None
        logger.info(f"Updated about section: {', '.join(fields)}")
        revalidate_paths(ABOUT_PAGES)
        return self._row_to_about(row)

    def delete(self, about_id: str) -> bool:
        """Delete the about row. Returns True if it existed."""
        if not is_uuid(about_id):
            return False
        sql = "DELETE FROM about WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (about_id,))
                deleted = cur.rowcount > 0
            conn.commit()
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to delete about section #{about_id}: {e}")
            raise
        finally:
            release_connection(conn)

        if deleted:
            logger.info(f"Deleted about section #{about_id}")
            revalidate_paths(ABOUT_PAGES)
        return deleted

    def _fetch_one(self, sql: str, params) -> Optional[About]:
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
                return self._row_to_about(row) if row else None
        finally:
            release_connection(conn)

    @staticmethod
    def _row_to_about(row: tuple) -> About:
        return About(
            id=str(row[0]),
            bio=row[1],
            skills=decode_json(row[2], []),
            experience=decode_json(row[3]),
            hero=decode_json(row[4]),
            created_at=to_iso(row[5]),
        )
