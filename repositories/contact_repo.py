"""
repositories/contact_repo.py
-----------------------------
Data access layer for the single-row `contact` table.
"""

from typing import Any, Optional

from psycopg2.extras import Json

from db.connection import get_connection, release_connection
from models.contact import Contact
from services.revalidation import CONTACT_PAGES, revalidate_paths
from utils.ids import is_uuid, new_id, utc_now
from utils.json_fields import decode_json, to_iso
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, email, phone, socials, address, created_at"
UPDATABLE_FIELDS = frozenset({"email", "phone", "socials", "address"})


class ContactRepository:
    """Repository for the contact section. The table holds at most one row."""

    def add(self, contact: Contact) -> Contact:
        """
        Create the contact row.

        Raises:
            psycopg2.errors.UniqueViolation: If the row already exists.
            psycopg2.errors.CheckViolation: If `email` is empty.
        """
        sql = f"""
            INSERT INTO contact (id, email, phone, socials, address, created_at)
            VALUES (%s, %s, %s, %s, %s, %s)
            RETURNING {_COLUMNS};
        """
        socials = None if contact.socials is None else Json(contact.socials)
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (
                    new_id(), contact.email, contact.phone, socials,
                    contact.address, utc_now(),
                ))
                row = cur.fetchone()
            conn.commit()
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add contact details: {e}")
            raise
        finally:
            release_connection(conn)

        saved = self._row_to_contact(row)
        logger.info(f"Added contact details #{saved.id}")
        revalidate_paths(CONTACT_PAGES)
        return saved

    def get(self) -> Optional[Contact]:
        """Return the contact details, or None if not created yet."""
        sql = f"SELECT {_COLUMNS} FROM contact LIMIT 1;"
        return self._fetch_one(sql, ())

    def get_by_id(self, contact_id: str) -> Optional[Contact]:
        if not is_uuid(contact_id):
            return None
        sql = f"SELECT {_COLUMNS} FROM contact WHERE id = %s;"
        return self._fetch_one(sql, (contact_id,))

    def update(self, contact_id: str, fields: dict[str, Any]) -> Optional[Contact]:
        """
        Overwrite only the given fields.

        Returns:
            The updated row, or None if no row has that id.

        Raises:
            ValueError: If `fields` names a column that cannot be updated.
        """
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update contact field(s): {', '.join(sorted(unknown))}")
        if not fields:
            return self.get_by_id(contact_id)
        if not is_uuid(contact_id):
            return None

        assignments = ", ".join(f"{name} = %s" for name in fields)
        params = [
            Json(value) if name == "socials" and value is not None else value
            for name, value in fields.items()
        ]
        params.append(contact_id)
        sql = f"UPDATE contact SET {assignments} WHERE id = %s RETURNING {_COLUMNS};"

        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
            conn.commit()
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to update contact details #{contact_id}: {e}")
            raise
        finally:
            release_connection(conn)

        if row is None:
            return None
        logger.info(f"Updated contact details: {', '.join(fields)}")
        revalidate_paths(CONTACT_PAGES)
        return self._row_to_contact(row)

    def delete(self, contact_id: str) -> bool:
        """Delete the contact row. Returns True if it existed."""
        if not is_uuid(contact_id):
            return False
        sql = "DELETE FROM contact WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (contact_id,))
                deleted = cur.rowcount > 0
            conn.commit()
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to delete contact details #{contact_id}: {e}")
            raise
        finally:
            release_connection(conn)

        if deleted:
            logger.info(f"Deleted contact details #{contact_id}")
            revalidate_paths(CONTACT_PAGES)
        return deleted

    def _fetch_one(self, sql: str, params) -> Optional[Contact]:
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
                return self._row_to_contact(row) if row else None
        finally:
            release_connection(conn)

    @staticmethod
    def _row_to_contact(row: tuple) -> Contact:
        return Contact(
            id=str(row[0]),
            email=row[1],
            phone=row[2],
            socials=decode_json(row[3]),
            address=row[4],
            created_at=to_iso(row[5]),
        )
