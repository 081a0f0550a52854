"""
db/init_db.py
-------------
Creates the portfolio schema if it does not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- About: single-row bio/skills/experience/hero.
-- The always-true unique `singleton` column rejects a second row.
CREATE TABLE IF NOT EXISTS about (
    id              UUID PRIMARY KEY,
    singleton       BOOLEAN NOT NULL DEFAULT TRUE UNIQUE CHECK (singleton),
    bio             TEXT NOT NULL CHECK (bio <> ''),
    skills          JSONB NOT NULL DEFAULT '[]'::jsonb,
    experience      JSONB,
    hero            JSONB,
    created_at      TIMESTAMPTZ NOT NULL DEFAULT NOW()
);

-- Contact: single-row email/phone/socials/address.
CREATE TABLE IF NOT EXISTS contact (
    id              UUID PRIMARY KEY,
    singleton       BOOLEAN NOT NULL DEFAULT TRUE UNIQUE CHECK (singleton),
    email           TEXT NOT NULL CHECK (email <> ''),
    phone           TEXT,
    socials         JSONB,
    address         TEXT,
    created_at      TIMESTAMPTZ NOT NULL DEFAULT NOW()
);

-- Projects: portfolio entries, publicly addressed by slug.
CREATE TABLE IF NOT EXISTS projects (
    id              UUID PRIMARY KEY,
    title           TEXT NOT NULL,
    slug            TEXT NOT NULL UNIQUE,
    category        VARCHAR(50) NOT NULL,
    tags            JSONB NOT NULL DEFAULT '[]'::jsonb,
    thumbnail       JSONB NOT NULL,
    images          JSONB NOT NULL DEFAULT '[]'::jsonb,
    client          TEXT,
    year            INT,
    description     TEXT NOT NULL,
    challenge       TEXT,
    solution        TEXT,
    featured        BOOLEAN NOT NULL DEFAULT FALSE,
    created_at      TIMESTAMPTZ NOT NULL DEFAULT NOW()
);

CREATE INDEX IF NOT EXISTS idx_projects_category ON projects(category);
CREATE INDEX IF NOT EXISTS idx_projects_featured ON projects(created_at) WHERE featured = TRUE;
"""


def create_tables() -> None:
    """
    Execute the schema SQL.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Portfolio schema initialized.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool
    init_pool()
    create_tables()
    print("Portfolio schema created.")
