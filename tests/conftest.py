"""
Shared fixtures: a scripted stand-in for the psycopg2 pool so repository
SQL can be exercised without a database, plus revalidation recording.
"""

import json
from collections import deque
from datetime import datetime, timezone

import pytest

from db import connection
from services import revalidation

PROJECT_ID = "6f1c1d2e-8a4b-4c4e-9a61-3b0f6a2d9c10"
ABOUT_ID = "0d9a7c54-1f2e-4b7a-8c3d-5e6f7a8b9c0d"
CONTACT_ID = "a1b2c3d4-e5f6-4a7b-8c9d-0e1f2a3b4c5d"
CREATED_AT = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self._rows = []
        self.rowcount = -1

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.conn.executed.append((" ".join(sql.split()), params))
        result = self.conn.results.popleft() if self.conn.results else []
        if isinstance(result, Exception):
            raise result
        if isinstance(result, int):
            self._rows, self.rowcount = [], result
        else:
            self._rows = list(result)
            self.rowcount = len(self._rows)

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)


class FakeConnection:
    """
    Each `execute` consumes the next scripted result: a list of rows,
    an int (rowcount for DELETE), or an exception to raise.
    """

    def __init__(self):
        self.results = deque()
        self.executed = []
        self.events = []

    def script(self, *results):
        self.results.extend(results)

    def cursor(self):
        return FakeCursor(self)

    def commit(self):
        self.events.append("commit")

    def rollback(self):
        self.events.append("rollback")

    @property
    def statements(self):
        return [sql for sql, _ in self.executed]


class FakePool:
    def __init__(self, conn):
        self.conn = conn
        self.borrowed = 0

    def getconn(self):
        self.borrowed += 1
        return self.conn

    def putconn(self, conn):
        self.borrowed -= 1


@pytest.fixture
def fake_db(monkeypatch):
    conn = FakeConnection()
    pool = FakePool(conn)
    monkeypatch.setattr(connection, "_pool", pool)
    yield conn
    assert pool.borrowed == 0, "a connection was not released"


@pytest.fixture
def revalidated(fake_db):
    """Paths revalidated during the test; also logged into fake_db.events."""
    paths = []

    def listener(path):
        paths.append(path)
        fake_db.events.append(f"revalidate {path}")

    revalidation.subscribe(listener)
    yield paths
    revalidation.unsubscribe(listener)


def project_row(encoded=False, **overrides):
    """A `projects` row tuple in repository column order."""
    values = {
        "id": PROJECT_ID,
        "title": "Logo Set",
        "slug": "logo-set",
        "category": "branding",
        "tags": ["logo", "brand"],
        "thumbnail": {"url": "a.png"},
        "images": [{"url": "a.png"}],
        "client": None,
        "year": None,
        "description": "...",
        "challenge": None,
        "solution": None,
        "featured": False,
        "created_at": CREATED_AT,
    }
    values.update(overrides)
    if encoded:
        for key in ("tags", "thumbnail", "images"):
            values[key] = json.dumps(values[key])
    return tuple(values.values())


def about_row(**overrides):
    values = {
        "id": ABOUT_ID,
        "bio": "Graphic designer.",
        "skills": ["Branding", "Typography"],
        "experience": None,
        "hero": None,
        "created_at": CREATED_AT,
    }
    values.update(overrides)
    return tuple(values.values())


def contact_row(**overrides):
    values = {
        "id": CONTACT_ID,
        "email": "hello@example.com",
        "phone": None,
        "socials": None,
        "address": None,
        "created_at": CREATED_AT,
    }
    values.update(overrides)
    return tuple(values.values())
