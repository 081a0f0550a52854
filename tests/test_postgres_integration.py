"""
End-to-end repository checks against a real PostgreSQL.
Set TEST_DATABASE_URL to a disposable database to run them.
"""

import os

import pytest
from psycopg2 import errors

from db import connection
from db.init_db import create_tables
from models.about import About
from models.project import Project
from repositories.about_repo import AboutRepository
from repositories.project_repo import ProjectRepository

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")

pytestmark = pytest.mark.skipif(
    not TEST_DATABASE_URL, reason="TEST_DATABASE_URL not set"
)


@pytest.fixture(scope="module")
def database():
    connection.init_pool(dsn=TEST_DATABASE_URL)
    create_tables()
    yield
    connection.close_pool()


@pytest.fixture(autouse=True)
def clean_tables(database):
    conn = connection.get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute("TRUNCATE about, contact, projects;")
        conn.commit()
    finally:
        connection.release_connection(conn)


def _project(slug, category="branding", **overrides):
    fields = dict(
        title=slug.replace("-", " ").title(),
        slug=slug,
        category=category,
        tags=["logo", "brand"],
        thumbnail={"url": f"{slug}.png"},
        images=[{"url": f"{slug}.png"}],
        description="...",
    )
    fields.update(overrides)
    return Project(**fields)


def test_created_project_reads_back_by_slug():
    repo = ProjectRepository()
    repo.add(_project("logo-set", thumbnail={"url": "a.png"}, images=[{"url": "a.png"}]))

    project = repo.get_by_slug("logo-set")

    assert project.slug == "logo-set"
    assert project.category == "branding"
    assert project.tags == ["logo", "brand"]
    assert project.thumbnail == {"url": "a.png"}
    assert project.images == [{"url": "a.png"}]
    assert isinstance(project.created_at, str)


def test_slug_lookup_is_case_sensitive():
    repo = ProjectRepository()
    repo.add(_project("logo-set"))
    assert repo.get_by_slug("Logo-Set") is None


def test_duplicate_slug_fails_second_create():
    repo = ProjectRepository()
    repo.add(_project("logo-set"))

    with pytest.raises(errors.UniqueViolation):
        repo.add(_project("logo-set", title="Another"))

    assert len(repo.get_all()) == 1


def test_related_prefers_same_category_and_excludes_self():
    repo = ProjectRepository()
    for slug, category in [
        ("logo-set", "branding"), ("brand-book", "branding"),
        ("poster", "print"), ("flyer", "print"), ("site", "web"),
    ]:
        repo.add(_project(slug, category))

    related = repo.get_related("logo-set", limit=3)

    assert len(related) == 3
    assert "logo-set" not in [p.slug for p in related]
    assert related[0].slug == "brand-book"
    assert all(p.category != "branding" for p in related[1:])


def test_featured_only_and_limited():
    repo = ProjectRepository()
    for i in range(4):
        repo.add(_project(f"featured-{i}", featured=True))
    repo.add(_project("plain"))

    featured = repo.get_featured(limit=3)

    assert len(featured) == 3
    assert all(p.featured for p in featured)


def test_partial_update_keeps_other_fields():
    repo = ProjectRepository()
    saved = repo.add(_project("logo-set", client="ACME", year=2023))

    updated = repo.update(saved.id, {"year": 2024})

    assert updated.year == 2024
    assert updated.client == "ACME"
    assert updated.tags == saved.tags
    assert updated.created_at == saved.created_at


def test_delete_then_get_is_absent():
    projects = ProjectRepository()
    project = projects.add(_project("logo-set"))
    assert projects.delete(project.id) is True
    assert projects.get_by_id(project.id) is None

    about_repo = AboutRepository()
    about = about_repo.add(About(bio="Designer", skills=["Branding"]))
    assert about_repo.delete(about.id) is True
    assert about_repo.get_by_id(about.id) is None
    assert about_repo.get() is None


def test_about_table_holds_one_row():
    repo = AboutRepository()
    repo.add(About(bio="Designer"))

    with pytest.raises(errors.UniqueViolation):
        repo.add(About(bio="Someone else"))


def test_empty_bio_is_rejected():
    with pytest.raises(errors.CheckViolation):
        AboutRepository().add(About(bio=""))
