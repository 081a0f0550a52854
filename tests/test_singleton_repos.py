import json

import pytest
from psycopg2 import errors

from conftest import ABOUT_ID, CONTACT_ID, about_row, contact_row
from models.about import About
from models.contact import Contact
from repositories.about_repo import AboutRepository
from repositories.contact_repo import ContactRepository
from services.revalidation import ABOUT_PAGES, CONTACT_PAGES

EXPERIENCE = [
    {"company": "Studio North", "role": "Designer", "start": "2019", "end": "2022"},
    {"company": "Freelance", "role": "Art Director", "start": "2022"},
]


# ── about ─────────────────────────────────────────────────


def test_get_about_absent(fake_db):
    fake_db.script([])
    assert AboutRepository().get() is None


def test_get_about_decodes_encoded_json(fake_db):
    fake_db.script([about_row(
        skills=json.dumps(["Branding"]),
        experience=json.dumps(EXPERIENCE),
        hero=json.dumps({"headline": "Hi"}),
    )])

    about = AboutRepository().get()

    assert about.skills == ["Branding"]
    assert about.experience == EXPERIENCE
    assert about.hero == {"headline": "Hi"}
    assert about.created_at.startswith("2024-05-01T12:30:00")


def test_add_about_sends_null_for_missing_json(fake_db, revalidated):
    fake_db.script([about_row()])

    AboutRepository().add(About(bio="Graphic designer.", skills=["Branding"]))

    params = fake_db.executed[0][1]
    assert params[2].adapted == ["Branding"]
    assert params[3] is None and params[4] is None
    assert revalidated == list(ABOUT_PAGES)


def test_second_about_row_is_rejected(fake_db, revalidated):
    fake_db.script(errors.UniqueViolation("duplicate key value violates unique constraint \"about_singleton_key\""))

    with pytest.raises(errors.UniqueViolation):
        AboutRepository().add(About(bio="Again"))

    assert fake_db.events == ["rollback"]
    assert revalidated == []


def test_update_about_partial(fake_db, revalidated):
    fake_db.script([about_row(bio="New bio")])

    about = AboutRepository().update(ABOUT_ID, {"bio": "New bio"})

    sql, params = fake_db.executed[0]
    assert sql.startswith("UPDATE about SET bio = %s WHERE id = %s")
    assert params == ["New bio", ABOUT_ID]
    assert about.skills == ["Branding", "Typography"]
    assert revalidated == list(ABOUT_PAGES)


def test_update_about_can_clear_optional_json(fake_db, revalidated):
    fake_db.script([about_row()])

    AboutRepository().update(ABOUT_ID, {"hero": None})

    assert fake_db.executed[0][1] == [None, ABOUT_ID]


def test_update_about_rejects_unknown_field(fake_db):
    with pytest.raises(ValueError):
        AboutRepository().update(ABOUT_ID, {"singleton": False})


def test_delete_about_then_get_by_id_is_absent(fake_db, revalidated):
    fake_db.script(1, [])
    repo = AboutRepository()

    assert repo.delete(ABOUT_ID) is True
    assert repo.get_by_id(ABOUT_ID) is None
    assert revalidated == list(ABOUT_PAGES)


# ── contact ───────────────────────────────────────────────


def test_get_contact_with_socials(fake_db):
    fake_db.script([contact_row(socials='{"behance": "https://behance.net/me"}')])

    contact = ContactRepository().get()

    assert contact.socials == {"behance": "https://behance.net/me"}
    assert contact.phone is None


def test_add_contact(fake_db, revalidated):
    fake_db.script([contact_row(phone="+351 900 000 000")])

    saved = ContactRepository().add(Contact(email="hello@example.com", phone="+351 900 000 000"))

    assert saved.id == CONTACT_ID
    assert fake_db.executed[0][1][3] is None
    assert revalidated == list(CONTACT_PAGES)


def test_empty_email_violates_check(fake_db, revalidated):
    fake_db.script(errors.CheckViolation("new row violates check constraint"))

    with pytest.raises(errors.CheckViolation):
        ContactRepository().add(Contact(email=""))
    assert revalidated == []


def test_update_contact_socials(fake_db, revalidated):
    socials = {"instagram": "https://instagram.com/me"}
    fake_db.script([contact_row(socials=socials)])

    contact = ContactRepository().update(CONTACT_ID, {"socials": socials})

    assert fake_db.executed[0][1][0].adapted == socials
    assert contact.socials == socials
    assert contact.email == "hello@example.com"


def test_delete_missing_contact(fake_db, revalidated):
    fake_db.script(0)

    assert ContactRepository().delete(CONTACT_ID) is False
    assert revalidated == []
