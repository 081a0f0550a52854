import pytest

from services.payloads import (
    about_from_payload,
    clean_about_fields,
    clean_contact_fields,
    clean_project_fields,
    contact_from_payload,
    parse_json_object,
    project_from_payload,
)

LOGO_SET = {
    "title": "Logo Set",
    "slug": "logo-set",
    "category": "branding",
    "tags": ["logo", "brand"],
    "thumbnail": {"url": "a.png"},
    "images": [{"url": "a.png"}],
    "description": "...",
}


def test_parse_json_object():
    assert parse_json_object('{"featured": true}') == {"featured": True}


@pytest.mark.parametrize("text", ["", "   ", "[1, 2]", "{broken"])
def test_parse_json_object_rejects(text):
    with pytest.raises(ValueError):
        parse_json_object(text)


def test_project_from_payload():
    project = project_from_payload(LOGO_SET)
    assert project.category == "branding"
    assert len(project.tags) == 2
    assert project.featured is False
    assert project.id is None


def test_project_payload_requires_core_fields():
    with pytest.raises(ValueError, match="slug"):
        project_from_payload({k: v for k, v in LOGO_SET.items() if k != "slug"})


def test_project_payload_rejects_unknown_and_bad_shapes():
    with pytest.raises(ValueError, match="Unknown"):
        clean_project_fields({"id": "x"})
    with pytest.raises(ValueError, match="tags"):
        clean_project_fields({"tags": "logo"})
    with pytest.raises(ValueError, match="year"):
        clean_project_fields({"year": "soon"})


def test_project_year_must_be_a_whole_number():
    assert clean_project_fields({"year": 2024}) == {"year": 2024}
    assert clean_project_fields({"year": None}) == {"year": None}


@pytest.mark.parametrize("year", [True, 2024.9, "2024"])
def test_project_year_rejects_non_integers(year):
    with pytest.raises(ValueError, match="year"):
        clean_project_fields({"year": year})


def test_project_featured_must_be_boolean():
    assert clean_project_fields({"featured": False}) == {"featured": False}
    with pytest.raises(ValueError, match="featured"):
        clean_project_fields({"featured": "false"})


@pytest.mark.parametrize("field", ["title", "slug", "category", "description", "thumbnail"])
@pytest.mark.parametrize("value", [None, "", "   "])
def test_project_update_cannot_blank_required_field(field, value):
    with pytest.raises(ValueError, match=field):
        clean_project_fields({field: value})


def test_about_payload():
    about = about_from_payload({
        "bio": "Designer",
        "skills": ["Branding"],
        "experience": [{"company": "Studio", "role": "Designer", "start": "2020"}],
    })
    assert about.experience[0]["company"] == "Studio"


def test_about_experience_needs_company_role_start():
    with pytest.raises(ValueError, match="role"):
        about_from_payload({"bio": "x", "experience": [{"company": "Studio", "start": "2020"}]})


def test_contact_requires_email_but_not_its_format():
    assert contact_from_payload({"email": "not-an-email"}).email == "not-an-email"
    with pytest.raises(ValueError, match="email"):
        contact_from_payload({"phone": "123"})


@pytest.mark.parametrize("data", [{"bio": ""}, {"bio": None}, {"skills": None}])
def test_about_update_cannot_blank_required_field(data):
    with pytest.raises(ValueError, match="cannot be empty"):
        clean_about_fields(data)


def test_about_skills_must_be_strings():
    assert clean_about_fields({"skills": []}) == {"skills": []}
    with pytest.raises(ValueError, match="skills"):
        clean_about_fields({"skills": ["Branding", 1]})
    with pytest.raises(ValueError, match="skills"):
        clean_about_fields({"skills": "Branding"})


@pytest.mark.parametrize("email", ["", "  ", None])
def test_contact_update_cannot_blank_email(email):
    with pytest.raises(ValueError, match="email"):
        clean_contact_fields({"email": email})
