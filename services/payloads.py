"""
services/payloads.py
--------------------
Turns the JSON typed after admin commands into models or update fields.

Example:
    /add_project {"title": "Logo Set", "slug": "logo-set", "category": "branding",
                  "tags": ["logo", "brand"], "thumbnail": {"url": "a.png"},
                  "images": [{"url": "a.png"}], "description": "..."}
"""

import json
from typing import Any

from models.about import About
from models.contact import Contact
from models.project import Project
from repositories.about_repo import UPDATABLE_FIELDS as ABOUT_FIELDS
from repositories.contact_repo import UPDATABLE_FIELDS as CONTACT_FIELDS
from repositories.project_repo import UPDATABLE_FIELDS as PROJECT_FIELDS


def parse_json_object(text: str) -> dict[str, Any]:
    """
    Parse command text as a JSON object.

    Raises:
        ValueError: If the text is empty, not valid JSON, or not an object.
    """
    if not text or not text.strip():
        raise ValueError("Expected a JSON object after the command.")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e
    if not isinstance(data, dict):
        raise ValueError("Expected a JSON object, e.g. {\"title\": \"...\"}.")
    return data


def _require(data: dict, *names: str) -> None:
    missing = [n for n in names if data.get(n) in (None, "")]
    if missing:
        raise ValueError(f"Missing required field(s): {', '.join(missing)}")


def _reject_blank(data: dict, *names: str) -> None:
    """Required fields may be left out of an update, but not set to null or blank."""
    blank = [
        n for n in names
        if n in data and (data[n] is None or (isinstance(data[n], str) and not data[n].strip()))
    ]
    if blank:
        raise ValueError(f"Required field(s) cannot be empty: {', '.join(blank)}")


def _check_fields(data: dict, allowed: frozenset, kind: str) -> None:
    unknown = set(data) - allowed
    if unknown:
        raise ValueError(f"Unknown {kind} field(s): {', '.join(sorted(unknown))}")


def clean_project_fields(data: dict[str, Any]) -> dict[str, Any]:
    """
    Validate the shape of project fields (for both create and update).

    Raises:
        ValueError: On unknown keys, blank required fields, or values of
            the wrong shape.
    """
    _check_fields(data, PROJECT_FIELDS, "project")
    _reject_blank(data, "title", "slug", "category", "description", "thumbnail")
    fields = dict(data)
    if "tags" in fields and not (
        isinstance(fields["tags"], list) and all(isinstance(t, str) for t in fields["tags"])
    ):
        raise ValueError("'tags' must be a list of strings.")
    if "thumbnail" in fields and not isinstance(fields["thumbnail"], dict):
        raise ValueError("'thumbnail' must be an object like {\"url\": \"...\"}.")
    if "images" in fields and not (
        isinstance(fields["images"], list) and all(isinstance(i, dict) for i in fields["images"])
    ):
        raise ValueError("'images' must be a list of objects like {\"url\": \"...\"}.")
    year = fields.get("year")
    if year is not None and (isinstance(year, bool) or not isinstance(year, int)):
        raise ValueError("'year' must be a whole number, e.g. 2024.")
    if "featured" in fields and not isinstance(fields["featured"], bool):
        raise ValueError("'featured' must be true or false.")
    return fields


def project_from_payload(data: dict[str, Any]) -> Project:
    """Build a new Project from a create payload."""
    fields = clean_project_fields(data)
    _require(fields, "title", "slug", "category", "description", "thumbnail")
    return Project(**fields)


def clean_about_fields(data: dict[str, Any]) -> dict[str, Any]:
    _check_fields(data, ABOUT_FIELDS, "about")
    _reject_blank(data, "bio", "skills")
    if "skills" in data and not (
        isinstance(data["skills"], list) and all(isinstance(s, str) for s in data["skills"])
    ):
        raise ValueError("'skills' must be a list of strings.")
    experience = data.get("experience")
    if experience is not None:
        if not isinstance(experience, list) or not all(isinstance(e, dict) for e in experience):
            raise ValueError("'experience' must be a list of objects.")
        for entry in experience:
            _require(entry, "company", "role", "start")
    if data.get("hero") is not None:
        if not isinstance(data["hero"], dict):
            raise ValueError("'hero' must be an object.")
        _require(data["hero"], "headline")
    return dict(data)


def about_from_payload(data: dict[str, Any]) -> About:
    fields = clean_about_fields(data)
    _require(fields, "bio")
    return About(**fields)


def clean_contact_fields(data: dict[str, Any]) -> dict[str, Any]:
    _check_fields(data, CONTACT_FIELDS, "contact")
    _reject_blank(data, "email")
    socials = data.get("socials")
    if socials is not None and not isinstance(socials, dict):
        raise ValueError("'socials' must be an object like {\"instagram\": \"https://...\"}.")
    return dict(data)


def contact_from_payload(data: dict[str, Any]) -> Contact:
    fields = clean_contact_fields(data)
    _require(fields, "email")
    return Contact(**fields)
