"""Tests for the Project entity."""

import pytest
from pydantic import ValidationError

from projectboard.core.project import Project, ProjectStatus, new_project_id


def _project(**overrides) -> Project:
    data = {
        "id": "p1",
        "title": "Build API",
        "description": "Design the REST layer",
        "people": 3,
    }
    data.update(overrides)
    return Project(**data)


def test_new_project_defaults_to_active():
    assert _project().status == ProjectStatus.ACTIVE


def test_status_string_values():
    assert ProjectStatus("active") is ProjectStatus.ACTIVE
    assert ProjectStatus("finished") is ProjectStatus.FINISHED


def test_status_is_mutable_and_validated():
    project = _project()

    project.status = ProjectStatus.FINISHED
    assert project.status == ProjectStatus.FINISHED

    with pytest.raises(ValidationError):
        project.status = "archived"
    assert project.status == ProjectStatus.FINISHED


@pytest.mark.parametrize("field", ["id", "title", "description", "people"])
def test_identity_fields_are_frozen(field):
    project = _project()

    with pytest.raises(ValidationError):
        setattr(project, field, "changed")


def test_people_must_be_positive():
    with pytest.raises(ValidationError):
        _project(people=0)


def test_people_label():
    assert _project(people=1).people_label == "1 person"
    assert _project(people=4).people_label == "4 persons"


def test_new_project_id_is_unique():
    ids = {new_project_id() for _ in range(100)}
    assert len(ids) == 100


def test_status_lookup_ignores_case():
    assert ProjectStatus("Active") is ProjectStatus.ACTIVE
    assert ProjectStatus("FINISHED") is ProjectStatus.FINISHED

    with pytest.raises(ValueError):
        ProjectStatus("archived")
