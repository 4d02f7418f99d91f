"""Project entity tracked by the board."""

from __future__ import annotations

import uuid
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ProjectStatus(str, Enum):
    """Project lifecycle states."""

    ACTIVE = "active"  # Newly added, still in progress
    FINISHED = "finished"  # Dropped onto the finished lane

    @classmethod
    def _missing_(cls, value: object) -> ProjectStatus | None:
        # Accept "Active" / "FINISHED" as well as the canonical lowercase values
        if isinstance(value, str):
            for member in cls:
                if member.value == value.strip().lower():
                    return member
        return None


def new_project_id() -> str:
    return uuid.uuid4().hex


class Project(BaseModel):
    """A single board item.

    Everything except ``status`` is fixed at creation; assigning to a frozen
    field raises a pydantic ``ValidationError`` and assigning ``status`` is
    validated against ``ProjectStatus``.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(frozen=True)
    title: str = Field(frozen=True, min_length=1)
    description: str = Field(frozen=True, min_length=1)
    people: int = Field(frozen=True, ge=1)
    status: ProjectStatus = ProjectStatus.ACTIVE

    @property
    def people_label(self) -> str:
        if self.people == 1:
            return "1 person"
        return f"{self.people} persons"
