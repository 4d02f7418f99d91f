"""Boundary between the render/input layer and the board core.

The render layer hands raw form text to ``submit_new_project`` and reports
drops through ``report_drop``; it subscribes with ``on_projects_changed``
and asks ``can_accept_drag`` before showing a droppable lane.
"""

from __future__ import annotations

import math

from pydantic import BaseModel

from projectboard.config.constants import INVALID_INPUT_MESSAGE
from projectboard.config.settings import Settings
from projectboard.core.context import BoardContext
from projectboard.core.dragdrop import ProjectLane, can_accept_drag
from projectboard.core.errors import ValidationRejected
from projectboard.core.project import Project, ProjectStatus
from projectboard.core.store import Listener, Subscription
from projectboard.core.validation import Validatable, failed_constraints
from projectboard.utils.logger import get_logger

logger = get_logger("board")


class Submission(BaseModel):
    """Outcome of a new project form submission."""

    accepted: bool
    project: Project | None = None
    errors: list[str] = []
    message: str | None = None


def _parse_people(raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        return math.nan


class ProjectBoard:
    """Entry points used by the render layer."""

    def __init__(self, context: BoardContext, settings: Settings | None = None):
        self.context = context
        self.settings = settings or Settings()
        self.settings.validate_or_raise()
        self._lanes: dict[ProjectStatus, ProjectLane] = {}

    def gather_user_input(
        self, title: str, description: str, people_raw: str
    ) -> tuple[str, str, int]:
        """Check raw form values against the form rules.

        Raises:
            ValidationRejected: When any field fails, listing every failure.
        """
        people_text = people_raw.strip() if isinstance(people_raw, str) else ""
        people = _parse_people(people_text)
        fields = {
            "title": Validatable(value=title, required=True),
            "description": Validatable(
                value=description,
                required=True,
                min_length=self.settings.description_min_length,
            ),
            "people": Validatable(
                value=people,
                required=True,
                min=self.settings.min_people,
                max=self.settings.max_people,
            ),
        }
        if not people_text:
            # Nothing entered; only report the missing value
            fields["people"] = Validatable(value=people_text, required=True)

        errors = [
            f"{name}: {constraint}"
            for name, field in fields.items()
            for constraint in failed_constraints(field)
        ]
        if people_text and (not math.isfinite(people) or not people.is_integer()):
            errors.append("people: integer")
        if errors:
            raise ValidationRejected(errors)
        return title, description, int(people)

    def submit_new_project(
        self, title: str, description: str, people_raw: str
    ) -> Submission:
        """Validate raw form values and add the project when they pass."""
        try:
            title, description, people = self.gather_user_input(
                title, description, people_raw
            )
        except ValidationRejected as exc:
            logger.info("Project submission rejected", errors=exc.errors)
            return Submission(
                accepted=False, errors=exc.errors, message=INVALID_INPUT_MESSAGE
            )

        project = self.context.store.add_project(title, description, people)
        return Submission(accepted=True, project=project)

    def report_drop(self, project_id: str, lane_status: ProjectStatus | str) -> None:
        """Move the dropped project into ``lane_status``.

        String statuses are matched case-insensitively ("Finished", "finished").
        """
        if isinstance(lane_status, str):
            lane_status = ProjectStatus(lane_status)
        self.context.store.move_project(project_id, lane_status)

    def on_projects_changed(self, callback: Listener) -> Subscription:
        return self.context.store.add_listener(callback)

    def can_accept_drag(self, media_type: str | None) -> bool:
        return can_accept_drag(media_type)

    def lane(self, status: ProjectStatus | str) -> ProjectLane:
        """Return the lane for ``status``, creating it on first use."""
        if isinstance(status, str):
            status = ProjectStatus(status)
        if status not in self._lanes:
            self._lanes[status] = ProjectLane(self.context, status)
        return self._lanes[status]
