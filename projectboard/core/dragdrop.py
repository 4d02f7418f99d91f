"""Drag-and-drop contract between the render layer and the project store.

A row being dragged is a ``DragSource``; it hands out a ``DragPayload``
carrying the project id as plain text. Each status lane is a
``ProjectLane``: it answers whether a dragged payload can land on it,
tracks the droppable affordance, and turns a drop into a status move.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict

from projectboard.config.constants import DRAG_MEDIA_TYPE
from projectboard.core.context import BoardContext
from projectboard.core.project import Project, ProjectStatus
from projectboard.utils.logger import get_logger

logger = get_logger("dragdrop")


class DropEffect(str, Enum):
    """Transfer effects a drag source can allow."""

    NONE = "none"
    COPY = "copy"
    MOVE = "move"
    LINK = "link"


class DragPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    media_type: str
    data: str
    effect_allowed: DropEffect = DropEffect.MOVE


def can_accept_drag(media_type: str | None) -> bool:
    """True when a payload of ``media_type`` carries a project id."""
    return media_type == DRAG_MEDIA_TYPE


class DragSource:
    """Drag behaviour of one rendered project row."""

    def __init__(self, project_id: str):
        self.project_id = project_id

    def start_drag(self) -> DragPayload:
        logger.debug("Drag started", project_id=self.project_id)
        return DragPayload(
            media_type=DRAG_MEDIA_TYPE,
            data=self.project_id,
            effect_allowed=DropEffect.MOVE,
        )

    def end_drag(self, payload: DragPayload | None = None) -> None:
        # Informational only; the drop target performs the move
        logger.debug(
            "Drag ended",
            project_id=self.project_id,
            effect=payload.effect_allowed.value if payload is not None else None,
        )


class ProjectLane:
    """Drop target and filtered view for one status.

    The lane subscribes to the store when it is created and keeps the
    projects whose status matches its own in ``assigned_projects``. When an
    ``on_render`` hook is given it is called with that filtered list after
    every broadcast.
    """

    def __init__(
        self,
        context: BoardContext,
        status: ProjectStatus | str,
        on_render: Callable[[list[Project]], None] | None = None,
    ):
        if isinstance(status, str):
            status = ProjectStatus(status)
        self.context = context
        self.status = status
        self.on_render = on_render
        self.droppable = False
        self.assigned_projects: list[Project] = []
        self.subscription = context.store.add_listener(self._on_projects_changed)

    def drag_over(self, media_type: str | None) -> bool:
        """Return True if the drop should be allowed, marking the lane droppable.

        Callers suppress their default (non-droppable) handling only when
        this returns True.
        """
        if not can_accept_drag(media_type):
            return False
        self.droppable = True
        return True

    def drag_leave(self) -> None:
        self.droppable = False

    def drop(self, payload: DragPayload | str) -> None:
        """Move the dropped project into this lane's status."""
        self.droppable = False
        if isinstance(payload, DragPayload):
            if not can_accept_drag(payload.media_type):
                logger.debug(
                    "Drop ignored, unsupported payload",
                    media_type=payload.media_type,
                    lane=self.status.value,
                )
                return
            project_id = payload.data
        else:
            project_id = payload
        logger.debug("Drop received", project_id=project_id, lane=self.status.value)
        self.context.store.move_project(project_id, self.status)

    def _on_projects_changed(self, projects: list[Project]) -> None:
        self.assigned_projects = [p for p in projects if p.status == self.status]
        if self.on_render is not None:
            self.on_render(list(self.assigned_projects))
