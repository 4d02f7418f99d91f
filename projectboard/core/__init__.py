"""Core board logic - project store, validation and drag-and-drop."""

from .board import ProjectBoard, Submission
from .context import BoardContext
from .dragdrop import DragPayload, DragSource, DropEffect, ProjectLane, can_accept_drag
from .errors import ValidationRejected
from .project import Project, ProjectStatus
from .store import ProjectStore, Subscription
from .validation import Validatable, failed_constraints, validate

__all__ = [
    "BoardContext",
    "DragPayload",
    "DragSource",
    "DropEffect",
    "Project",
    "ProjectBoard",
    "ProjectLane",
    "ProjectStatus",
    "ProjectStore",
    "Submission",
    "Subscription",
    "Validatable",
    "ValidationRejected",
    "can_accept_drag",
    "failed_constraints",
    "validate",
]
