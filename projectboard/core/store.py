"""Authoritative in-memory project collection with change broadcasting.

The store owns both the project list and the listener registry. Nothing
outside this module writes to either: listeners receive their own copy of
the collection on every change and accessors hand out copies as well.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from projectboard.core.project import Project, ProjectStatus, new_project_id
from projectboard.utils.logger import get_logger

logger = get_logger("store")

Listener = Callable[[list[Project]], None]


@dataclass(frozen=True, slots=True)
class Subscription:
    """Handle for one registered listener.

    ``position`` is the zero-based registration index, which is also the
    order the listener is called in during a broadcast.
    """

    position: int
    callback: Listener


class ProjectStore:
    """Holds every project and notifies listeners after each change.

    Mutations run synchronously and broadcast before returning. Calls that
    would not change anything (unknown id, status already set) are absorbed
    without a broadcast and without raising.
    """

    def __init__(self) -> None:
        self._projects: list[Project] = []
        self._subscriptions: list[Subscription] = []

    def __len__(self) -> int:
        return len(self._projects)

    @property
    def listener_count(self) -> int:
        return len(self._subscriptions)

    @property
    def projects(self) -> list[Project]:
        """Ordered copy of the current collection."""
        return self._snapshot()

    def get_project(self, project_id: str) -> Project | None:
        project = self._find(project_id)
        return project.model_copy() if project is not None else None

    def add_listener(self, callback: Listener) -> Subscription:
        """Register a listener; repeated registrations are called repeatedly."""
        subscription = Subscription(
            position=len(self._subscriptions), callback=callback
        )
        self._subscriptions.append(subscription)
        logger.debug(
            "Listener registered",
            position=subscription.position,
            listener=_callback_name(callback),
        )
        return subscription

    def add_project(self, title: str, description: str, people: int) -> Project:
        """Create an active project, append it and broadcast.

        Arguments are expected to have passed form validation already.
        Returns a copy of the stored project.
        """
        project = Project(
            id=new_project_id(),
            title=title,
            description=description,
            people=people,
            status=ProjectStatus.ACTIVE,
        )
        self._projects.append(project)
        logger.info(
            "Project added",
            project_id=project.id,
            title=project.title,
            people=project.people,
        )
        self._update_listeners()
        return project.model_copy()

    def move_project(self, project_id: str, new_status: ProjectStatus) -> None:
        """Set a project's status and broadcast if it actually changed."""
        project = self._find(project_id)
        if project is None:
            logger.debug("Move ignored, unknown project", project_id=project_id)
            return
        if project.status == new_status:
            logger.debug(
                "Move ignored, status unchanged",
                project_id=project_id,
                status=project.status.value,
            )
            return

        old_status = project.status
        project.status = new_status
        logger.info(
            "Project moved",
            project_id=project_id,
            from_status=old_status.value,
            to_status=project.status.value,
        )
        self._update_listeners()

    def _find(self, project_id: str) -> Project | None:
        return next((p for p in self._projects if p.id == project_id), None)

    def _snapshot(self) -> list[Project]:
        return [project.model_copy() for project in self._projects]

    def _update_listeners(self) -> None:
        """Call every listener in registration order with its own snapshot."""
        for subscription in self._subscriptions:
            try:
                subscription.callback(self._snapshot())
            except Exception as e:
                logger.error(
                    "Error in project listener",
                    error=str(e),
                    position=subscription.position,
                    listener=_callback_name(subscription.callback),
                )


def _callback_name(callback: Callable) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)
