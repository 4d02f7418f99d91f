"""Shared handle passed to every component that needs the project store."""

from __future__ import annotations

from projectboard.core.store import ProjectStore
from projectboard.utils.logger import get_logger

logger = get_logger("context")


class BoardContext:
    """Owns the one project store for a board.

    Create a single context at startup and pass it to each component; the
    store is built on first access and the same instance is returned from
    then on. There is no way to replace or reset it.
    """

    def __init__(self) -> None:
        self._store: ProjectStore | None = None

    @property
    def store(self) -> ProjectStore:
        if self._store is None:
            self._store = ProjectStore()
            logger.debug("Project store created")
        return self._store

    @property
    def has_store(self) -> bool:
        return self._store is not None
