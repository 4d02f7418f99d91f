"""Shared pytest fixtures for all tests."""

import pytest

from projectboard.core.board import ProjectBoard
from projectboard.core.context import BoardContext
from projectboard.core.project import Project


class BroadcastRecorder:
    """Listener that remembers every snapshot it was handed."""

    def __init__(self, name: str = "recorder", log: list | None = None):
        self.name = name
        self.log = log
        self.snapshots: list[list[Project]] = []

    def __call__(self, projects: list[Project]) -> None:
        self.snapshots.append(projects)
        if self.log is not None:
            self.log.append(self.name)

    @property
    def call_count(self) -> int:
        return len(self.snapshots)

    @property
    def last(self) -> list[Project]:
        return self.snapshots[-1]


@pytest.fixture(autouse=True)
def clean_board_env(monkeypatch):
    """Keep host environment from leaking form bounds into tests."""
    for key in (
        "PROJECTBOARD_DESCRIPTION_MIN_LENGTH",
        "PROJECTBOARD_MIN_PEOPLE",
        "PROJECTBOARD_MAX_PEOPLE",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def context():
    return BoardContext()


@pytest.fixture
def store(context):
    return context.store


@pytest.fixture
def board(context):
    return ProjectBoard(context)


@pytest.fixture
def recorder(store):
    """A listener already registered on the store."""
    rec = BroadcastRecorder()
    store.add_listener(rec)
    return rec


@pytest.fixture
def make_recorder():
    """Factory for unregistered recorders sharing an optional call log."""

    def _make(name: str = "recorder", log: list | None = None) -> BroadcastRecorder:
        return BroadcastRecorder(name, log=log)

    return _make
