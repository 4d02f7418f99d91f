"""Tests for the shared board context."""

from projectboard.core.context import BoardContext
from projectboard.core.dragdrop import ProjectLane
from projectboard.core.project import ProjectStatus


def test_store_created_lazily():
    context = BoardContext()

    assert context.has_store is False
    store = context.store
    assert context.has_store is True
    assert context.store is store


def test_components_sharing_a_context_share_the_store():
    context = BoardContext()
    active = ProjectLane(context, ProjectStatus.ACTIVE)
    finished = ProjectLane(context, ProjectStatus.FINISHED)

    context.store.add_project("Build API", "Design the REST layer", 3)

    assert len(active.assigned_projects) == 1
    assert finished.assigned_projects == []
    assert context.store.listener_count == 2


def test_separate_contexts_are_isolated():
    first = BoardContext()
    second = BoardContext()

    first.store.add_project("Build API", "Design the REST layer", 3)

    assert first.store is not second.store
    assert len(second.store) == 0
