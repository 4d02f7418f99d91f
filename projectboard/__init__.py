"""In-memory project board: project store, change broadcasting and drag-and-drop lanes."""

__version__ = "0.1.0"
