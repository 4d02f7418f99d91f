"""Errors raised inside the board core."""

from __future__ import annotations


class ValidationRejected(Exception):
    """One or more form fields failed their constraints.

    ``errors`` holds one ``"<field>: <constraint>"`` entry per failure.
    """

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))
