"""Consistency checks for form bounds configured through Settings."""

from __future__ import annotations


class ConfigValidationError(Exception):
    """Structured configuration validation error."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


def validate_or_raise(
    description_min_length: int, min_people: int, max_people: int
) -> None:
    """Validate that the configured form bounds can be satisfied.

    Raises:
        ConfigValidationError: With every problem found, not just the first.
    """
    errors: list[str] = []
    if description_min_length < 0:
        errors.append(
            f"description_min_length must not be negative (got {description_min_length})"
        )
    if min_people < 1:
        errors.append(f"min_people must be at least 1 (got {min_people})")
    if max_people < min_people:
        errors.append(
            f"max_people ({max_people}) must not be lower than min_people ({min_people})"
        )
    if errors:
        raise ConfigValidationError(errors)
