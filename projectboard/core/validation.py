"""Declarative field constraints for raw form values.

A ``Validatable`` bundles one value with the predicates it must satisfy.
Length predicates only apply to text and numeric bounds only apply to
numbers; a predicate whose type does not match the value is skipped,
not failed.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Validatable(BaseModel):
    """A raw value plus the optional constraints it is checked against."""

    model_config = ConfigDict(frozen=True)

    value: str | int | float
    required: bool = False
    min_length: int | None = None
    max_length: int | None = None
    min: float | None = None
    max: float | None = None


def _is_numeric(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def failed_constraints(field: Validatable) -> list[str]:
    """Return the names of the predicates ``field`` violates, in check order."""
    failed: list[str] = []
    value = field.value

    if field.required and len(str(value).strip()) == 0:
        failed.append("required")

    if isinstance(value, str):
        if field.min_length is not None and not len(value) >= field.min_length:
            failed.append("min_length")
        if field.max_length is not None and not len(value) <= field.max_length:
            failed.append("max_length")

    # Comparisons are written positively so NaN fails both bounds
    if _is_numeric(value):
        if field.min is not None and not value >= field.min:
            failed.append("min")
        if field.max is not None and not value <= field.max:
            failed.append("max")

    return failed


def validate(field: Validatable) -> bool:
    """Return True when every configured predicate holds for ``field``."""
    return not failed_constraints(field)
