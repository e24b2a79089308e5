"""Partial-patch helper shared by the content services."""

from collections.abc import Mapping
from typing import Any

from core.exceptions import DomainValidationError


def apply_changes(
    entity: Any,
    changes: Mapping[str, Any],
    mutable_fields: frozenset[str],
) -> list[str]:
    """Copy ``changes`` onto ``entity`` and return the names that changed.

    Only keys present in ``changes`` are touched. An explicit None clears an
    optional field; callers must drop keys they did not intend to send.
    """
    unknown = sorted(set(changes) - mutable_fields)
    if unknown:
        raise DomainValidationError(
            f"Fields cannot be updated: {', '.join(unknown)}",
            details={"fields": unknown},
        )

    changed: list[str] = []
    for name, value in changes.items():
        if getattr(entity, name) != value:
            setattr(entity, name, value)
            changed.append(name)
    return changed
