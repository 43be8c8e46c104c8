"""Resolved-or-not references to other entities.

Fact rows (efforts, metrics) and projects point at resources and customers
that may have been deleted since the row was written. The data-access layer
decides once, while loading, whether the target exists and hands the engine
either ``Resolved(value)`` or ``Unresolved(ref_id)``. Aggregations treat an
``Unresolved`` reference as an orphaned row and leave it out.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Resolved(Generic[T]):
    value: T


@dataclass(frozen=True)
class Unresolved:
    ref_id: Optional[str] = None


Reference = Union[Resolved[T], Unresolved]


def resolved_value(ref: "Reference[T] | None") -> Optional[T]:
    if isinstance(ref, Resolved):
        return ref.value
    return None


def is_resolved(ref: "Reference[T] | None") -> bool:
    return isinstance(ref, Resolved)


__all__ = ["Resolved", "Unresolved", "Reference", "resolved_value", "is_resolved"]
