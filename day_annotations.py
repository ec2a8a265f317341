"""Overlay caller-supplied per-day content onto a month grid."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from calendar_logic import Cell, Grid


@dataclass(frozen=True, slots=True)
class AnnotatedCell:
    """A grid cell plus the annotation placed next to it (None = nothing)."""

    day: Cell
    annotation: Any = None


AnnotatedWeek = tuple[AnnotatedCell, ...]
AnnotatedGrid = tuple[AnnotatedWeek, ...]


def annotation_for(day: Cell, annotations: Sequence[Any]) -> Any:
    """Return annotations[day - 1], or None when the day has no entry.

    Short or empty sequences are fine; missing entries simply mean no
    annotation. The value itself is returned untouched.
    """
    if day is None or day < 1 or day > len(annotations):
        return None
    return annotations[day - 1]


def attach_annotations(grid: Grid, annotations: Sequence[Any]) -> AnnotatedGrid:
    """Return a grid of the same shape whose cells carry their annotations.

    annotations[0] belongs to day 1, annotations[1] to day 2, and so on.
    Entries beyond the last day of the month are ignored.
    """
    return tuple(
        tuple(AnnotatedCell(day, annotation_for(day, annotations)) for day in week)
        for week in grid
    )
