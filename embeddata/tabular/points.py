# ==============================
# Point Extraction
# ==============================
"""
Turns selected points into single-row columns.

Every attribute and then every measure of a point becomes one column named
after the attribute/measure, holding one value. Used by the context-action and
viz-point-click parsers, which only differ in which points they try first.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence, Tuple

from embeddata.contracts.payload_schema import SelectedPoint

PointColumns = Tuple[List[str], List[List[Any]]]


def extract_point_columns(point: Optional[SelectedPoint]) -> PointColumns:
    names: List[str] = []
    values: List[List[Any]] = []
    if point is None:
        return names, values
    for item in (point.selected_attributes or []) + (point.selected_measures or []):
        names.append(item.column.name)
        values.append([item.value])
    return names, values


def _extract_all(points: Iterable[Optional[SelectedPoint]]) -> PointColumns:
    names: List[str] = []
    values: List[List[Any]] = []
    for point in points:
        point_names, point_values = extract_point_columns(point)
        names.extend(point_names)
        values.extend(point_values)
    return names, values


def collect_point_columns(
    primary: Sequence[Optional[SelectedPoint]],
    fallback: Sequence[Optional[SelectedPoint]],
) -> PointColumns:
    """
    Extract from every point in `primary`; only if that yields no column at
    all, extract from `fallback` instead.
    """
    names, values = _extract_all(primary)
    if names:
        return names, values
    return _extract_all(fallback)
