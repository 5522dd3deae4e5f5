# ==============================
# Context Action Data
# ==============================
"""
Data from context-menu actions on answers.

The selection lives in contextMenuPoints, either at the top of the payload or
under payload.data. Every selected point contributes one column per attribute
and per measure, giving a one-row table. clickedPoints[0] is only read when the
selected points yield nothing.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from embeddata.contracts.payload_schema import ContextMenuPoints
from embeddata.logging.logger import LogContext, get_logger, with_context
from embeddata.tabular.base import TabularData
from embeddata.tabular.points import collect_point_columns
from embeddata.utils.formatters import preview_payload

log = with_context(get_logger("parsers"), LogContext(payload_kind="context_action"))


def _find_context_menu_points(payload: Any) -> Optional[Dict[str, Any]]:
    if not isinstance(payload, dict):
        return None
    points = payload.get("contextMenuPoints")
    if points:
        return points
    nested = payload.get("data")
    if isinstance(nested, dict):
        return nested.get("contextMenuPoints") or None
    return None


class ContextActionData(TabularData):
    @classmethod
    def create_from_json(cls, payload: Dict[str, Any]) -> "ContextActionData":
        context_action_data = cls(payload)

        try:
            raw_points = _find_context_menu_points(payload)
            if raw_points is None:
                log.error("No contextMenuPoints found in the data")
                return context_action_data

            points = ContextMenuPoints.model_validate(raw_points)
            # Duplicate names across points are kept; the last value wins on lookup.
            column_names, column_values = collect_point_columns(
                points.selected_points or [],
                (points.clicked_points or [])[:1],
            )

            if column_names:
                context_action_data.column_names = column_names
                context_action_data.populate_data_by_column(column_values)
            else:
                log.error("No data found in contextMenuPoints")
        except Exception as exc:
            log.error("Error creating context action data: %s", exc)
            log.error(preview_payload(payload))

        return context_action_data
