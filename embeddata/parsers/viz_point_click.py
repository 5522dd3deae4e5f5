# ==============================
# Viz Point Click Data
# ==============================
"""
Data from viz point click events (vizPointClick, vizPointDoubleClick,
vizPointRightClick).

The clicked point gives a one-row table, one column per attribute and measure.
When the clicked point is missing or empty, selectedPoints[0] is used instead.
The event type, viz id and the full embed answer snapshot stay on the payload
and are exposed as read-only properties.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from embeddata.contracts.payload_schema import VizPointClickEventData, VizPointClickType
from embeddata.logging.logger import LogContext, get_logger, with_context
from embeddata.tabular.base import TabularData
from embeddata.tabular.points import collect_point_columns
from embeddata.utils.formatters import preview_payload

_logger = get_logger("parsers")

KNOWN_EVENT_TYPES = frozenset(t.value for t in VizPointClickType)


def _event_data(payload: Any) -> Dict[str, Any]:
    if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
        return payload["data"]
    return {}


class VizPointClick(TabularData):
    @classmethod
    def create_from_json(cls, payload: Dict[str, Any]) -> "VizPointClick":
        viz_point_click = cls(payload)
        log = with_context(
            _logger,
            LogContext(
                payload_kind="viz_point_click",
                viz_id=viz_point_click.viz_id,
                event_type=viz_point_click.event_type,
            ),
        )

        try:
            if viz_point_click.event_type not in KNOWN_EVENT_TYPES:
                log.warning("Unexpected viz point click event type: %s", viz_point_click.event_type)

            event = VizPointClickEventData.model_validate(_event_data(payload))
            column_names, column_values = collect_point_columns(
                [event.clicked_point],
                (event.selected_points or [])[:1],
            )

            if column_names:
                viz_point_click.column_names = column_names
                viz_point_click.populate_data_by_column(column_values)
            else:
                log.error("No data found in viz point click event")
        except Exception as exc:
            log.error("Error creating viz point click data: %s", exc)
            log.error(preview_payload(payload))

        return viz_point_click

    @property
    def event_type(self) -> Optional[str]:
        """vizPointClick, vizPointDoubleClick or vizPointRightClick."""
        if isinstance(self.original_data, dict):
            return self.original_data.get("type")
        return None

    @property
    def viz_id(self) -> Optional[str]:
        return _event_data(self.original_data).get("vizId")

    @property
    def embed_answer_data(self) -> Any:
        """The full embed answer data sent with the event, unparsed."""
        return _event_data(self.original_data).get("embedAnswerData")
