# ==============================
# Liveboard Data
# ==============================
"""
Data from the liveboard data API.

LiveboardData is not tabular itself: it owns one VizData per visualization,
keyed by visualization id. Liveboard responses are row-major, so each VizData
is populated by row. Only v2 liveboards are supported.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from embeddata.contracts.payload_schema import LiveboardContent, LiveboardResponse
from embeddata.contracts.table_schema import VizSummary
from embeddata.logging.logger import LogContext, get_logger, with_context
from embeddata.tabular.base import TabularData, sort_objects
from embeddata.utils.formatters import preview_payload

_logger = get_logger("parsers")
log = with_context(_logger, LogContext(payload_kind="liveboard"))


class VizData(TabularData):
    """One visualization of a liveboard."""

    def __init__(self, viz_id: str, viz_name: Optional[str], original_data: Any) -> None:
        super().__init__(original_data)
        self.viz_id = viz_id
        self.viz_name = viz_name


class LiveboardData:
    def __init__(self, original_data: Any = None) -> None:
        self._original_data = original_data
        self.viz_data: Dict[str, VizData] = {}
        self.metadata_id: Optional[str] = None
        self.metadata_name: Optional[str] = None

    @property
    def original_data(self) -> Any:
        return self._original_data

    @property
    def viz_ids(self) -> List[str]:
        return list(self.viz_data.keys())

    def get_viz(self, viz_id: str) -> Optional[VizData]:
        return self.viz_data.get(viz_id)

    def list_visualizations(self) -> List[VizSummary]:
        """Summaries of the visualizations, sorted by name."""
        items = [
            {
                "viz_id": viz.viz_id,
                "viz_name": viz.viz_name,
                "sort_name": viz.viz_name or "",
                "nbr_rows": viz.nbr_rows,
                "nbr_columns": viz.nbr_columns,
            }
            for viz in self.viz_data.values()
        ]
        sort_objects(items, "sort_name")
        return [
            VizSummary(
                viz_id=item["viz_id"],
                viz_name=item["viz_name"],
                nbr_rows=item["nbr_rows"],
                nbr_columns=item["nbr_columns"],
            )
            for item in items
        ]

    @classmethod
    def create_from_json(cls, payload: Dict[str, Any]) -> "LiveboardData":
        """
        Build from a liveboard data response. Never raises. A malformed
        visualization block is logged and skipped; the others are still parsed.
        A repeated visualization id replaces the earlier block.
        """
        liveboard_data = cls(payload)

        try:
            response = LiveboardResponse.model_validate(payload)
        except Exception as exc:
            log.error("Error creating liveboard data: %s", exc)
            log.error(preview_payload(payload))
            return liveboard_data

        liveboard_data.metadata_id = response.metadata_id
        liveboard_data.metadata_name = response.metadata_name

        for idx, block in enumerate(response.contents):
            try:
                content = LiveboardContent.model_validate(block)
                viz_id = str(content.visualization_id)
                viz_data = VizData(viz_id, content.visualization_name, block)
                viz_data.column_names = content.column_names
                viz_data.populate_data_by_row(content.data_rows)
            except Exception as exc:
                with_context(_logger, LogContext(payload_kind="liveboard", viz_id=_block_viz_id(block))).error(
                    "Error creating liveboard visualization %d: %s", idx, exc
                )
                log.error(preview_payload(block))
                continue

            if viz_id in liveboard_data.viz_data:
                log.warning("Duplicate visualization id %s replaces an earlier block", viz_id)
            liveboard_data.viz_data[viz_id] = viz_data

        return liveboard_data


def _block_viz_id(block: Any) -> Optional[str]:
    if isinstance(block, dict):
        value = block.get("visualization_id")
        return str(value) if value is not None else None
    return None
