# ==============================
# Action Data
# ==============================
"""
Data from Search and Answers where the action came from the main menu or the
primary action. Also works for EventType.Data events.
Does not work for liveboard visualizations or context menus.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from embeddata.contracts.payload_schema import EmbedAnswerData
from embeddata.logging.logger import LogContext, get_logger, with_context
from embeddata.tabular.base import TabularData
from embeddata.utils.formatters import compact_kv, preview_payload

log = with_context(get_logger("parsers"), LogContext(payload_kind="action"))


def _find_answer_data(payload: Any) -> Optional[Dict[str, Any]]:
    # Callers send either {data: {embedAnswerData}} or {embedAnswerData}
    if not isinstance(payload, dict):
        return None
    nested = payload.get("data")
    if isinstance(nested, dict) and nested.get("embedAnswerData"):
        return nested["embedAnswerData"]
    return payload.get("embedAnswerData") or None


class ActionData(TabularData):
    @classmethod
    def create_from_json(cls, payload: Dict[str, Any]) -> "ActionData":
        """
        Build from an action payload. Never raises: errors are logged and an
        empty (or partially filled) object is returned.
        """
        action_data = cls(payload)

        try:
            root = _find_answer_data(payload)
            if root is None:
                log.error("No embedAnswerData found in the data")
                return action_data

            answer = EmbedAnswerData.model_validate(root)

            # More columns can be described than there is data for; data is aligned by column id.
            names_by_id: Dict[Any, str] = {}
            for entry in answer.columns:
                names_by_id.setdefault(entry.column.id, entry.column.name)

            column_names: List[str] = []
            column_values: List[List[Any]] = []
            for lite in answer.first_block().column_data_lite:
                name = names_by_id.get(lite.column_id)
                if name is None:
                    log.error("Data error: %s not found in the columns names.", lite.column_id)
                    continue
                column_names.append(name)
                column_values.append(lite.data_value)

            action_data.column_names = column_names
            action_data.populate_data_by_column(column_values)
            log.debug(
                "Parsed action data %s",
                compact_kv({"columns": action_data.nbr_columns, "rows": action_data.nbr_rows}),
            )
        except Exception as exc:
            log.error("Error creating action data: %s", exc)
            log.error(preview_payload(payload))

        return action_data
