# ==============================
# Serializers
# ==============================
"""
Presentation formats for TabularData: row-major view, HTML table, CSV.

HTML:
- CSS classes default to tabular-data (table, cells) and tabular-data-th (headers).
- Header and cell text is escaped unless escape=False, which inserts values verbatim.

CSV:
- Every field is double-quoted; embedded quotes are doubled.
- Header row first, one row per line, every line ends with "\\n".
- Embedded newlines are only protected by the quoting.
- Values use str(); None is written as an empty field.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Union

from embeddata.config.schema import Settings
from embeddata.contracts.errors import PayloadError
from embeddata.contracts.table_schema import TableView
from embeddata.parsers.liveboard import LiveboardData
from embeddata.tabular.base import TabularData

CSV_DATA_URI_PREFIX = "data:text/csv;charset=utf-8,"


def _escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def _cell_text(value: Any) -> str:
    return "" if value is None else str(value)


def table_export(tabular: TabularData, column_names: Union[None, str, Sequence[str]] = None) -> TableView:
    """Row-major export of the requested columns (all columns by default)."""
    if isinstance(column_names, str):
        requested: List[str] = [column_names]
    elif column_names:
        requested = list(column_names)
    else:
        requested = tabular.column_names
    columns = [tabular.get_original_column_name(name) or name for name in requested]
    rows = tabular.get_data_as_table(requested)
    return TableView(columns=columns, rows=rows, nbr_rows=len(rows), nbr_columns=len(columns))


def tabular_data_to_html(
    tabular: TabularData,
    *,
    escape: bool = True,
    table_class: str = "tabular-data",
    header_class: str = "tabular-data-th",
    cell_class: str = "tabular-data",
) -> str:
    text = _escape if escape else (lambda s: s)

    parts: List[str] = [f'<table class="{table_class}">', "<tr>"]
    for column_name in tabular.column_names:
        parts.append(f'<th class="{header_class}">{text(str(column_name))}</th>')
    parts.append("</tr>")

    for row in tabular.get_data_as_table():
        parts.append("<tr>")
        for value in row:
            parts.append(f'<td class="{cell_class}">{text(_cell_text(value))}</td>')
        parts.append("</tr>")
    parts.append("</table>")

    return "".join(parts)


def _csv_line(values: Sequence[Any]) -> str:
    return '"' + '","'.join(_cell_text(v).replace('"', '""') for v in values) + '"\n'


def tabular_data_to_csv(tabular: TabularData, *, data_uri: bool = False) -> str:
    """CSV text that can be displayed or saved; data_uri=True makes it usable as a download href."""
    parts: List[str] = [CSV_DATA_URI_PREFIX] if data_uri else []
    parts.append(_csv_line(tabular.column_names))
    for row in tabular.get_data_as_table():
        parts.append(_csv_line(row))
    return "".join(parts)


def html_options(settings: Settings) -> Dict[str, Any]:
    """Keyword arguments for tabular_data_to_html taken from Settings.export."""
    cfg = settings.export
    return {
        "escape": cfg.html_escape,
        "table_class": cfg.table_class,
        "header_class": cfg.header_class,
        "cell_class": cfg.cell_class,
    }


def pick_table(parsed: Union[TabularData, LiveboardData], viz_id: Optional[str] = None) -> TabularData:
    """The table to serialize: the parsed object itself, or one liveboard visualization."""
    if isinstance(parsed, LiveboardData):
        if not viz_id:
            raise PayloadError("A visualization id is required for liveboard data", kind="liveboard")
        viz = parsed.get_viz(viz_id)
        if viz is None:
            raise PayloadError(f"Unknown visualization id: {viz_id}", kind="liveboard")
        return viz
    return parsed


def export_view(
    parsed: Union[TabularData, LiveboardData],
    column_names: Union[None, str, Sequence[str]] = None,
) -> Dict[str, Any]:
    """JSON-ready rendering used by the CLI and the HTTP gateway."""
    if isinstance(parsed, LiveboardData):
        return {
            "metadata_id": parsed.metadata_id,
            "metadata_name": parsed.metadata_name,
            "visualizations": [s.model_dump() for s in parsed.list_visualizations()],
            "tables": {
                viz_id: table_export(viz, column_names).model_dump()
                for viz_id, viz in parsed.viz_data.items()
            },
        }
    return table_export(parsed, column_names).model_dump()
