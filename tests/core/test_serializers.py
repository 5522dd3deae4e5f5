# ==============================
# Tests: Serializers
# ==============================
from __future__ import annotations

import csv
import io

import pytest

from embeddata.config.schema import Settings
from embeddata.contracts.errors import PayloadError
from embeddata.export.serializers import (
    CSV_DATA_URI_PREFIX,
    export_view,
    html_options,
    pick_table,
    table_export,
    tabular_data_to_csv,
    tabular_data_to_html,
)
from embeddata.parsers.liveboard import LiveboardData
from embeddata.tabular.base import TabularData


def _table(names, rows) -> TabularData:
    td = TabularData({})
    td.column_names = names
    td.populate_data_by_row(rows)
    return td


def test_csv_escapes_embedded_quotes() -> None:
    td = _table(["Quote"], [['He said "hi"']])
    assert tabular_data_to_csv(td) == '"Quote"\n"He said ""hi"""\n'


def test_csv_quotes_every_field() -> None:
    td = _table(["Name", "Count", "Ok"], [["a", 1, True], ["", 2.5, False]])
    assert tabular_data_to_csv(td) == '"Name","Count","Ok"\n"a","1","True"\n"","2.5","False"\n'


def test_csv_round_trip_with_csv_reader() -> None:
    names = ['Col "A"', "Col, B", "C"]
    rows = [["x,y", 'say "no"', ""], ["", "plain", "multi\nline"]]
    td = _table(names, rows)

    parsed = list(csv.reader(io.StringIO(tabular_data_to_csv(td), newline="")))

    assert parsed[0] == names
    assert parsed[1:] == rows


def test_csv_data_uri_prefix() -> None:
    td = _table(["A"], [[1]])
    text = tabular_data_to_csv(td, data_uri=True)
    assert text.startswith(CSV_DATA_URI_PREFIX)
    assert text[len(CSV_DATA_URI_PREFIX):] == '"A"\n"1"\n'


def test_csv_none_cells_are_empty_fields() -> None:
    td = TabularData({})
    td.column_names = ["A", "B"]
    td.populate_data_by_column([[1, 2], []])
    assert tabular_data_to_csv(td) == '"A","B"\n"1",""\n"2",""\n'


def test_html_table_structure() -> None:
    td = _table(["Region", "Sales"], [["West", 100]])
    assert tabular_data_to_html(td) == (
        '<table class="tabular-data"><tr>'
        '<th class="tabular-data-th">Region</th><th class="tabular-data-th">Sales</th>'
        '</tr><tr><td class="tabular-data">West</td><td class="tabular-data">100</td></tr></table>'
    )


def test_html_escapes_by_default() -> None:
    td = _table(["<b>"], [["<script>alert('x')</script>"]])
    html = tabular_data_to_html(td)
    assert "<script>" not in html
    assert "&lt;script&gt;alert(&#39;x&#39;)&lt;/script&gt;" in html
    assert "&lt;b&gt;" in html


def test_html_raw_insertion_when_escape_disabled() -> None:
    td = _table(["Link"], [['<a href="#">x</a>']])
    assert '<td class="tabular-data"><a href="#">x</a></td>' in tabular_data_to_html(td, escape=False)


def test_html_options_from_settings() -> None:
    settings = Settings.model_validate({"export": {"html_escape": False, "table_class": "t"}})
    opts = html_options(settings)
    assert opts["escape"] is False
    assert opts["table_class"] == "t"
    td = _table(["A"], [["<i>"]])
    assert tabular_data_to_html(td, **opts).startswith('<table class="t">')


def test_html_empty_table() -> None:
    td = TabularData({})
    assert tabular_data_to_html(td) == '<table class="tabular-data"><tr></tr></table>'


def test_table_export_resolves_names() -> None:
    td = _table(["Region", "Sales"], [["West", 100], ["East", 5]])
    view = table_export(td, ["sales"])
    assert view.columns == ["Sales"]
    assert view.rows == [[100], [5]]
    assert view.nbr_rows == 2
    assert view.nbr_columns == 1


def test_table_export_missing_first_column_has_no_rows() -> None:
    td = _table(["Region"], [["West"]])
    view = table_export(td, ["Missing", "Region"])
    assert view.columns == ["Missing", "Region"]
    assert view.rows == []


def test_pick_table_for_liveboard(liveboard_payload) -> None:
    lb = LiveboardData.create_from_json(liveboard_payload)
    assert pick_table(lb, "viz-a").viz_name == "Revenue"
    with pytest.raises(PayloadError):
        pick_table(lb)
    with pytest.raises(PayloadError):
        pick_table(lb, "nope")


def test_export_view_for_liveboard(liveboard_payload) -> None:
    view = export_view(LiveboardData.create_from_json(liveboard_payload))
    assert [v["viz_id"] for v in view["visualizations"]] == ["viz-a", "viz-b"]
    assert view["tables"]["viz-b"]["rows"] == [["Paris", 3], ["Lyon", 5]]
