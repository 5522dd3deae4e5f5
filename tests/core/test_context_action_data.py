# ==============================
# Tests: Context Action Data
# ==============================
from __future__ import annotations

import logging

from embeddata.parsers.context_action import ContextActionData


def test_selected_points_give_one_row(context_action_payload) -> None:
    cad = ContextActionData.create_from_json(context_action_payload)

    assert cad.column_names == ["Region", "Sales"]
    assert cad.nbr_rows == 1
    assert cad.get_data_as_table() == [["West", 100]]


def test_points_at_top_level(make_point) -> None:
    payload = {"contextMenuPoints": {"selectedPoints": [make_point(attributes=[("Region", "West")])]}}
    cad = ContextActionData.create_from_json(payload)
    assert cad.get_data_as_table() == [["West"]]


def test_attributes_before_measures_within_a_point(make_point) -> None:
    point = make_point(attributes=[("Region", "West"), ("Year", 2024)], measures=[("Sales", 7), ("Units", 3)])
    cad = ContextActionData.create_from_json({"contextMenuPoints": {"selectedPoints": [point]}})

    assert cad.column_names == ["Region", "Year", "Sales", "Units"]
    assert cad.get_data_as_table() == [["West", 2024, 7, 3]]


def test_clicked_points_fallback(make_point) -> None:
    payload = {
        "contextMenuPoints": {
            "selectedPoints": [make_point()],
            "clickedPoints": [
                make_point(attributes=[("Region", "East")], measures=[("Sales", 5)]),
                make_point(attributes=[("Region", "Ignored")]),
            ],
        }
    }
    cad = ContextActionData.create_from_json(payload)

    assert cad.column_names == ["Region", "Sales"]
    assert cad.get_data_as_table() == [["East", 5]]


def test_clicked_points_ignored_when_selection_has_data(context_action_payload) -> None:
    cad = ContextActionData.create_from_json(context_action_payload)
    assert cad.get_data_as_table(["region"]) == [["West"]]


def test_duplicate_names_last_value_wins(make_point) -> None:
    payload = {
        "contextMenuPoints": {
            "selectedPoints": [
                make_point(attributes=[("Region", "West")]),
                make_point(attributes=[("Region", "East")]),
            ]
        }
    }
    cad = ContextActionData.create_from_json(payload)

    assert cad.column_names == ["Region", "Region"]
    assert cad.nbr_columns == 2
    assert cad.get_data_as_table(["Region"]) == [["East"]]


def test_missing_points_is_empty(caplog) -> None:
    caplog.set_level(logging.ERROR, logger="embeddata")
    cad = ContextActionData.create_from_json({"data": {}})

    assert cad.nbr_columns == 0
    assert cad.nbr_rows == 0
    assert "No contextMenuPoints found" in caplog.text


def test_points_without_values_is_empty(make_point, caplog) -> None:
    caplog.set_level(logging.ERROR, logger="embeddata")
    cad = ContextActionData.create_from_json({"contextMenuPoints": {"selectedPoints": [make_point()]}})

    assert cad.nbr_columns == 0
    assert "No data found in contextMenuPoints" in caplog.text


def test_malformed_point_never_raises(caplog) -> None:
    caplog.set_level(logging.ERROR, logger="embeddata")
    payload = {"contextMenuPoints": {"selectedPoints": [{"selectedAttributes": [{"value": "no column"}]}]}}

    cad = ContextActionData.create_from_json(payload)

    assert cad.nbr_columns == 0
    assert "Error creating context action data" in caplog.text


def test_null_lists_are_tolerated(make_point) -> None:
    point = {"selectedAttributes": None, "selectedMeasures": [{"column": {"name": "Sales"}, "value": 1}]}
    cad = ContextActionData.create_from_json({"contextMenuPoints": {"selectedPoints": [point]}})
    assert cad.get_data_as_table() == [[1]]
