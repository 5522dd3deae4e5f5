# ==============================
# Tests: Viz Point Click
# ==============================
from __future__ import annotations

import logging

from embeddata.parsers.viz_point_click import VizPointClick


def test_clicked_point_gives_one_row(viz_point_click_payload) -> None:
    vpc = VizPointClick.create_from_json(viz_point_click_payload)

    assert vpc.column_names == ["Region", "Sales"]
    assert vpc.nbr_rows == 1
    assert vpc.get_data_as_table() == [["West", 250.5]]


def test_accessors(viz_point_click_payload) -> None:
    vpc = VizPointClick.create_from_json(viz_point_click_payload)

    assert vpc.event_type == "vizPointDoubleClick"
    assert vpc.viz_id == "viz-42"
    assert vpc.embed_answer_data is viz_point_click_payload["data"]["embedAnswerData"]


def test_empty_clicked_point_falls_back_to_selected_points(make_point) -> None:
    payload = {
        "type": "vizPointClick",
        "data": {
            "clickedPoint": {},
            "selectedPoints": [make_point(attributes=[("Region", "North")])],
        },
    }
    vpc = VizPointClick.create_from_json(payload)

    assert vpc.column_names == ["Region"]
    assert vpc.nbr_rows == 1
    assert vpc.get_data_as_table() == [["North"]]


def test_fallback_uses_first_selected_point_only(make_point) -> None:
    payload = {
        "type": "vizPointRightClick",
        "data": {
            "clickedPoint": make_point(),
            "selectedPoints": [
                make_point(measures=[("Sales", 1)]),
                make_point(measures=[("Units", 2)]),
            ],
        },
    }
    vpc = VizPointClick.create_from_json(payload)
    assert vpc.column_names == ["Sales"]


def test_missing_clicked_point_falls_back(make_point) -> None:
    payload = {"type": "vizPointClick", "data": {"selectedPoints": [make_point(measures=[("Sales", 3)])]}}
    vpc = VizPointClick.create_from_json(payload)
    assert vpc.get_data_as_table() == [[3]]


def test_no_points_is_empty(caplog) -> None:
    caplog.set_level(logging.ERROR, logger="embeddata")
    vpc = VizPointClick.create_from_json({"type": "vizPointClick", "data": {"vizId": "v1"}})

    assert vpc.nbr_columns == 0
    assert vpc.viz_id == "v1"
    assert "No data found in viz point click event" in caplog.text
    assert any(getattr(r, "viz_id", None) == "v1" for r in caplog.records)


def test_unknown_event_type_still_parses(viz_point_click_payload, caplog) -> None:
    viz_point_click_payload["type"] = "somethingElse"
    caplog.set_level(logging.WARNING, logger="embeddata")

    vpc = VizPointClick.create_from_json(viz_point_click_payload)

    assert vpc.nbr_columns == 2
    assert "Unexpected viz point click event type" in caplog.text


def test_malformed_payload_never_raises(caplog) -> None:
    caplog.set_level(logging.ERROR, logger="embeddata")
    vpc = VizPointClick.create_from_json({"type": "vizPointClick", "data": {"clickedPoint": "bad"}})

    assert vpc.nbr_columns == 0
    assert vpc.event_type == "vizPointClick"
    assert vpc.embed_answer_data is None
    assert "Error creating viz point click data" in caplog.text
