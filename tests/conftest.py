# ==============================
# Testing Fixtures
# ==============================
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))


def _point(
    attributes: Optional[List[tuple]] = None,
    measures: Optional[List[tuple]] = None,
) -> Dict[str, Any]:
    return {
        "selectedAttributes": [
            {"column": {"name": name, "dataType": "VARCHAR"}, "value": value}
            for name, value in (attributes or [])
        ],
        "selectedMeasures": [
            {"column": {"name": name, "dataType": "INT64"}, "value": value}
            for name, value in (measures or [])
        ],
    }


@pytest.fixture
def make_point():
    """Builds one selected point from (name, value) pairs."""
    return _point


@pytest.fixture
def action_payload() -> Dict[str, Any]:
    return {
        "type": "customAction",
        "embedAnswerData": {
            "columns": [
                {"column": {"id": "c1", "name": "Count", "dataType": "INT64"}},
                {"column": {"id": "c2", "name": "Label", "dataType": "VARCHAR"}},
            ],
            "data": [
                {
                    "columnDataLite": [
                        {"columnId": "c1", "dataValue": [1, 2]},
                        {"columnId": "c2", "dataValue": ["a", "b"]},
                    ],
                    "totalRowCount": "2",
                }
            ],
        },
    }


@pytest.fixture
def context_action_payload() -> Dict[str, Any]:
    return {
        "type": "customAction",
        "data": {
            "contextMenuPoints": {
                "selectedPoints": [
                    _point(attributes=[("Region", "West")]),
                    _point(measures=[("Sales", 100)]),
                ],
                "clickedPoints": [_point(attributes=[("Region", "East")])],
            }
        },
    }


@pytest.fixture
def viz_point_click_payload() -> Dict[str, Any]:
    return {
        "type": "vizPointDoubleClick",
        "status": "end",
        "data": {
            "vizId": "viz-42",
            "clickedPoint": _point(attributes=[("Region", "West")], measures=[("Sales", 250.5)]),
            "selectedPoints": [_point(attributes=[("Region", "North")])],
            "embedAnswerData": {"id": "viz-42", "name": "Sales by region"},
        },
    }


@pytest.fixture
def liveboard_payload() -> Dict[str, Any]:
    return {
        "metadata_id": "lb-1",
        "metadata_name": "Retail",
        "contents": [
            {
                "visualization_id": "viz-b",
                "visualization_name": "Units",
                "column_names": ["Store", "Units"],
                "data_rows": [["Paris", 3], ["Lyon", 5]],
                "returned_data_row_count": 2,
            },
            {
                "visualization_id": "viz-a",
                "visualization_name": "Revenue",
                "column_names": ["Store", "Revenue", "Open"],
                "data_rows": [["Paris", 1200.5, True]],
                "returned_data_row_count": 1,
            },
        ],
    }


@pytest.fixture
def search_payload() -> Dict[str, Any]:
    return {
        "metadata_id": "answer-7",
        "metadata_name": "Top products",
        "contents": [
            {
                "column_names": ["Product", "Quantity"],
                "data_rows": [["apple", 10], ["pear", 4], ["plum", 0]],
                "record_offset": 0,
                "record_size": 10,
                "available_data_row_count": 3,
                "returned_data_row_count": 3,
            }
        ],
    }
