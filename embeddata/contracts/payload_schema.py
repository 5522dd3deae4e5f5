# ==============================
# Payload Contracts
# ==============================
"""
Views over the JSON payloads sent by the embedding SDK and the REST data APIs.

These models only describe the fields the parsers read. Everything else on a
payload is allowed and ignored here; the parsers keep the raw payload
untouched as `original_data`, so consumers can still query it directly.

Shapes:
- Embed answer data (menu / primary actions, EventType.Data):
    embedAnswerData.columns[].column.{id,name}
    embedAnswerData.data -> {columnDataLite: [...]} or [{columnDataLite: [...]}]
- Points (context menus, viz point clicks):
    {selectedAttributes: [{column: {name}, value}], selectedMeasures: [...]}
- REST data responses (search data, fetch answer data, liveboard data):
    contents[].{column_names, data_rows[, visualization_id, visualization_name]}

Cell values are kept as-is (Any): no coercion of strings, numbers or booleans.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ==============================
# Enums
# ==============================
class VizPointClickType(str, Enum):
    """Event types that carry a clicked point."""
    CLICK = "vizPointClick"
    DOUBLE_CLICK = "vizPointDoubleClick"
    RIGHT_CLICK = "vizPointRightClick"


_LENIENT = ConfigDict(extra="allow", populate_by_name=True)


# ==============================
# Points
# ==============================
class PointColumn(BaseModel):
    model_config = _LENIENT

    name: str
    data_type: Optional[str] = Field(default=None, alias="dataType")


class PointValue(BaseModel):
    """One attribute or measure of a selected point."""
    model_config = _LENIENT

    column: PointColumn
    value: Any = None


class SelectedPoint(BaseModel):
    model_config = _LENIENT

    selected_attributes: Optional[List[PointValue]] = Field(default=None, alias="selectedAttributes")
    selected_measures: Optional[List[PointValue]] = Field(default=None, alias="selectedMeasures")


class ContextMenuPoints(BaseModel):
    model_config = _LENIENT

    selected_points: Optional[List[SelectedPoint]] = Field(default=None, alias="selectedPoints")
    clicked_points: Optional[List[SelectedPoint]] = Field(default=None, alias="clickedPoints")


class VizPointClickEventData(BaseModel):
    model_config = _LENIENT

    clicked_point: Optional[SelectedPoint] = Field(default=None, alias="clickedPoint")
    selected_points: Optional[List[SelectedPoint]] = Field(default=None, alias="selectedPoints")
    viz_id: Optional[str] = Field(default=None, alias="vizId")
    embed_answer_data: Any = Field(default=None, alias="embedAnswerData")


# ==============================
# Embed Answer Data
# ==============================
class EmbedColumnMeta(BaseModel):
    model_config = _LENIENT

    id: Any
    name: str
    data_type: Optional[str] = Field(default=None, alias="dataType")


class EmbedColumn(BaseModel):
    model_config = _LENIENT

    column: EmbedColumnMeta


class ColumnDataLite(BaseModel):
    """Values of one column, addressed by column id."""
    model_config = _LENIENT

    column_id: Any = Field(..., alias="columnId")
    data_value: List[Any] = Field(default_factory=list, alias="dataValue")


class AnswerDataBlock(BaseModel):
    model_config = _LENIENT

    column_data_lite: List[ColumnDataLite] = Field(default_factory=list, alias="columnDataLite")
    total_row_count: Optional[Union[int, str]] = Field(default=None, alias="totalRowCount")


class EmbedAnswerData(BaseModel):
    model_config = _LENIENT

    columns: List[EmbedColumn]
    data: Union[List[AnswerDataBlock], AnswerDataBlock]

    def first_block(self) -> AnswerDataBlock:
        """The data section is either one block or a list of blocks; only the first is used."""
        if isinstance(self.data, list):
            if not self.data:
                raise ValueError("embedAnswerData.data is an empty list")
            return self.data[0]
        return self.data


# ==============================
# REST Data Responses
# ==============================
class DataContent(BaseModel):
    model_config = _LENIENT

    column_names: List[str]
    data_rows: List[List[Any]]
    available_data_row_count: Optional[int] = None
    returned_data_row_count: Optional[int] = None


class LiveboardContent(DataContent):
    visualization_id: Union[str, int]
    visualization_name: Optional[str] = None


class DataResponse(BaseModel):
    """Search data / fetch answer data responses; only contents[0] is validated by the parser."""
    model_config = _LENIENT

    contents: List[Any]
    metadata_id: Optional[str] = None
    metadata_name: Optional[str] = None


class LiveboardResponse(BaseModel):
    """Liveboard data response; blocks are validated one at a time by the parser."""
    model_config = _LENIENT

    contents: List[Any]
    metadata_id: Optional[str] = None
    metadata_name: Optional[str] = None
