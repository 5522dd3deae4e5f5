# ==============================
# Table Contracts
# ==============================
"""
Stable output shapes for the CLI and the HTTP gateway.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TableView(BaseModel):
    """Row-major export of a TabularData object."""
    model_config = ConfigDict(extra="forbid")

    columns: List[str] = Field(default_factory=list)
    rows: List[List[Any]] = Field(default_factory=list)
    nbr_rows: int = 0
    nbr_columns: int = 0

    @model_validator(mode="after")
    def _rows_match_columns(self) -> "TableView":
        for row in self.rows:
            if len(row) != len(self.columns):
                raise ValueError("row length must match columns")
        return self


class VizSummary(BaseModel):
    model_config = ConfigDict(extra="forbid")

    viz_id: str
    viz_name: Optional[str] = None
    nbr_rows: int = 0
    nbr_columns: int = 0
