# ==============================
# Config Schemas (Pydantic)
# ==============================
"""
Pydantic settings models for embeddata.

Notes:
- Keep these schemas stable: the CLI, the gateway and the logger depend on them.
- No env reads here. No file IO here. Pure types + defaults.
- loader.py builds a single Settings object with precedence merging.

Precedence (implemented in loader.py):
env > .env > configs/*.yaml > defaults
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


# ==============================
# App Settings
# ==============================


class PathsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    repo_root: str = Field(default=".", description="Repo root (relative or absolute)")
    configs_dir: str = Field(default="configs", description="Configs directory")


class AppConfig(BaseModel):
    """Set by the loader from its arguments; not read from YAML."""
    model_config = ConfigDict(extra="forbid")

    paths: PathsConfig = Field(default_factory=PathsConfig)


# ==============================
# Logging Settings
# ==============================


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    level: str = Field(default="INFO")
    console: bool = Field(default=True)
    redact: bool = Field(default=True, description="Redact secrets from payload dumps in log lines")
    redact_patterns: List[str] = Field(default_factory=list)


# ==============================
# Export Settings
# ==============================


class ExportConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    html_escape: bool = Field(
        default=True,
        description="Escape header and cell text in HTML tables. False inserts values verbatim.",
    )
    csv_data_uri: bool = Field(
        default=False,
        description="Prefix CSV output with a 'data:text/csv' URI header for browser downloads.",
    )
    table_class: str = Field(default="tabular-data")
    header_class: str = Field(default="tabular-data-th")
    cell_class: str = Field(default="tabular-data")


# ==============================
# Top-Level Settings
# ==============================


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    app: AppConfig = Field(default_factory=AppConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
