# ==============================
# Normalize & Export Routes
# ==============================
from __future__ import annotations

from typing import Any, Dict, List, NoReturn, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse, PlainTextResponse
from pydantic import BaseModel, Field

from embeddata.config.schema import Settings
from embeddata.contracts.errors import PayloadError
from embeddata.export.serializers import (
    export_view,
    html_options,
    pick_table,
    tabular_data_to_csv,
    tabular_data_to_html,
)
from embeddata.parsers.registry import Parsed, ParserRegistry
from gateway.api.deps import get_registry, get_settings


router = APIRouter()


class NormalizeRequest(BaseModel):
    payload: Dict[str, Any] = Field(default_factory=dict)
    columns: Optional[List[str]] = Field(default=None, description="Columns to return, case-insensitive.")


class ExportRequest(BaseModel):
    payload: Dict[str, Any] = Field(default_factory=dict)
    viz_id: Optional[str] = Field(default=None, description="Visualization to export from liveboard data.")


def _ok(data: Dict[str, Any], *, meta: Dict[str, Any] | None = None) -> Dict[str, Any]:
    return {"ok": True, "data": data, "error": None, "meta": meta or {}}


def _error(
    *,
    http_status: int,
    code: str,
    message: str,
    details: Dict[str, Any] | None = None,
    meta: Dict[str, Any] | None = None,
) -> NoReturn:
    payload = {
        "ok": False,
        "data": None,
        "error": {"code": code, "message": message, "details": details or {}},
        "meta": meta or {},
    }
    raise HTTPException(status_code=http_status, detail=payload)


def _parse(registry: ParserRegistry, kind: str, payload: Dict[str, Any]) -> Parsed:
    if not registry.has(kind):
        _error(
            http_status=status.HTTP_404_NOT_FOUND,
            code="unknown_kind",
            message=f"Unknown payload kind '{kind}'.",
            details={"available": list(registry.list().keys())},
        )
    try:
        return registry.parse(kind, payload)
    except PayloadError as exc:
        _error(http_status=422, code="invalid_payload", message=str(exc))


def _pick(parsed: Parsed, viz_id: Optional[str]):
    try:
        return pick_table(parsed, viz_id)
    except PayloadError as exc:
        _error(http_status=422, code="invalid_payload", message=str(exc))


@router.get("/kinds")
def list_kinds(registry: ParserRegistry = Depends(get_registry)) -> Dict[str, Any]:
    return _ok({"kinds": registry.list()})


@router.post("/normalize/{kind}")
def normalize(
    kind: str,
    req: NormalizeRequest,
    registry: ParserRegistry = Depends(get_registry),
) -> Dict[str, Any]:
    parsed = _parse(registry, kind, req.payload)
    return _ok(export_view(parsed, req.columns), meta={"kind": kind})


@router.post("/export/{kind}/csv", response_class=PlainTextResponse)
def export_csv(
    kind: str,
    req: ExportRequest,
    registry: ParserRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
) -> PlainTextResponse:
    table = _pick(_parse(registry, kind, req.payload), req.viz_id)
    body = tabular_data_to_csv(table, data_uri=settings.export.csv_data_uri)
    return PlainTextResponse(body, media_type="text/csv")


@router.post("/export/{kind}/html", response_class=HTMLResponse)
def export_html(
    kind: str,
    req: ExportRequest,
    registry: ParserRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    table = _pick(_parse(registry, kind, req.payload), req.viz_id)
    return HTMLResponse(tabular_data_to_html(table, **html_options(settings)))
