# ==============================
# CLI Entrypoint
# ==============================
"""
CLI for embeddata.

Supported commands:
  embeddata kinds
  embeddata parse --kind action --payload '{"embedAnswerData": {...}}'
  embeddata parse --kind search --payload-file response.json --format csv
  embeddata parse --kind liveboard --payload-file lb.json --format html --viz-id viz_1
  embeddata parse --kind action --payload-file payload.json --columns "Region,Sales"
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from embeddata.config.loader import load_settings
from embeddata.config.schema import Settings
from embeddata.contracts.errors import PayloadError
from embeddata.export.serializers import (
    export_view,
    html_options,
    pick_table,
    tabular_data_to_csv,
    tabular_data_to_html,
)
from embeddata.logging.logger import bootstrap_logger
from embeddata.parsers.registry import ParserRegistry, default_registry

FORMATS = ("json", "csv", "html")


def _json_load(text: str) -> Dict[str, Any]:
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON payload: {exc}") from exc
    if not isinstance(value, dict):
        raise SystemExit("JSON payload must be an object.")
    return value


def _load_payload_arg(payload: Optional[str], payload_file: Optional[str]) -> Dict[str, Any]:
    if payload and payload_file:
        raise SystemExit("Provide only one of --payload or --payload-file.")
    if payload_file:
        text = Path(payload_file).read_text(encoding="utf-8")
        return _json_load(text)
    if payload:
        return _json_load(payload)
    raise SystemExit("Provide one of --payload or --payload-file.")


def _split_columns(columns: Optional[str]) -> Optional[List[str]]:
    if not columns:
        return None
    return [c.strip() for c in columns.split(",") if c.strip()]


def _print_json(obj: Any) -> None:
    print(json.dumps(obj, indent=2, ensure_ascii=False, default=str))


def cmd_kinds(registry: ParserRegistry) -> int:
    _print_json({"kinds": registry.list()})
    return 0


def cmd_parse(
    registry: ParserRegistry,
    settings: Settings,
    *,
    kind: str,
    payload: Dict[str, Any],
    fmt: str,
    columns: Optional[List[str]],
    viz_id: Optional[str],
) -> int:
    try:
        parsed = registry.parse(kind, payload)
        if fmt == "json":
            _print_json({"ok": True, "kind": kind, "data": export_view(parsed, columns)})
            return 0
        table = pick_table(parsed, viz_id)
    except PayloadError as exc:
        _print_json({"ok": False, "kind": kind, "error": {"code": "invalid_payload", "message": str(exc)}})
        return 1

    if fmt == "csv":
        sys.stdout.write(tabular_data_to_csv(table, data_uri=settings.export.csv_data_uri))
    else:
        sys.stdout.write(tabular_data_to_html(table, **html_options(settings)) + "\n")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="embeddata")
    ap.add_argument("--repo-root", help="Directory holding configs/ and .env", default=None)
    sub = ap.add_subparsers(dest="cmd", required=True)

    sub.add_parser("kinds")

    ap_parse = sub.add_parser("parse")
    ap_parse.add_argument("--kind", required=True, help="Payload kind, see `kinds`")
    ap_parse.add_argument("--payload", help="JSON object string", default=None)
    ap_parse.add_argument("--payload-file", help="Path to JSON file with payload", default=None)
    ap_parse.add_argument("--format", choices=FORMATS, default="json")
    ap_parse.add_argument("--columns", help="Comma-separated column names (json format only)", default=None)
    ap_parse.add_argument("--viz-id", help="Visualization to export from liveboard data", default=None)

    args = ap.parse_args(argv)

    settings = load_settings(repo_root=args.repo_root)
    bootstrap_logger(settings)
    registry = default_registry()

    if args.cmd == "kinds":
        return cmd_kinds(registry)
    if args.cmd == "parse":
        if not registry.has(args.kind):
            raise SystemExit(f"Unknown kind '{args.kind}'. Run `kinds` to list payload kinds.")
        payload = _load_payload_arg(args.payload, args.payload_file)
        return cmd_parse(
            registry,
            settings,
            kind=args.kind,
            payload=payload,
            fmt=args.format,
            columns=_split_columns(args.columns),
            viz_id=args.viz_id,
        )

    raise SystemExit("Unknown command")


if __name__ == "__main__":
    raise SystemExit(main())
