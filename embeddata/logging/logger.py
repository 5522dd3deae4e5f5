# ==============================
# Logging Bootstrap
# ==============================
"""
Logging bootstrap.

Goals:
- Centralize logger configuration using Settings.logging.
- Provide structured context fields (payload_kind, viz_id, event_type).
- Keep it simple: stdlib logging + JSON-line formatter.

No persistence here.
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from typing import Any, Dict, Optional

from embeddata.config.schema import Settings
from embeddata.logging.redaction import SecurityRedactor

ROOT_LOGGER_NAME = "embeddata"
CONTEXT_FIELDS = ("payload_kind", "viz_id", "event_type")


@dataclass(frozen=True)
class LogContext:
    payload_kind: Optional[str] = None
    viz_id: Optional[str] = None
    event_type: Optional[str] = None


class JsonLineFormatter(logging.Formatter):
    def __init__(self, *, redactor: Optional[SecurityRedactor] = None) -> None:
        super().__init__()
        self.redactor = redactor

    def format(self, record: logging.LogRecord) -> str:
        msg = record.getMessage()
        if self.redactor is not None:
            msg = self.redactor.redact_text(msg)
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "msg": msg,
        }
        # Optional structured extras; unset fields are skipped
        for k in CONTEXT_FIELDS:
            value = getattr(record, k, None)
            if value is not None:
                payload[k] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def bootstrap_logger(settings: Settings) -> logging.Logger:
    """
    Configure root logger based on settings.
    Returns the named package logger ("embeddata").
    """
    level = getattr(logging, settings.logging.level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)

    # clear existing handlers to avoid duplicates in reload
    root.handlers = []

    if settings.logging.console:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        redactor = SecurityRedactor(patterns=settings.logging.redact_patterns) if settings.logging.redact else None
        handler.setFormatter(JsonLineFormatter(redactor=redactor))
        root.addHandler(handler)
    else:
        root.addHandler(logging.NullHandler())

    return logging.getLogger(ROOT_LOGGER_NAME)


def get_logger(name: str) -> logging.Logger:
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def with_context(logger: logging.Logger, ctx: LogContext) -> logging.LoggerAdapter:
    return logging.LoggerAdapter(
        logger,
        {
            "payload_kind": ctx.payload_kind,
            "viz_id": ctx.viz_id,
            "event_type": ctx.event_type,
        },
    )
