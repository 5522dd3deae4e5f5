# ==============================
# Formatters
# ==============================
"""
Small human-friendly formatters for log lines and the CLI.

No I/O. No persistence.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from embeddata.logging.redaction import SecurityRedactor

_REDACTOR = SecurityRedactor()


def compact_kv(d: Dict[str, Any], *, keys: Optional[List[str]] = None, max_len: int = 300) -> str:
    use = d if keys is None else {k: d.get(k) for k in keys}
    parts = []
    for k, v in use.items():
        s = f"{k}={_short(v, max_len=max_len)}"
        parts.append(s)
    return " ".join(parts)


def preview_payload(payload: Any, *, max_len: int = 500) -> str:
    """Redacted, truncated JSON rendering of a payload for a log line."""
    try:
        text = json.dumps(_REDACTOR.redact(payload), ensure_ascii=False, default=str, sort_keys=True)
    except (TypeError, ValueError):
        text = _REDACTOR.redact_text(repr(payload))
    return _short(text, max_len=max_len)


def _short(x: Any, *, max_len: int) -> str:
    s = str(x)
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."
