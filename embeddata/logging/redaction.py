# ==============================
# Payload Redaction
# ==============================
"""
Redaction helpers for payload dumps.

Parse failures log the offending payload. Embed events and REST responses can
carry session tokens or auth headers next to the answer data, so anything
dumped into a log line goes through SecurityRedactor first.

Scope:
- Regex-based redaction on strings + key-based redaction on mappings.
- No attempt at PII detection inside analytics cell values.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Optional, Pattern

DEFAULT_MASK = "[REDACTED]"

DEFAULT_KEY_HINTS: List[str] = [
    "password",
    "secret",
    "token",
    "api_key",
    "apikey",
    "authorization",
    "bearer",
    "cookie",
    "session",
]

DEFAULT_PATTERNS: List[str] = [
    r"(?i)bearer\s+[A-Za-z0-9\-_.=]+",
    r"eyJ[A-Za-z0-9\-_]+\.[A-Za-z0-9\-_]+\.[A-Za-z0-9\-_]+",  # JWT
    r"(?i)(?:api[_-]?key|token)\s*[:=]\s*\S+",
]


def _compile(patterns: Iterable[str]) -> List[Pattern[str]]:
    compiled: List[Pattern[str]] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error:
            # ignore invalid patterns from config
            continue
    return compiled


class SecurityRedactor:
    def __init__(
        self,
        *,
        patterns: Optional[List[str]] = None,
        key_hints: Optional[List[str]] = None,
        mask: str = DEFAULT_MASK,
    ) -> None:
        self.mask = mask
        self.key_hints = [k.lower() for k in (key_hints or DEFAULT_KEY_HINTS)]
        self.patterns = _compile(list(DEFAULT_PATTERNS) + list(patterns or []))

    def redact_text(self, text: str) -> str:
        out = text
        for p in self.patterns:
            out = p.sub(self.mask, out)
        return out

    def redact(self, obj: Any) -> Any:
        """Return a redacted copy; the input is never modified."""
        if obj is None:
            return None
        if isinstance(obj, str):
            return self.redact_text(obj)
        if isinstance(obj, (bool, int, float)):
            return obj
        if isinstance(obj, (list, tuple)):
            return [self.redact(i) for i in obj]
        if isinstance(obj, dict):
            out: Dict[str, Any] = {}
            for k, v in obj.items():
                ks = str(k).lower()
                if any(h in ks for h in self.key_hints):
                    out[k] = self.mask
                else:
                    out[k] = self.redact(v)
            return out
        return self.redact_text(str(obj))
