# ==============================
# Payload Errors
# ==============================
"""
Errors raised to callers.

Only the search/answer parsers and the parser registry raise; the event
parsers log and return best-effort results instead.
"""

from __future__ import annotations

from typing import Optional


class PayloadError(ValueError):
    """A payload could not be normalized into tabular data."""

    def __init__(self, message: str, *, kind: Optional[str] = None) -> None:
        super().__init__(message)
        self.kind = kind
