# ==============================
# Parser Registry
# ==============================
"""
Payload kind -> parser factory.

Design:
- The CLI and the HTTP gateway resolve a parser by the kind name the caller gives.
- Kind names are normalized: "Context-Action" and "context_action" are the same kind.
- The default registry holds the six built-in kinds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

from embeddata.contracts.errors import PayloadError
from embeddata.parsers.action import ActionData
from embeddata.parsers.context_action import ContextActionData
from embeddata.parsers.liveboard import LiveboardData
from embeddata.parsers.search import AnswerData, SearchData
from embeddata.parsers.viz_point_click import VizPointClick
from embeddata.tabular.base import TabularData

Parsed = Union[TabularData, LiveboardData]
ParserFactory = Callable[[Dict[str, Any]], Parsed]


@dataclass(frozen=True)
class ParserRegistration:
    name: str
    factory: ParserFactory
    raises: bool
    description: str


class ParserRegistry:
    def __init__(self) -> None:
        self._parsers: Dict[str, ParserRegistration] = {}

    def register(
        self,
        *,
        name: str,
        factory: ParserFactory,
        raises: bool = False,
        description: str = "",
        overwrite: bool = False,
    ) -> None:
        norm = _norm(name)
        if not overwrite and norm in self._parsers:
            raise ValueError(f"Parser already registered: {name}")
        self._parsers[norm] = ParserRegistration(
            name=norm, factory=factory, raises=raises, description=description
        )

    def resolve(self, name: str) -> ParserRegistration:
        reg = self._parsers.get(_norm(name))
        if reg is None:
            raise PayloadError(f"Unknown payload kind: {name}", kind=name)
        return reg

    def has(self, name: str) -> bool:
        return _norm(name) in self._parsers

    def list(self) -> Dict[str, Dict[str, Any]]:
        return {
            k: {"name": v.name, "raises": v.raises, "description": v.description}
            for k, v in sorted(self._parsers.items())
        }

    def parse(self, name: str, payload: Dict[str, Any]) -> Parsed:
        return self.resolve(name).factory(payload)


def _norm(name: str) -> str:
    return name.strip().lower().replace(" ", "_").replace("-", "_")


def build_default_registry() -> ParserRegistry:
    registry = ParserRegistry()
    registry.register(
        name="action",
        factory=ActionData.create_from_json,
        description="Menu/primary action and EventType.Data payloads (embedAnswerData)",
    )
    registry.register(
        name="context_action",
        factory=ContextActionData.create_from_json,
        description="Context menu payloads (contextMenuPoints)",
    )
    registry.register(
        name="viz_point_click",
        factory=VizPointClick.create_from_json,
        description="vizPointClick / vizPointDoubleClick / vizPointRightClick events",
    )
    registry.register(
        name="liveboard",
        factory=LiveboardData.create_from_json,
        description="Liveboard data API responses, one table per visualization",
    )
    registry.register(
        name="search",
        factory=SearchData.create_from_json,
        raises=True,
        description="Search data API responses",
    )
    registry.register(
        name="answer",
        factory=AnswerData.create_from_json,
        raises=True,
        description="Fetch answer data responses (answerService.fetchData)",
    )
    return registry


_DEFAULT = build_default_registry()


def default_registry() -> ParserRegistry:
    return _DEFAULT


def parse_payload(kind: str, payload: Dict[str, Any], *, registry: Optional[ParserRegistry] = None) -> Parsed:
    """Normalize `payload` with the parser registered for `kind`."""
    return (registry or _DEFAULT).parse(kind, payload)
