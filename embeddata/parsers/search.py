# ==============================
# Search / Answer Data
# ==============================
"""
Data returned by the Search Data and Fetch Answer Data v2.0 REST calls, and by
payload.answerService.fetchData(offset, batchSize) in custom actions.

Only contents[0] is read; further entries are ignored. Unlike the event
parsers, these raise PayloadError on malformed input.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar

from embeddata.contracts.errors import PayloadError
from embeddata.contracts.payload_schema import DataContent, DataResponse
from embeddata.logging.logger import LogContext, get_logger, with_context
from embeddata.tabular.base import TabularData
from embeddata.utils.formatters import preview_payload

_logger = get_logger("parsers")

T = TypeVar("T", bound="_ContentsData")


class _ContentsData(TabularData):
    payload_kind = "contents"

    @classmethod
    def create_from_json(cls: Type[T], payload: Dict[str, Any]) -> T:
        tabular = cls(payload)
        try:
            response = DataResponse.model_validate(payload)
            if not response.contents:
                raise ValueError("response has no contents")
            if len(response.contents) > 1:
                _log(cls).debug("Ignoring %d extra contents entries", len(response.contents) - 1)
            content = DataContent.model_validate(response.contents[0])
            tabular.column_names = content.column_names
            tabular.populate_data_by_row(content.data_rows)
        except Exception as exc:
            _log(cls).error("Error creating %s data: %s", cls.payload_kind, exc)
            _log(cls).error(preview_payload(payload))
            raise PayloadError(f"Invalid {cls.payload_kind} data: {exc}", kind=cls.payload_kind) from exc

        return tabular


def _log(cls: type):
    return with_context(_logger, LogContext(payload_kind=cls.payload_kind))


class SearchData(_ContentsData):
    """Results of the Search Data and Fetch Answer Data v2.0 API calls."""

    payload_kind = "search"


class AnswerData(_ContentsData):
    """Results of answerService.fetchData(); search data plus answer metadata."""

    payload_kind = "answer"

    @property
    def metadata_id(self) -> Optional[str]:
        return self.original_data.get("metadata_id") if isinstance(self.original_data, dict) else None

    @property
    def metadata_name(self) -> Optional[str]:
        return self.original_data.get("metadata_name") if isinstance(self.original_data, dict) else None
