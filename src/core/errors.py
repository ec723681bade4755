"""Exceptions raised by the quote game core.

Each error carries a ``code`` and an HTTP ``status_code`` hint so a web layer
can translate it into a response without inspecting messages.
"""

from typing import Literal

ErrorCode = Literal[
    "CORPUS_LOAD_ERROR",
    "NOT_FOUND",
]

ERROR_STATUS_MAP: dict[ErrorCode, int] = {
    "CORPUS_LOAD_ERROR": 500,
    "NOT_FOUND": 404,
}


class QuoteGameError(Exception):
    """Base class for quote game errors."""

    code: ErrorCode

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return ERROR_STATUS_MAP[self.code]


class CorpusLoadError(QuoteGameError):
    """The quote corpus could not be read or is malformed. Fatal at startup."""

    code: ErrorCode = "CORPUS_LOAD_ERROR"


class QuoteNotFoundError(QuoteGameError):
    """No quote exists with the requested id."""

    code: ErrorCode = "NOT_FOUND"

    def __init__(self, quote_id: int):
        super().__init__("Quote not found")
        self.quote_id = quote_id
