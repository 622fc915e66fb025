"""Errors reported by the API."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ErrorDetail:
    """A single error entry of an API error response."""

    message: str = ""
    code: int = 0


class APIError(Exception):
    """An error response returned by the API, holding one or more details."""

    def __init__(self, errors: Iterable[ErrorDetail] | None = None) -> None:
        self.errors: list[ErrorDetail] = list(errors or ())
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.errors:
            first = self.errors[0]
            return f"twitter: {first.code} {first.message}"
        return ""

    def __repr__(self) -> str:
        return f"APIError(errors={self.errors!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, APIError):
            return NotImplemented
        return self.errors == other.errors

    def __hash__(self) -> int:
        return hash(tuple(self.errors))

    def is_empty(self) -> bool:
        """Return True when no error detail is present."""
        return not self.errors

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> APIError:
        """Build an error from a decoded error response body."""
        entries = (data or {}).get("errors") or []
        details = [
            ErrorDetail(message=entry.get("message", ""), code=entry.get("code", 0))
            for entry in entries
            if isinstance(entry, Mapping)
        ]
        return cls(details)


def relevant_error(
    http_error: BaseException | None, api_error: APIError
) -> BaseException | None:
    """Pick the error that matters: a transport error first, then a non-empty API error."""
    if http_error is not None:
        return http_error
    if api_error.is_empty():
        return None
    return api_error