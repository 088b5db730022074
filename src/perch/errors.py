"""Perch exception hierarchy.

Shared across tag helpers, configuration and response helpers so every
module raises and catches the same types.
"""

from dataclasses import dataclass
from http import HTTPStatus


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when a tag helper configuration is invalid.

    Typically raised while constructing a ``FallbackConfig``.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(PerchError):
    """An error that maps directly to an HTTP status code."""

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class Conflict(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """409 — the request conflicts with the current state of the resource."""

    def __init__(self, detail: str = "Conflict") -> None:
        super().__init__(status=HTTPStatus.CONFLICT, detail=detail)
