"""termblog exception hierarchy.

Shared across the app, the request handler, and middleware so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class TermblogError(Exception):
    """Base for all termblog-specific errors."""


class ConfigurationError(TermblogError):
    """Raised when site configuration is invalid.

    Typically surfaces at startup: a missing public directory, an
    unparsable ``TERMBLOG_PORT``, and so on.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(TermblogError):
    """An error that maps directly to an HTTP status code.

    Raised by dispatch or middleware. The ASGI handler catches these
    and dispatches to the matching ``@app.error()`` handler.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — nothing is served at the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405 — the path is served, but not for this HTTP method.

    Includes an ``Allow`` header listing the valid methods.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )
