"""Immutable HTTP request.

A static site only ever looks at the method and the path (plus the raw
query string, for handlers that want it), so that is all the request
carries.
"""

from __future__ import annotations

from dataclasses import dataclass

from termblog._internal.asgi import Scope


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request, built once per ASGI ``http`` scope."""

    method: str
    path: str
    query_string: bytes = b""

    @classmethod
    def from_asgi(cls, scope: Scope) -> Request:
        """Create a Request from an ASGI scope."""
        return cls(
            method=scope["method"],
            path=scope["path"],
            query_string=scope.get("query_string", b""),
        )
