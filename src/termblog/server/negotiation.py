"""Return-value negotiation — what a route handler returns becomes a Response.

1. ``Response``         -> as-is
2. ``Redirect``         -> status + ``Location`` header
3. ``str``              -> 200, text/html
4. ``bytes``            -> 200, application/octet-stream
5. ``(value, status)``  -> the value's response with that status
"""

from typing import Any

from termblog.http.response import Redirect, Response


def to_response(value: Any) -> Response:
    """Convert a handler return value to a Response."""
    match value:
        case Response():
            return value
        case Redirect():
            return value.to_response()
        case str():
            return Response(body=value)
        case bytes():
            return Response(body=value, content_type="application/octet-stream")
        case (inner, int() as status):
            return to_response(inner).with_status(status)
        case _:
            msg = (
                f"Route handler returned {type(value).__name__}; "
                "expected Response, Redirect, str, bytes, or (value, status)."
            )
            raise TypeError(msg)
