"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Built-in middleware:
    HTMLInject -- Inject snippets into HTML responses
    StaticFiles -- Serve static files from a directory
"""

from termblog.middleware.inject import HTMLInject
from termblog.middleware.protocol import Middleware, Next
from termblog.middleware.static import StaticFiles

__all__ = [
    "HTMLInject",
    "Middleware",
    "Next",
    "StaticFiles",
]
