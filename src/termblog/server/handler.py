"""ASGI handler — translates ASGI scope/messages to termblog types.

Converts the scope to a Request, runs it through the middleware chain
around route dispatch, maps errors to responses, and sends the result
back through ASGI send().
"""

import inspect
from collections.abc import Callable
from typing import Any

from termblog._internal.asgi import Receive, Scope, Send
from termblog._internal.invoke import invoke
from termblog.errors import HTTPError
from termblog.http.request import Request
from termblog.http.response import Response
from termblog.middleware.protocol import Next
from termblog.routes import RouteTable
from termblog.server.errors import handle_http_error, handle_internal_error
from termblog.server.negotiation import to_response
from termblog.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    routes: RouteTable,
    middleware: tuple[Callable[..., Any], ...],
    error_handlers: dict[int | type, Callable[..., Any]],
    debug: bool,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:

        async def dispatch(req: Request) -> Response:
            route = routes.match(req.method, req.path)
            kwargs = _request_kwargs(route.handler, req)
            return to_response(await invoke(route.handler, **kwargs))

        # Wrap middleware around the dispatch; first registered is outermost
        handler: Next = dispatch
        for mw in reversed(middleware):

            async def make_next(req: Request, _mw: Any = mw, _next: Next = handler) -> Response:
                return await _mw(req, _next)

            handler = make_next

        response = await handler(request)

    except HTTPError as exc:
        response = await handle_http_error(exc, request, error_handlers, debug)
    except Exception as exc:
        response = await handle_internal_error(exc, request, error_handlers, debug)

    await send_response(response, send, head=request.method == "HEAD")


def _request_kwargs(handler: Callable[..., Any], request: Request) -> dict[str, Any]:
    """Pass the request to a parameter named ``request`` or annotated ``Request``."""
    sig = inspect.signature(handler, eval_str=True)
    return {
        name: request
        for name, param in sig.parameters.items()
        if name == "request" or param.annotation is Request
    }
