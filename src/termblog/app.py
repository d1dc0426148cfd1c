"""termblog application class.

Mutable during setup (routes, middleware, error handlers, hooks).
Frozen at runtime when app.run() or __call__() is first invoked.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from termblog._internal.asgi import Receive, Scope, Send
from termblog._internal.invoke import invoke
from termblog._internal.types import ErrorHandler, Handler
from termblog.config import SiteConfig
from termblog.middleware.protocol import Middleware
from termblog.routes import Route, RouteTable
from termblog.server.handler import handle_request


@dataclass(slots=True)
class _PendingRoute:
    """A route waiting to be compiled."""

    path: str
    handler: Handler
    methods: list[str] | None


class App:
    """The termblog application.

    Mutable during setup, frozen on first use.

    Thread safety:
        Setup is single-threaded (decorators at import time).  The
        freeze transition uses a Lock + double-check so exactly one
        thread compiles the app even if several workers receive their
        first request at once.
    """

    __slots__ = (
        "_error_handlers",
        "_freeze_lock",
        "_frozen",
        "_middleware",
        "_middleware_list",
        "_pending_routes",
        "_routes",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
    )

    def __init__(self, config: SiteConfig | None = None) -> None:
        self.config: SiteConfig = config or SiteConfig()
        self._pending_routes: list[_PendingRoute] = []
        self._middleware_list: list[Middleware] = []
        self._error_handlers: dict[int | type, ErrorHandler] = {}
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state, set during _freeze()
        self._routes: RouteTable | None = None
        self._middleware: tuple[Callable[..., Any], ...] = ()

    # -- Registration --

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a handler for an exact path via decorator.

        Args:
            path: URL path, matched exactly.
            methods: HTTP methods. Defaults to ``["GET"]``; HEAD is
                implied wherever GET is allowed.
        """

        def decorator(func: Handler) -> Handler:
            self._check_not_frozen()
            self._pending_routes.append(_PendingRoute(path, func, methods))
            return func

        return decorator

    def error(self, code_or_exception: int | type) -> Callable[[ErrorHandler], ErrorHandler]:
        """Register an error handler by status code or exception type.

        Usage::

            @app.error(404)
            def not_found(request):
                return ("Nothing here", 404)
        """

        def decorator(func: ErrorHandler) -> ErrorHandler:
            self._check_not_frozen()
            self._error_handlers[code_or_exception] = func
            return func

        return decorator

    def add_middleware(self, middleware: Middleware) -> None:
        """Add a middleware. The first one added is the outermost."""
        self._check_not_frozen()
        self._middleware_list.append(middleware)

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync startup hook via decorator.

        Hooks run in registration order during ASGI lifespan startup,
        before the server accepts requests.
        """
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync shutdown hook via decorator."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start the server (dev or plain based on ``config.debug``).

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        self._ensure_frozen()

        _host = host or self.config.host
        _port = port or self.config.port

        if self.config.debug:
            from termblog.server.dev import run_dev_server

            run_dev_server(
                self,
                _host,
                _port,
                reload=True,
                reload_include=self.config.reload_include,
                reload_dirs=(str(self.config.public_path),),
            )
        else:
            from termblog.server.production import run_production_server

            run_production_server(
                self,
                host=_host,
                port=_port,
                log_level=self.config.log_level,
            )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        self._ensure_frozen()

        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        assert self._routes is not None
        await handle_request(
            scope,
            receive,
            send,
            routes=self._routes,
            middleware=self._middleware,
            error_handlers=self._error_handlers,
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Handle ASGI lifespan startup and shutdown."""
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await self.startup()
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await self.shutdown()
                await send({"type": "lifespan.shutdown.complete"})
                return

    async def startup(self) -> None:
        """Run startup hooks in registration order."""
        self._ensure_frozen()
        for hook in self._startup_hooks:
            await invoke(hook)

    async def shutdown(self) -> None:
        """Run shutdown hooks in registration order."""
        for hook in self._shutdown_hooks:
            await invoke(hook)

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        routes = RouteTable()
        for pending in self._pending_routes:
            methods = frozenset(m.upper() for m in (pending.methods or ["GET"]))
            routes.add(Route(path=pending.path, handler=pending.handler, methods=methods))
        self._routes = routes
        self._middleware = tuple(self._middleware_list)
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes, middleware, and hooks before calling app.run()."
            )
            raise RuntimeError(msg)
