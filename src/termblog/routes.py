"""Exact-path route table.

The server answers a couple of fixed paths itself (the root redirect
and the generated script); everything else is a file.  No patterns, no
parameters: a path either matches exactly or it does not.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from termblog.errors import MethodNotAllowed, NotFound


@dataclass(frozen=True, slots=True)
class Route:
    path: str
    handler: Callable[..., Any]
    methods: frozenset[str]


class RouteTable:
    """Routes keyed by exact path.

    Usage::

        table = RouteTable()
        table.add(Route("/", handler, frozenset({"GET"})))
        route = table.match("GET", "/")
    """

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        self._routes: dict[str, Route] = {}

    def add(self, route: Route) -> None:
        if route.path in self._routes:
            msg = f"Route already registered for {route.path!r}"
            raise ValueError(msg)
        self._routes[route.path] = route

    def match(self, method: str, path: str) -> Route:
        """Return the route for *path*.

        HEAD is accepted wherever GET is.

        Raises:
            NotFound: No route has this path.
            MethodNotAllowed: The route exists but not for *method*.
        """
        route = self._routes.get(path)
        if route is None:
            raise NotFound
        allowed = route.methods | ({"HEAD"} if "GET" in route.methods else set())
        if method not in allowed:
            raise MethodNotAllowed(frozenset(allowed))
        return route

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, path: object) -> bool:
        return path in self._routes
