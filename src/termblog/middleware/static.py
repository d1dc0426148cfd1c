"""Static file serving middleware.

Serves files from a directory for matching URL prefixes.  Supports
root-level serving (``prefix="/"``) with index file resolution for
sub-directories and an optional custom 404 page.

Falls through to the next handler for non-matching paths.
"""

import logging
import mimetypes
from pathlib import Path

from termblog.errors import HTTPError
from termblog.http.request import Request
from termblog.http.response import Response
from termblog.middleware.protocol import Next

logger = logging.getLogger("termblog.static")


class StaticFiles:
    """Middleware that serves static files from a directory.

    Files are served byte-for-byte for paths matching the configured
    prefix.  Non-matching paths fall through to the next handler.

    Security: resolves symlinks and verifies the final path is within
    the configured directory to prevent path traversal.

    When *root_index* is ``False`` a request for the prefix itself
    (``/`` for root-level serving) falls through instead of serving the
    index, so the app can answer it with a redirect.

    Usage::

        app.add_middleware(StaticFiles(
            directory="./public",
            prefix="/",
            not_found_page="404.html",
            cache_control="no-cache",
        ))
    """

    __slots__ = (
        "_cache_control",
        "_directory",
        "_index",
        "_not_found_page",
        "_prefix",
        "_root_index",
    )

    def __init__(
        self,
        directory: str | Path,
        prefix: str = "/",
        *,
        index: str = "index.html",
        not_found_page: str | None = None,
        cache_control: str = "no-cache",
        root_index: bool = True,
    ) -> None:
        self._directory = Path(directory).resolve()
        self._index = index
        self._not_found_page = not_found_page
        self._cache_control = cache_control
        self._root_index = root_index

        # Normalize prefix: leading slash, no trailing slash.
        # Root prefix "/" normalizes to "".
        stripped = "/" + prefix.strip("/")
        self._prefix = stripped if stripped != "/" else ""

    async def __call__(self, request: Request, next: Next) -> Response:
        """Serve a static file or fall through."""
        if request.method not in ("GET", "HEAD"):
            return await next(request)

        path = request.path
        relative = self._relative(path)
        if relative is None:
            return await next(request)
        if not relative and not self._root_index:
            return await next(request)

        file_path = (self._directory / relative).resolve() if relative else self._directory
        if not file_path.is_relative_to(self._directory):
            logger.warning("Refused path outside %s: %s", self._directory, path)
            return Response(body="Forbidden", status=403, content_type="text/plain; charset=utf-8")

        if file_path.is_dir():
            # Redirect to the trailing-slash URL when an index exists so
            # relative links inside the index resolve correctly.
            index_path = file_path / self._index
            if not path.endswith("/") and relative and index_path.is_file():
                return Response(body="", status=301).with_header("Location", path + "/")

            if index_path.is_file():
                file_path = index_path
            else:
                return await self._handle_not_found(next, request)

        if not file_path.is_file():
            return await self._handle_not_found(next, request)

        return self._serve_file(file_path)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _relative(self, path: str) -> str | None:
        """File path relative to the directory, or None if *path* is outside the prefix."""
        if self._prefix:
            if not path.startswith(self._prefix + "/") and path != self._prefix:
                return None
            return path[len(self._prefix) :].lstrip("/")
        return path.lstrip("/")

    def _serve_file(self, file_path: Path, *, status: int = 200) -> Response:
        """Read a file and build a response."""
        content_type, _ = mimetypes.guess_type(str(file_path))
        if content_type is None:
            content_type = "application/octet-stream"
        elif content_type.startswith("text/") or content_type in (
            "application/javascript",
            "application/json",
        ):
            content_type = f"{content_type}; charset=utf-8"

        body = file_path.read_bytes()

        return (
            Response(body=body, content_type=content_type, status=status)
            .with_header("Cache-Control", self._cache_control)
        )

    async def _handle_not_found(self, next: Next, request: Request) -> Response:
        """Fall through to the inner handler; serve the custom 404 if it also fails.

        Application routes (like the generated script) take priority over
        the custom page.  When ``not_found_page`` is set, a downstream
        ``NotFound`` is caught and the page is served instead.
        """
        if not self._not_found_page:
            return await next(request)

        error_path = (self._directory / self._not_found_page).resolve()
        if not (error_path.is_relative_to(self._directory) and error_path.is_file()):
            return await next(request)

        try:
            return await next(request)
        except HTTPError as exc:
            if exc.status != 404:
                raise
            return self._serve_file(error_path, status=404)
