"""HTML injection middleware.

Injects a snippet (the page-behavior ``<script>`` tag, typically) into
every ``text/html`` response before a target string (default:
``</body>``).  Lets a template pick up the generated script without
editing every page by hand.
"""

from dataclasses import replace

from termblog.http.request import Request
from termblog.http.response import Response
from termblog.middleware.protocol import Next


class HTMLInject:
    """Middleware that injects HTML content into text/html responses.

    When *full_page_only* is ``True``, the snippet is injected only when
    the *before* target is found in the body.  Otherwise it is appended
    at the end if the target is absent.

    Pages that already contain the snippet are left alone.

    Usage::

        app.add_middleware(HTMLInject(
            '<script src="/script.js" defer></script>',
            before="</body>",
        ))
    """

    __slots__ = ("_full_page_only", "_snippet", "_target")

    def __init__(
        self,
        snippet: str,
        *,
        before: str = "</body>",
        full_page_only: bool = False,
    ) -> None:
        self._snippet = snippet
        self._target = before
        self._full_page_only = full_page_only

    async def __call__(self, request: Request, next: Next) -> Response:
        """Inject the snippet into HTML responses."""
        response = await next(request)

        if "text/html" not in response.content_type:
            return response

        body = response.body
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")

        if self._snippet in body:
            return response
        if self._target in body:
            body = body.replace(self._target, self._snippet + self._target, 1)
        elif self._full_page_only:
            return response
        else:
            body = body + self._snippet

        return replace(response, body=body)
