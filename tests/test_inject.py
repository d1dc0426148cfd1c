"""Tests for the HTML injection middleware."""

from termblog.app import App
from termblog.http.response import Response
from termblog.middleware.inject import HTMLInject
from termblog.testing import TestClient

SNIPPET = '<script src="/script.js" defer></script>'


def make_app(body: str, content_type: str = "text/html; charset=utf-8", **kwargs) -> App:
    app = App()
    app.add_middleware(HTMLInject(SNIPPET, **kwargs))

    @app.route("/page")
    def page():
        return Response(body=body, content_type=content_type)

    return app


class TestHTMLInject:
    async def test_injects_before_body_close(self) -> None:
        app = make_app("<html><body><p>hi</p></body></html>")
        async with TestClient(app) as client:
            response = await client.get("/page")
            assert response.text == f"<html><body><p>hi</p>{SNIPPET}</body></html>"

    async def test_appends_when_target_missing(self) -> None:
        app = make_app("<p>fragment</p>")
        async with TestClient(app) as client:
            response = await client.get("/page")
            assert response.text == f"<p>fragment</p>{SNIPPET}"

    async def test_full_page_only_skips_fragments(self) -> None:
        app = make_app("<p>fragment</p>", full_page_only=True)
        async with TestClient(app) as client:
            response = await client.get("/page")
            assert response.text == "<p>fragment</p>"

    async def test_skips_non_html(self) -> None:
        app = make_app("body { }", content_type="text/css; charset=utf-8")
        async with TestClient(app) as client:
            response = await client.get("/page")
            assert response.text == "body { }"

    async def test_does_not_inject_twice(self) -> None:
        page = f"<html><body>{SNIPPET}</body></html>"
        app = make_app(page)
        async with TestClient(app) as client:
            response = await client.get("/page")
            assert response.text == page

    async def test_custom_target(self) -> None:
        app = make_app("<head></head><body></body>", before="</head>")
        async with TestClient(app) as client:
            response = await client.get("/page")
            assert response.text == f"<head>{SNIPPET}</head><body></body>"
