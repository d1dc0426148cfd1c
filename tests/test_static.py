"""Tests for static file serving middleware."""

import pytest

from termblog.app import App
from termblog.middleware.static import StaticFiles
from termblog.testing import TestClient


@pytest.fixture
def static_dir(tmp_path):
    """Create temporary static files for testing."""
    static = tmp_path / "static"
    static.mkdir()

    (static / "style.css").write_text("body { color: red; }")
    (static / "app.js").write_text("console.log('hello');")
    (static / "image.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (static / "data.bin").write_bytes(b"\x00\x01\x02\x03")
    (static / "index.html").write_text("<h1>Home</h1>")
    (static / "404.html").write_text("<h1>Not Found</h1>")

    sub = static / "css"
    sub.mkdir()
    (sub / "main.css").write_text("h1 { font-size: 2em; }")

    docs = static / "docs"
    docs.mkdir()
    (docs / "index.html").write_text("<h1>Docs</h1>")

    (static / "empty").mkdir()

    return static


def make_app(static_dir, **kwargs) -> App:
    app = App()
    app.add_middleware(StaticFiles(directory=static_dir, **kwargs))
    return app


class TestStaticFileServing:
    async def test_serves_css_file(self, static_dir) -> None:
        async with TestClient(make_app(static_dir)) as client:
            response = await client.get("/style.css")
            assert response.status == 200
            assert "text/css" in response.content_type
            assert response.text == "body { color: red; }"

    async def test_serves_js_file(self, static_dir) -> None:
        async with TestClient(make_app(static_dir)) as client:
            response = await client.get("/app.js")
            assert response.status == 200
            assert "javascript" in response.content_type
            assert "console.log" in response.text

    async def test_serves_binary_file_verbatim(self, static_dir) -> None:
        async with TestClient(make_app(static_dir)) as client:
            response = await client.get("/image.png")
            assert response.status == 200
            assert response.content_type == "image/png"
            assert response.body == b"\x89PNG\r\n\x1a\n"

    async def test_serves_nested_file(self, static_dir) -> None:
        async with TestClient(make_app(static_dir)) as client:
            response = await client.get("/css/main.css")
            assert response.status == 200
            assert response.text == "h1 { font-size: 2em; }"

    async def test_unknown_extension_gets_octet_stream(self, static_dir) -> None:
        async with TestClient(make_app(static_dir)) as client:
            response = await client.get("/data.bin")
            assert response.status == 200
            assert response.content_type == "application/octet-stream"

    async def test_cache_control_and_length(self, static_dir) -> None:
        async with TestClient(make_app(static_dir, cache_control="public, max-age=60")) as client:
            response = await client.get("/style.css")
            assert response.header("cache-control") == "public, max-age=60"
            assert response.header("content-length") == str(len("body { color: red; }"))

    async def test_head_sends_headers_only(self, static_dir) -> None:
        async with TestClient(make_app(static_dir)) as client:
            response = await client.head("/style.css")
            assert response.status == 200
            assert response.body == b""
            assert response.header("content-length") == str(len("body { color: red; }"))

    async def test_prefix(self, static_dir) -> None:
        async with TestClient(make_app(static_dir, prefix="/static")) as client:
            response = await client.get("/static/css/main.css")
            assert response.status == 200
            response = await client.get("/css/main.css")
            assert response.status == 404


class TestDirectories:
    async def test_root_serves_index(self, static_dir) -> None:
        async with TestClient(make_app(static_dir)) as client:
            response = await client.get("/")
            assert response.status == 200
            assert response.text == "<h1>Home</h1>"

    async def test_root_falls_through_without_root_index(self, static_dir) -> None:
        app = make_app(static_dir, root_index=False)

        @app.route("/")
        def root():
            return "from route"

        async with TestClient(app) as client:
            response = await client.get("/")
            assert response.text == "from route"

    async def test_directory_redirects_to_trailing_slash(self, static_dir) -> None:
        async with TestClient(make_app(static_dir)) as client:
            response = await client.get("/docs")
            assert response.status == 301
            assert response.header("location") == "/docs/"

    async def test_directory_with_slash_serves_index(self, static_dir) -> None:
        async with TestClient(make_app(static_dir)) as client:
            response = await client.get("/docs/")
            assert response.status == 200
            assert response.text == "<h1>Docs</h1>"

    async def test_directory_without_index_is_404(self, static_dir) -> None:
        async with TestClient(make_app(static_dir)) as client:
            response = await client.get("/empty/")
            assert response.status == 404


class TestStaticFileFallthrough:
    async def test_nonexistent_file_falls_through(self, static_dir) -> None:
        app = make_app(static_dir)

        @app.route("/feed.xml")
        def feed():
            return "<rss/>"

        async with TestClient(app) as client:
            assert (await client.get("/missing.css")).status == 404
            assert (await client.get("/feed.xml")).text == "<rss/>"

    async def test_post_request_falls_through(self, static_dir) -> None:
        app = make_app(static_dir)

        @app.route("/style.css", methods=["POST"])
        def upload():
            return ("uploaded", 201)

        async with TestClient(app) as client:
            response = await client.post("/style.css")
            assert response.status == 201


class TestStaticFilePathTraversal:
    async def test_dotdot_is_forbidden(self, static_dir) -> None:
        (static_dir.parent / "secret.txt").write_text("secret")

        async with TestClient(make_app(static_dir)) as client:
            response = await client.get("/../secret.txt")
            assert response.status == 403
            assert "secret" not in response.text

    async def test_symlink_outside_is_forbidden(self, static_dir) -> None:
        outside = static_dir.parent / "outside.txt"
        outside.write_text("outside")
        (static_dir / "link.txt").symlink_to(outside)

        async with TestClient(make_app(static_dir)) as client:
            response = await client.get("/link.txt")
            assert response.status == 403


class TestCustomNotFound:
    async def test_custom_404_page(self, static_dir) -> None:
        async with TestClient(make_app(static_dir, not_found_page="404.html")) as client:
            response = await client.get("/nope.html")
            assert response.status == 404
            assert response.text == "<h1>Not Found</h1>"

    async def test_routes_win_over_custom_404(self, static_dir) -> None:
        app = make_app(static_dir, not_found_page="404.html")

        @app.route("/generated")
        def generated():
            return "generated"

        async with TestClient(app) as client:
            response = await client.get("/generated")
            assert response.status == 200
            assert response.text == "generated"

    async def test_missing_custom_page_falls_back(self, static_dir) -> None:
        async with TestClient(make_app(static_dir, not_found_page="missing.html")) as client:
            response = await client.get("/nope.html")
            assert response.status == 404
            assert response.text == "Not Found"

