"""Shared fixtures: a small public directory shaped like the blog template."""

import pytest

INDEX_HTML = (
    "<!doctype html><html><head><title>Blog</title></head>"
    '<body><h1 class="hero-title">Blog</h1></body></html>'
)


@pytest.fixture
def public_dir(tmp_path):
    """Create a temporary public directory for the server."""
    public = tmp_path / "public"
    public.mkdir()

    (public / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (public / "style.css").write_text(":root { --accent: #7aa2f7; }")
    (public / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR")
    (public / "data.bin").write_bytes(b"\x00\x01\x02\x03")
    (public / "404.html").write_text("<html><body><h1>404</h1></body></html>")

    archive = public / "archive"
    archive.mkdir()
    (archive / "index.html").write_text("<html><body><h1>Archive</h1></body></html>")

    return public
