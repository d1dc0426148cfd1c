"""The blog server: static files, the root redirect, and the page script.

``create_app`` wires a ``SiteConfig`` into an ``App``::

    from termblog import SiteConfig, create_app

    app = create_app(SiteConfig(public_dir="public"))
    app.run()

Middleware stack (first added = outermost):

1. ``HTMLInject`` — only with ``inject_script=True``; adds the script tag
   to full HTML pages.
2. ``StaticFiles`` — serves ``public_dir`` verbatim.  A file named like
   ``script_path`` shadows the generated bundle.

Routes behind the stack answer ``/`` (redirect to the index document)
and ``script_path`` (the generated bundle).
"""

import logging

from termblog.app import App
from termblog.config import SiteConfig
from termblog.errors import ConfigurationError
from termblog.http.response import Redirect, Response
from termblog.middleware.inject import HTMLInject
from termblog.middleware.static import StaticFiles
from termblog.script.bundle import build_bundle, script_tag

logger = logging.getLogger("termblog.server")

JAVASCRIPT = "application/javascript; charset=utf-8"


def startup_lines(config: SiteConfig) -> tuple[str, str]:
    """The two lines printed when the server starts."""
    return (
        f"🚀 Server running at http://localhost:{config.port}",
        f"📁 Serving static files from: {config.public_path}",
    )


def create_app(config: SiteConfig | None = None) -> App:
    """Build the blog server app.

    Raises:
        ConfigurationError: If ``public_dir`` is not an existing directory.
    """
    config = config or SiteConfig()
    public = config.public_path
    if not public.is_dir():
        msg = f"Public directory does not exist: {public}"
        raise ConfigurationError(msg)

    app = App(config)
    bundle = build_bundle(config.script)

    @app.route("/")
    def root() -> Redirect:
        return Redirect(config.index_url)

    @app.route(config.script_path)
    def page_script() -> Response:
        return Response(body=bundle, content_type=JAVASCRIPT).with_header(
            "Cache-Control", config.cache_control
        )

    @app.on_startup
    def announce() -> None:
        for line in startup_lines(config):
            print(line)
        logger.debug("Page script served at %s (%d bytes)", config.script_path, len(bundle))

    if config.inject_script:
        app.add_middleware(HTMLInject(script_tag(config.script_path), full_page_only=True))

    app.add_middleware(
        StaticFiles(
            directory=public,
            prefix="/",
            index=config.index,
            not_found_page=config.not_found_page,
            cache_control=config.cache_control,
            root_index=False,
        )
    )
    return app
