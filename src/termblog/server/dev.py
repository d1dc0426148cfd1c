"""Development server with reload.

Starts a pounce ASGI server with the live termblog App object, single
worker, reloading when watched files change.
"""


def run_dev_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = True,
    reload_include: tuple[str, ...] = (),
    reload_dirs: tuple[str, ...] = (),
) -> None:
    """Start a pounce dev server with the given App.

    Pounce's ``run()`` takes an import string, but we hold a live
    ``App``; ``pounce.Server`` accepts the ASGI callable directly.

    Args:
        app: ASGI callable (termblog App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Restart on file changes.
        reload_include: Extra file extensions to watch (e.g. ``(".html", ".css")``).
        reload_dirs: Extra directories to watch alongside cwd, typically
            the public directory.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
        reload_include=reload_include,
        reload_dirs=reload_dirs,
    )
    Server(config, app).run()
