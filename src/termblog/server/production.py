"""Plain serving mode.

Starts pounce without reload.  A static blog needs nothing more than a
bind address and a log level.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from termblog.app import App


def run_production_server(
    app: App,
    host: str = "127.0.0.1",
    port: int = 4001,
    workers: int = 1,
    *,
    log_level: str = "info",
    log_format: str = "text",
    keep_alive_timeout: float = 5.0,
    request_timeout: float = 30.0,
) -> None:
    """Run the app under pounce.

    Args:
        app: termblog App instance.
        host: Bind address.
        port: Bind port.
        workers: Worker count (0 = auto-detect from CPU count).
        log_level: Log level (debug, info, warning, error, critical).
        log_format: Access log format ("json" or "text").
        keep_alive_timeout: Keep-alive connection timeout (seconds).
        request_timeout: Individual request timeout (seconds).
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        log_level=log_level,
        log_format=log_format,
        keep_alive_timeout=keep_alive_timeout,
        request_timeout=request_timeout,
    )
    Server(config, app).run()
