"""``termblog serve`` — build the site app and run it.

Configuration comes from ``TERMBLOG_*`` environment variables first,
then command-line flags.
"""

import argparse
import logging
import sys

from termblog.cli._logging import configure_logging
from termblog.config import SiteConfig
from termblog.errors import ConfigurationError

logger = logging.getLogger("termblog.cli")


def serve(args: argparse.Namespace) -> None:
    """Start the blog server.

    Exits with status 1 and an ``Error:`` line on stderr when the
    configuration is invalid (bad environment values, missing directory).
    """
    from termblog.site import create_app

    try:
        config = SiteConfig.from_env(
            host=args.host,
            port=args.port,
            public_dir=args.directory,
            debug=args.debug or None,
            inject_script=args.inject_script or None,
            not_found_page=args.not_found,
            log_level=args.log_level,
        )
        configure_logging(config.log_level)
        app = create_app(config)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    mode = "dev" if config.debug else "plain"
    logger.debug("Starting %s server on %s:%d", mode, config.host, config.port)
    app.run()
