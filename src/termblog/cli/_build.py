"""``termblog build-script`` — write the generated page script to a file."""

import argparse
import sys
from pathlib import Path

from termblog.cli._logging import configure_logging
from termblog.config import SiteConfig
from termblog.errors import ConfigurationError
from termblog.script.bundle import write_bundle


def build_script(args: argparse.Namespace) -> None:
    """Write the bundle and print the path written."""
    try:
        config = SiteConfig.from_env(log_level=args.log_level)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    configure_logging(config.log_level)

    if args.output:
        target = Path(args.output)
    else:
        target = config.public_path / config.script_path.lstrip("/")

    try:
        written = write_bundle(target, config.script)
    except OSError as exc:
        print(f"Error: cannot write {target}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(written)
