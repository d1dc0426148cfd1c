"""termblog CLI — serve a blog directory, or write out the page script.

Entry point registered as ``termblog`` in ``pyproject.toml``::

    [project.scripts]
    termblog = "termblog.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``termblog`` command."""
    parser = argparse.ArgumentParser(
        prog="termblog",
        description="termblog — static server and page script for a terminal-styled blog.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for termblog loggers (default: info, or TERMBLOG_LOG_LEVEL)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- termblog serve ---------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Serve a directory of blog pages")
    serve_parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Directory to serve (default: ./public, or TERMBLOG_PUBLIC_DIR)",
    )
    serve_parser.add_argument("--host", default=None, help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    serve_parser.add_argument(
        "--debug",
        action="store_true",
        help="Development mode: reload when pages change",
    )
    serve_parser.add_argument(
        "--inject-script",
        action="store_true",
        help="Add the page script tag to every HTML page",
    )
    serve_parser.add_argument(
        "--not-found",
        default=None,
        metavar="PAGE",
        help="File in the directory to serve for unknown paths (e.g. 404.html)",
    )

    # -- termblog build-script --------------------------------------------
    build_parser = subparsers.add_parser("build-script", help="Write the page script to disk")
    build_parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Target file (default: <public dir>/script.js)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from termblog.cli._serve import serve

        serve(args)
    elif args.command == "build-script":
        from termblog.cli._build import build_script

        build_script(args)
