"""File explorer entry point.

Examples::

  fileexplorer --home /srv/files                  Serve /srv/files at http://localhost:5120/test/
  fileexplorer --config appsettings.json          Read HomeDirectory and friends from a JSON file
  fileexplorer --home . --host 0.0.0.0 -p 8080    Listen on all interfaces
  fileexplorer --home . --dev                     Auto-reload on source changes
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from fileexplorer import __version__
from fileexplorer.config import Settings
from fileexplorer.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fileexplorer",
        description="Browse, search, upload and download files under a home directory over HTTP",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples::", 1)[1],
    )
    parser.add_argument(
        "--home",
        type=str,
        default=None,
        help="Directory to serve (overrides HomeDirectory from config/env)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="JSON settings file (default: $FILEEXPLORER_CONFIG or ./appsettings.json)",
    )
    parser.add_argument("--host", type=str, default=None, help="Host to bind (default: 127.0.0.1)")
    parser.add_argument("--port", "-p", type=int, default=None, help="Port (default: 5120)")
    parser.add_argument(
        "--prefix",
        type=str,
        default=None,
        help="URL prefix for all routes (default: /test)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: INFO)",
    )
    parser.add_argument("--dev", action="store_true", help="Development mode with auto-reload")
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.load(
            args.config,
            home_directory=args.home,
            host=args.host,
            port=args.port,
            route_prefix=args.prefix,
            log_level=args.log_level,
        )
    except (ValidationError, ValueError, OSError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        raise SystemExit(2) from e

    setup_logging(level=settings.log_level)

    from fileexplorer.api.serve import run_server

    try:
        run_server(settings, dev=args.dev, config_path=args.config)
    except KeyboardInterrupt:
        logger.info("File explorer stopped.")


if __name__ == "__main__":
    main()
