"""Serve the certification registry HTTP API.

Usage:
    python -m plantcert [--host HOST] [--port PORT] [--reload]
    plantcert-api --port 8080

Registry settings come from the PLANTCERT_* environment variables read by
RegistryConfig.
"""

from __future__ import annotations

import argparse
import sys

import uvicorn

APP_PATH = "plantcert.api.main:app"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="plantcert-api",
        description="Plant equipment certification registry API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Interface to bind (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to listen on (default: 8000)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart on source changes (development only)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    # Logging is configured when the app module is imported
    uvicorn.run(APP_PATH, host=args.host, port=args.port, reload=args.reload, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
