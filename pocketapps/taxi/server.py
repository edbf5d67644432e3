"""Command that starts the ride API server."""

import argparse
import logging

from flask import Flask

from .endpoints import create_app
from .service import RideService
from .storage import RideMemory

logger = logging.getLogger(__name__)


def build_app() -> Flask:
    """Wire an in-memory store, the ride service and the HTTP routes together."""
    return create_app(RideService(RideMemory()))


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Run the ride API server.")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=8080, help="port to listen on")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    app = build_app()
    logger.info("Server running at http://localhost:%d", args.port)
    app.run(host=args.host, port=args.port)


if __name__ == "__main__":
    main()