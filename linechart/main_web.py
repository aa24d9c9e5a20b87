import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from linechart.exceptions import ConfigurationError
from linechart.logger import ConsoleLogger
from linechart.settings import Settings
from linechart.web_server import LineChartWebServer

logger = ConsoleLogger(name="main_web", level=logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linechart-web", description="Microservice for LineChart-Plotting."
    )
    parser.add_argument("--version", action="version", version="%(prog)s 1.0.0")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to settings.ini (default: ./settings.ini if present)",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host address to bind to (default: from settings or 127.0.0.1)",
    )
    parser.add_argument(
        "--port", type=int, default=None, help="Port number to listen on (default: from settings)"
    )
    parser.add_argument(
        "--image-dir",
        type=str,
        default=None,
        help="Absolute, existing directory for rendered charts (default: from settings)",
    )
    parser.add_argument(
        "--public-url",
        type=str,
        default=None,
        help="Base URL used in returned links (default: http://<host>:<port>)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Logging level for all components (default: INFO)",
    )
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    """
    Settings from INI file and environment, overridden by CLI flags

    Raises:
        ConfigurationError: If the result cannot serve requests
    """
    settings = Settings.load(args.config)
    if args.host:
        settings.server.host = args.host
    if args.port:
        settings.server.port = args.port
    if args.image_dir is not None:
        settings.storage.image_dir = args.image_dir
    if args.public_url:
        settings.server.public_url = args.public_url
    settings.validate()
    return settings


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    log_level = getattr(logging, args.log_level.upper(), logging.INFO)

    try:
        settings = resolve_settings(args)
    except ConfigurationError as e:
        logger.error("FATAL: Configuration error", error=e.message, exit_code=e.code)
        parser.print_help(sys.stderr)
        sys.exit(e.code if e.code is not None else 1)

    server = LineChartWebServer(settings, log_level=log_level)

    logger.info(
        "Starting web server",
        host=settings.server.host,
        port=settings.server.port,
        image_dir=settings.storage.image_dir,
        format=settings.render.image_format,
    )
    try:
        uvicorn.run(server.app, host=settings.server.host, port=settings.server.port)
        logger.info("Web server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Web server stopped by user")
    except Exception as e:
        logger.error("Failed to start web server", error=str(e), error_type=type(e).__name__)
        sys.exit(-99)


if __name__ == "__main__":
    main()
