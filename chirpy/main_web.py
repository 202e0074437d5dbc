"""Chirpy Web Server entry point."""

import argparse
import sys

import uvicorn

from chirpy.config import load_config
from chirpy.exceptions import ConfigurationError
from chirpy.logger import Logger, configure_session_logger, session_logger
from chirpy.web_server import ChirpyWebServer

logger: Logger = session_logger


def build_parser(defaults) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Chirpy Web Server")
    parser.add_argument(
        "--host",
        type=str,
        default=defaults.host,
        help=f"Host address to bind to (default: {defaults.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=defaults.port,
        help="Port number to listen on (from CHIRPY_PORT env var)",
    )
    parser.add_argument(
        "--filepath-root",
        type=str,
        default=defaults.filepath_root,
        help="Directory served under /app (from CHIRPY_FILEPATH_ROOT env var)",
    )
    parser.add_argument(
        "--env-file",
        type=str,
        default=None,
        help="Path to a .env file to load before reading the environment",
    )
    return parser


def main(argv=None) -> int:
    # --env-file has to be known before the config defaults are built
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument("--env-file", type=str, default=None)
    pre_args, _ = pre_parser.parse_known_args(argv)

    try:
        config = load_config(pre_args.env_file)
    except ConfigurationError as e:
        logger.error("FATAL: Configuration invalid", error=str(e), code=e.code)
        return 1

    configure_session_logger(level=config.log_level, json_format=config.json_logs)
    args = build_parser(config).parse_args(argv)

    server = ChirpyWebServer(
        filepath_root=args.filepath_root,
        host=args.host,
        port=args.port,
    )

    logger.info("=" * 70)
    logger.info("STARTING CHIRPY WEB SERVER")
    logger.info("=" * 70)
    logger.info(
        "Configuration",
        host=args.host,
        port=args.port,
        filepath_root=args.filepath_root,
        db_url=config.db_url,
        db_configured=config.db_configured,
    )
    logger.info(f"Serving files from {args.filepath_root} on port: {args.port}")
    logger.info(f"Health check: http://{args.host}:{args.port}/api/healthz")
    logger.info("=" * 70)

    try:
        uvicorn.run(server.get_app(), host=args.host, port=args.port, log_level="info")
    except KeyboardInterrupt:
        logger.info("Web server stopped by user")
        return 0
    except Exception as e:
        logger.error("Failed to start web server", error=str(e), error_type=type(e).__name__)
        return 1

    logger.info("Web server shutdown complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
