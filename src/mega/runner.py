"""Application runner — load config, set up logging, run the server."""

from __future__ import annotations

import sys
from collections.abc import Mapping

import structlog

from mega.config import ConfigError, load_config
from mega.logging import get_logger, setup_logging
from mega.server import Server

log = structlog.get_logger("runner")


class LoggingSetupError(RuntimeError):
    """The configured log output could not be opened."""


def run(environ: Mapping[str, str] | None = None) -> None:
    """Run the application until the server stops.

    Raises:
        ConfigError: before any logging or server setup, if the environment
            holds invalid values.
        LoggingSetupError: before the server is built, if the log output
            file cannot be opened.
    """
    config = load_config(environ)
    try:
        setup_logging(
            level=config.logging.level,
            log_format=config.logging.format,
            output=config.logging.output,
        )
    except OSError as exc:
        raise LoggingSetupError(str(exc)) from exc
    log.info("application_starting", address=config.server.address)

    server = Server(config, get_logger("server"))
    server.run()

    log.info("application_stopped")


def main() -> None:
    """Entry point — exits with status 1 when startup cannot begin."""
    try:
        run()
    except ConfigError as exc:
        print(f"failed to load config:\n{exc}", file=sys.stderr)
        sys.exit(1)
    except LoggingSetupError as exc:
        print(f"failed to set up logging: {exc}", file=sys.stderr)
        sys.exit(1)
