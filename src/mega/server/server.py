"""Server — maps AppConfig onto a uvicorn server and runs it."""

from __future__ import annotations

import math
from datetime import timedelta

import structlog
import uvicorn

from mega.config.schema import AppConfig
from mega.server.app import create_app


def _whole_seconds(value: timedelta) -> int:
    """Round up so a positive sub-second timeout never becomes zero."""
    return math.ceil(value.total_seconds())


class Server:
    """HTTP server configured from :class:`AppConfig`.

    uvicorn enforces the idle (keep-alive) and shutdown timeouts. The read,
    read-header and write timeouts have no uvicorn counterpart and are kept
    as attributes only.
    """

    def __init__(
        self,
        config: AppConfig,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        server = config.server
        self.address = server.address
        self.read_timeout = server.read_timeout
        self.read_header_timeout = server.read_header_timeout
        self.write_timeout = server.write_timeout
        self.idle_timeout = server.idle_timeout
        self.shutdown_timeout = server.shutdown_timeout
        self.logger = logger if logger is not None else structlog.get_logger("server")

        self.app = create_app()
        self.uvicorn_config = uvicorn.Config(
            self.app,
            host=server.host or "0.0.0.0",
            port=server.port,
            timeout_keep_alive=_whole_seconds(server.idle_timeout),
            timeout_graceful_shutdown=_whole_seconds(server.shutdown_timeout),
            log_config=None,  # Use our structlog setup
        )

    def run(self) -> None:
        """Serve until the process is told to stop."""
        self.logger.info(
            "server_starting",
            address=self.address,
            idle_timeout_s=self.idle_timeout.total_seconds(),
            shutdown_timeout_s=self.shutdown_timeout.total_seconds(),
        )
        try:
            uvicorn.Server(self.uvicorn_config).run()
        except Exception as e:
            self.logger.error("server_failed", address=self.address, error=str(e))
            raise
        self.logger.info("server_stopped", address=self.address)
