"""Configuration schema — frozen Pydantic models produced by the loader."""

from __future__ import annotations

from datetime import timedelta
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mega.config.addresses import parse_host_port, split_host_port
from mega.config.durations import require_positive


class ServerConfig(BaseModel):
    """Server tuning parameters, one per ``SERVER_*`` variable."""

    model_config = ConfigDict(frozen=True)

    # TCP address to listen on, "host:port". An empty host means all interfaces.
    address: str = "localhost:8080"
    # Maximum time to read an entire request, body included.
    read_timeout: timedelta = timedelta(seconds=5)
    # Time allowed to read request headers, enforced before the body.
    read_header_timeout: timedelta = timedelta(seconds=2)
    # Maximum time before timing out writes of the response.
    write_timeout: timedelta = timedelta(seconds=10)
    # How long a keep-alive connection may wait for its next request.
    idle_timeout: timedelta = timedelta(seconds=60)
    # How long active connections may drain during shutdown.
    shutdown_timeout: timedelta = timedelta(seconds=15)

    @field_validator("address")
    @classmethod
    def canonical_address(cls, value: str) -> str:
        return parse_host_port(value)

    @field_validator(
        "read_timeout",
        "read_header_timeout",
        "write_timeout",
        "idle_timeout",
        "shutdown_timeout",
    )
    @classmethod
    def positive_timeout(cls, value: timedelta) -> timedelta:
        require_positive(value)
        return value

    @property
    def host(self) -> str:
        return split_host_port(self.address)[0]

    @property
    def port(self) -> int:
        return int(split_host_port(self.address)[1])


class LoggingConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    format: Literal["json", "text"] = "json"
    # "stdout", "stderr", or a file path opened in append mode by the logger.
    output: str = "stdout"


class AppConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
