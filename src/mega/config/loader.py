"""Config loader — reads SERVER_* and LOG_* env vars, reports every bad value at once."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from mega.config.addresses import parse_host_port
from mega.config.durations import parse_duration, require_positive
from mega.config.errors import ConfigError, FieldError, quote
from mega.config.schema import AppConfig

_LOG_LEVELS = {
    "DEBUG": "DEBUG",
    "INFO": "INFO",
    "WARN": "WARNING",
    "WARNING": "WARNING",
    "ERROR": "ERROR",
    "CRITICAL": "CRITICAL",
}

_LOG_FORMATS = {"JSON": "json", "TEXT": "text"}

_LOG_STREAMS = {"STDOUT": "stdout", "STDERR": "stderr"}


def _log_level(raw: str) -> str:
    level = _LOG_LEVELS.get(raw.upper())
    if level is None:
        raise ValueError(f"unknown log level {quote(raw)}")
    return level


def _log_format(raw: str) -> str:
    log_format = _LOG_FORMATS.get(raw.upper())
    if log_format is None:
        raise ValueError('it must be either "JSON" or "TEXT"')
    return log_format


def _log_output(raw: str) -> str:
    if not raw:
        raise ValueError('it must be either "STDOUT", "STDERR", or a file path')
    return _LOG_STREAMS.get(raw.upper(), raw)


@dataclass(frozen=True)
class _Field:
    """How one environment variable becomes one config attribute."""

    env_key: str
    default: str
    section: str
    name: str
    kind: str
    parse: Callable[[str], Any]
    check: Callable[[Any], None] | None = None


_FIELDS: tuple[_Field, ...] = (
    _Field("LOG_LEVEL", "INFO", "logging", "level", "log level", _log_level),
    _Field("LOG_FORMAT", "JSON", "logging", "format", "log format", _log_format),
    _Field("LOG_OUTPUT", "STDOUT", "logging", "output", "log output", _log_output),
    _Field("SERVER_ADDRESS", "localhost:8080", "server", "address", '"host:port"', parse_host_port),
    _Field("SERVER_READ_TIMEOUT", "5s", "server", "read_timeout", "duration", parse_duration, require_positive),
    _Field("SERVER_READ_HEADER_TIMEOUT", "2s", "server", "read_header_timeout", "duration", parse_duration, require_positive),
    _Field("SERVER_WRITE_TIMEOUT", "10s", "server", "write_timeout", "duration", parse_duration, require_positive),
    _Field("SERVER_IDLE_TIMEOUT", "60s", "server", "idle_timeout", "duration", parse_duration, require_positive),
    _Field("SERVER_SHUTDOWN_TIMEOUT", "15s", "server", "shutdown_timeout", "duration", parse_duration, require_positive),
)

ENV_KEYS: tuple[str, ...] = tuple(f.env_key for f in _FIELDS)


def load_config(environ: Mapping[str, str] | None = None) -> AppConfig:
    """Build an :class:`AppConfig` from environment variables.

    *environ* defaults to ``os.environ``. Only a missing variable falls back
    to its default; a variable set to ``""`` is parsed like any other value
    and fails.

    Environment variables:
        LOG_LEVEL                   -> logging.level      (default INFO)
        LOG_FORMAT                  -> logging.format     (default JSON)
        LOG_OUTPUT                  -> logging.output     (default STDOUT)
        SERVER_ADDRESS              -> server.address     (default localhost:8080)
        SERVER_READ_TIMEOUT         -> server.read_timeout         (default 5s)
        SERVER_READ_HEADER_TIMEOUT  -> server.read_header_timeout  (default 2s)
        SERVER_WRITE_TIMEOUT        -> server.write_timeout        (default 10s)
        SERVER_IDLE_TIMEOUT         -> server.idle_timeout         (default 60s)
        SERVER_SHUTDOWN_TIMEOUT     -> server.shutdown_timeout     (default 15s)

    Raises:
        ConfigError: listing every variable that failed, not just the first.
    """
    env = os.environ if environ is None else environ
    errors: list[FieldError] = []
    data: dict[str, dict[str, Any]] = {"server": {}, "logging": {}}

    for field in _FIELDS:
        raw = env.get(field.env_key)
        if raw is None:
            raw = field.default

        try:
            value = field.parse(raw)
        except ValueError as exc:
            errors.append(FieldError(
                f'failed to parse {field.kind} ({field.env_key}) got={quote(raw)}: {exc}',
                env_key=field.env_key, raw=raw, reason=str(exc),
            ))
            continue

        if field.check is not None:
            try:
                field.check(value)
            except ValueError as exc:
                errors.append(FieldError(
                    f'{field.kind} ({field.env_key}) {exc} got={quote(raw)}',
                    env_key=field.env_key, raw=raw, reason=str(exc),
                ))
                continue

        data[field.section][field.name] = value

    if errors:
        raise ConfigError(errors)
    return AppConfig.model_validate(data)
