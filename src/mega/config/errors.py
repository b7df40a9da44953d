"""Configuration errors."""

from __future__ import annotations

import json
from collections.abc import Sequence


# Line breaks str.splitlines() honours that json.dumps leaves unescaped.
_LINE_BREAKS = {0x85: "\\u0085", 0x2028: "\\u2028", 0x2029: "\\u2029"}


def quote(value: str) -> str:
    """Double-quote *value* with line breaks escaped, so it stays on one line."""
    return json.dumps(value, ensure_ascii=False).translate(_LINE_BREAKS)


class FieldError(ValueError):
    """A single environment variable that failed to parse or validate."""

    def __init__(self, message: str, *, env_key: str, raw: str, reason: str) -> None:
        super().__init__(message)
        self.env_key = env_key
        self.raw = raw
        self.reason = reason


class ConfigError(ValueError):
    """Every field failure from one loading pass, in field order.

    ``str(error)`` lists one failure per line so all of them can be fixed
    before the next start.
    """

    def __init__(self, errors: Sequence[FieldError]) -> None:
        self.errors: tuple[FieldError, ...] = tuple(errors)
        super().__init__("\n".join(str(e) for e in self.errors))

    @property
    def env_keys(self) -> list[str]:
        return [e.env_key for e in self.errors]
