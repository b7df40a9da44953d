"""Duration strings — ``"5s"``, ``"2m30s"``, ``"1h30m"`` parsed into ``timedelta``."""

from __future__ import annotations

from datetime import timedelta
from fractions import Fraction

from mega.config.errors import quote

# Nanoseconds per unit suffix.
UNITS: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 60 * 60 * 1_000_000_000,
}

# Largest magnitude representable as signed 64-bit nanoseconds.
MAX_NANOSECONDS = 2**63 - 1

# Digits kept from a fractional part; the rest cannot move the result by a nanosecond.
MAX_FRACTION_DIGITS = 30


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def parse_duration(raw: str) -> timedelta:
    """Parse a compound duration string such as ``"1h30m"`` or ``"-1.5s"``.

    A duration is an optional sign followed by one or more ``<number><unit>``
    components. Numbers may carry a fractional part. The bare literal ``"0"``
    is the only value accepted without a unit.

    Sub-microsecond remainders are truncated toward zero, so ``"500ns"``
    parses to ``timedelta(0)``.

    Raises:
        ValueError: if *raw* does not match the grammar, names an unknown
            unit, or overflows the 64-bit nanosecond range.
    """
    s = raw
    negative = False
    if s and s[0] in "+-":
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return timedelta(0)
    if not s:
        raise ValueError(f"invalid duration {quote(raw)}")

    total = Fraction(0)
    pos = 0
    while pos < len(s):
        start = pos
        while pos < len(s) and _is_digit(s[pos]):
            pos += 1
        whole = s[start:pos]

        frac = ""
        if pos < len(s) and s[pos] == ".":
            pos += 1
            frac_start = pos
            while pos < len(s) and _is_digit(s[pos]):
                pos += 1
            frac = s[frac_start:pos]

        if not whole and not frac:
            raise ValueError(f"invalid duration {quote(raw)}")

        unit_start = pos
        while pos < len(s) and s[pos] != "." and not _is_digit(s[pos]):
            pos += 1
        unit = s[unit_start:pos]
        if not unit:
            raise ValueError(f"missing unit in duration {quote(raw)}")
        scale = UNITS.get(unit)
        if scale is None:
            raise ValueError(f"unknown unit {quote(unit)} in duration {quote(raw)}")

        whole = whole.lstrip("0")
        if len(whole) > len(str(MAX_NANOSECONDS)):
            raise ValueError(f"invalid duration {quote(raw)}")
        frac = frac[:MAX_FRACTION_DIGITS]

        value = Fraction(int(whole or "0"))
        if frac:
            value += Fraction(int(frac), 10 ** len(frac))
        total += value * scale
        if total > MAX_NANOSECONDS:
            raise ValueError(f"invalid duration {quote(raw)}")

    microseconds = int(total / 1000)
    return timedelta(microseconds=-microseconds if negative else microseconds)


def require_positive(value: timedelta) -> None:
    if value <= timedelta(0):
        raise ValueError("must be greater than zero")
