"""Timestamp parsing and formatting helpers.

Search services are not consistent about how they report times, so
``parse_time_like`` accepts every shape seen in the wild and signals failure
with ``None`` instead of raising.

Example:
    parse_time_like(12)          -> 12.0
    parse_time_like("12.3s")     -> 12.3
    parse_time_like("1:30")      -> 90.0
    parse_time_like("01:02:03.5") -> 3723.5
    parse_time_like("soon")      -> None
"""
import math
import re
from typing import Any, Optional

_DECIMAL_WITH_UNIT = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+))\s*s$", re.IGNORECASE)
_CLOCK = re.compile(r"^(?:([^:]+):)?([^:]+):([^:]+)$")


def _finite(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def _to_float(text: str) -> Optional[float]:
    try:
        return _finite(float(text))
    except (TypeError, ValueError, OverflowError):
        return None


def parse_time_like(value: Any) -> Optional[float]:
    """Parses a number, ``"12.3s"``, ``"mm:ss[.ms]"`` or ``"hh:mm:ss[.ms]"`` into seconds"""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return _finite(float(value))
        except OverflowError:
            return None
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    match = _DECIMAL_WITH_UNIT.match(text)
    if match:
        return _to_float(match.group(1))

    match = _CLOCK.match(text)
    if match:
        hours_part, minutes_part, seconds_part = match.groups()
        hours = _to_float(hours_part) if hours_part is not None else 0.0
        minutes = _to_float(minutes_part)
        seconds = _to_float(seconds_part)
        if hours is None or minutes is None or seconds is None:
            return None
        return _finite(hours * 3600 + minutes * 60 + seconds)

    return _to_float(text)


def format_as_hhmmss(seconds: float) -> str:
    """Formats seconds as ``HH:MM:SS.mmm``"""
    total_ms = int(round(max(0.0, seconds) * 1000))
    hours, rest = divmod(total_ms, 3600 * 1000)
    minutes, rest = divmod(rest, 60 * 1000)
    secs, millis = divmod(rest, 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}.{millis:03d}"


def format_timecode(seconds: float) -> str:
    """Short ``MM:SS`` label for buttons and cards"""
    m = int(seconds // 60)
    s = int(seconds % 60)
    return f"{m:02d}:{s:02d}"
