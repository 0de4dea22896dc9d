"""Turns raw search hits into playable time ranges"""
import math
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple

from domain import NormalizedRange, RawHit
from domain.time_utils import parse_time_like

START_FIELDS = (
    "start", "start_time", "startTime", "start_timestamp",
    "start_ts", "ts_start", "startSec", "start_seconds",
)
END_FIELDS = (
    "end", "end_time", "endTime", "end_timestamp",
    "end_ts", "ts_end", "endSec", "end_seconds",
)

# v > 1.5 * duration while v / 1000 still fits means v was sent in milliseconds
DURATION_SLACK = 1.5
# Without a duration: anything above 10 minutes that is under 10 hours once
# divided is read as milliseconds. A genuine 620 s clip is misread as 0.62 s.
BARE_MS_THRESHOLD = 600.0
BARE_MS_CEILING_SECONDS = 36000.0

Accessor = Callable[[Mapping[str, Any]], Any]


def _field(name: str) -> Accessor:
    return lambda hit: hit.get(name)


START_ACCESSORS: Tuple[Accessor, ...] = tuple(_field(name) for name in START_FIELDS)
END_ACCESSORS: Tuple[Accessor, ...] = tuple(_field(name) for name in END_FIELDS)


def _known_duration(duration: Optional[float]) -> Optional[float]:
    if duration is None or isinstance(duration, bool):
        return None
    try:
        duration = float(duration)
    except (TypeError, ValueError):
        return None
    return duration if math.isfinite(duration) and duration > 0 else None


def first_parsed(hit: Mapping[str, Any], accessors: Sequence[Accessor]) -> Optional[float]:
    """Returns the first accessor value that parses as a time"""
    for accessor in accessors:
        value = parse_time_like(accessor(hit))
        if value is not None:
            return value
    return None


def looks_like_milliseconds(value: float, duration: Optional[float]) -> bool:
    """Best-effort guess whether ``value`` was sent in milliseconds"""
    if duration is not None:
        limit = DURATION_SLACK * duration
        if value > limit and value / 1000 <= limit:
            return True
        if value <= limit:
            return False
    return value > BARE_MS_THRESHOLD and value / 1000 < BARE_MS_CEILING_SECONDS


def _clamp(value: float, duration: Optional[float]) -> float:
    if duration is None:
        return max(0.0, value)
    return min(max(0.0, value), duration)


class HitNormalizer:
    """Resolves field aliases, unit ambiguity and clamping for one hit at a time"""

    def __init__(
        self,
        start_accessors: Sequence[Accessor] = START_ACCESSORS,
        end_accessors: Sequence[Accessor] = END_ACCESSORS
    ):
        self.start_accessors = tuple(start_accessors)
        self.end_accessors = tuple(end_accessors)

    def normalize(self, raw_hit: RawHit, duration_hint: Optional[float] = None) -> NormalizedRange:
        """Returns a clamped range; malformed input degrades instead of raising"""
        hit = raw_hit if isinstance(raw_hit, Mapping) else {}
        duration = _known_duration(duration_hint)

        start = first_parsed(hit, self.start_accessors)
        if start is None:
            start = 0.0
        end = first_parsed(hit, self.end_accessors)
        if end is None:
            end = start

        # Both bounds share one unit decision
        if looks_like_milliseconds(start, duration) or looks_like_milliseconds(end, duration):
            start /= 1000
            end /= 1000

        start = _clamp(start, duration)
        end = _clamp(end, duration)
        if not math.isfinite(end) or end < start:
            end = start
        return NormalizedRange(start=start, end=end)


_default_normalizer = HitNormalizer()


def normalize(raw_hit: RawHit, duration_hint: Optional[float] = None) -> NormalizedRange:
    """Module-level shortcut over the default alias set"""
    return _default_normalizer.normalize(raw_hit, duration_hint)
