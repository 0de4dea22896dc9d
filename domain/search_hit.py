from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
import math

RawHit = Mapping[str, Any]


@dataclass
class SearchHit:
    """Entity: One ranked transcript match as returned by the search service.

    Timestamps are kept untouched in ``raw``; they are only turned into a
    playable range at playback time, when the best duration is known.
    """
    text: str
    score: float
    frame_url: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: RawHit) -> "SearchHit":
        """Wraps a raw hit, degrading malformed text/score instead of failing"""
        if not isinstance(raw, Mapping):
            raw = {}
        try:
            score = float(raw.get("score", 0.0))
        except (TypeError, ValueError):
            score = 0.0
        if not math.isfinite(score):
            score = 0.0
        text = raw.get("text")
        frame_url = raw.get("frame_url")
        return cls(
            text=text if isinstance(text, str) else "",
            score=score,
            frame_url=frame_url if isinstance(frame_url, str) and frame_url else None,
            raw=dict(raw),
        )
