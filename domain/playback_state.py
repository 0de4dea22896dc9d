"""Explicit state of segment playback.

Every transition returns a new ``PlaybackState``; the controller only ever
swaps whole states, so a stop point can never survive a transition that is
meant to drop it.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional
import math


class PlaybackPhase(Enum):
    IDLE = "idle"
    AWAITING_METADATA = "awaiting_metadata"
    PLAYING = "playing"
    SEGMENT_ACTIVE = "segment_active"


@dataclass(frozen=True)
class PendingSeek:
    """A seek request parked until the player reports metadata"""
    start: float
    end: Optional[float] = None


@dataclass(frozen=True)
class PlaybackState:
    phase: PlaybackPhase = PlaybackPhase.IDLE
    segment_target: Optional[float] = None
    pending: Optional[PendingSeek] = None

    def await_metadata(self, start: float, end: Optional[float]) -> "PlaybackState":
        """Parks a seek; a previously parked one is superseded"""
        return replace(self, phase=PlaybackPhase.AWAITING_METADATA, pending=PendingSeek(start, end))

    def seeked(self, end: Optional[float]) -> "PlaybackState":
        """Seek applied: arms the stop point when ``end`` is finite, clears it otherwise"""
        if end is not None and math.isfinite(end):
            return PlaybackState(phase=PlaybackPhase.SEGMENT_ACTIVE, segment_target=float(end))
        return PlaybackState(phase=PlaybackPhase.PLAYING)

    def segment_reached(self) -> "PlaybackState":
        return PlaybackState(phase=PlaybackPhase.IDLE)

    def without_segment(self) -> "PlaybackState":
        """Drops the stop point, keeping any parked seek"""
        if self.pending is not None:
            return replace(self, segment_target=None)
        return PlaybackState(phase=PlaybackPhase.IDLE)

    def should_stop(self, position: float) -> bool:
        return self.segment_target is not None and position >= self.segment_target
