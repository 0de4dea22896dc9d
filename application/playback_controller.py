"""Seek, play and stop-at-end state machine for one media player"""
import math
from concurrent.futures import Future
from typing import Optional

from domain import (
    IMediaPlayer,
    ILogger,
    MediaPlaybackError,
    PlaybackPhase,
    PlaybackState,
    PlayerSignal,
)
from infrastructure.localization import _


class PlaybackController:
    """Drives the player to a range and pauses it at the range's end.

    ``seek_and_play`` returns a Future that resolves once the seek has been
    applied. When the player has no metadata yet the request is parked and
    applied on the next metadata-ready signal; a newer request replaces it.
    """

    def __init__(self, player: IMediaPlayer, logger: Optional[ILogger] = None):
        self.player = player
        self.logger = logger
        self.state = PlaybackState()
        self._pending_future: Optional[Future] = None
        self._unsubscribers = [
            player.subscribe(PlayerSignal.METADATA_READY, self._on_metadata_ready),
            player.subscribe(PlayerSignal.POSITION_UPDATE, self._on_position_update),
        ]

    @property
    def phase(self) -> PlaybackPhase:
        return self.state.phase

    @property
    def segment_target(self) -> Optional[float]:
        return self.state.segment_target

    def seek_and_play(self, start: float, end: Optional[float] = None) -> Future:
        future: Future = Future()
        if not self.player.has_metadata:
            self._cancel_pending()
            self.state = self.state.await_metadata(start, end)
            self._pending_future = future
            return future
        self._apply(start, end)
        future.set_result(None)
        return future

    def jump_to(self, start: float) -> Future:
        """Seeks without a stop point, dropping any stop point left from an earlier hit"""
        self.clear_segment()
        return self.seek_and_play(start, None)

    def clear_segment(self) -> None:
        self.state = self.state.without_segment()

    def reset(self) -> None:
        """Called when the source changes: the player has dropped its live state"""
        self.clear_segment()

    def _apply(self, start: float, end: Optional[float]) -> None:
        if end is not None and not math.isfinite(end):
            end = None
        # The position write reports back synchronously; drop the old stop point first
        self.state = self.state.without_segment()
        self.player.position = max(0.0, start)
        self.state = self.state.seeked(end)
        try:
            self.player.play()
        except MediaPlaybackError as e:
            if self.logger:
                self.logger.warning(_("playback_start_rejected", error=e))

    def _on_metadata_ready(self) -> None:
        pending = self.state.pending
        if pending is None:
            return
        future, self._pending_future = self._pending_future, None
        self._apply(pending.start, pending.end)
        if future is not None:
            future.set_result(None)

    def _on_position_update(self) -> None:
        if not self.state.should_stop(self.player.position):
            return
        # Clear before pausing: pause may emit another position update
        self.state = self.state.segment_reached()
        self.player.pause()

    def _cancel_pending(self) -> None:
        if self._pending_future is not None:
            self._pending_future.cancel()
            self._pending_future = None

    def close(self) -> None:
        self._cancel_pending()
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        self.state = PlaybackState()
