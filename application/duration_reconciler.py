"""Recovers full seekability when the player under-reports a clip's duration.

Streaming playback through byte ranges sometimes leaves the player with a
truncated duration. When the catalog knows better, the whole file is fetched
once into a local copy and the player is switched over to it.
"""
import math
from typing import Callable, List, Optional

from domain import (
    CatalogVideo,
    IContentFetcher,
    IMediaPlayer,
    ILogger,
    PlaybackSource,
    METADATA_SIGNALS,
)
from infrastructure.localization import _
from infrastructure.scheduling import Dispatch, Spawn, run_inline, spawn_daemon
from .playback_source_handle import PlaybackSourceHandle

DEFAULT_TOLERANCE_SECONDS = 0.75

SourceListener = Callable[[PlaybackSource], None]


def _finite_or_none(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    return value if math.isfinite(value) else None


class DurationReconciler:
    """Keeps the authoritative duration and the active PlaybackSource for one player"""

    def __init__(
        self,
        player: IMediaPlayer,
        fetcher: IContentFetcher,
        logger: Optional[ILogger] = None,
        tolerance: float = DEFAULT_TOLERANCE_SECONDS,
        dispatch: Dispatch = run_inline,
        spawn: Spawn = spawn_daemon,
        resolve_locator: Callable[[str], str] = lambda locator: locator
    ):
        self.player = player
        self.fetcher = fetcher
        self.logger = logger
        self.tolerance = tolerance
        self.dispatch = dispatch
        self.spawn = spawn
        self.resolve_locator = resolve_locator
        self.source = PlaybackSourceHandle(fetcher.release, logger)
        self._listeners: List[SourceListener] = []
        self._video: Optional[CatalogVideo] = None
        self._generation = 0
        self._reset_tracking()
        self._unsubscribers = [
            player.subscribe(signal, self.observe) for signal in METADATA_SIGNALS
        ]

    def _reset_tracking(self) -> None:
        self.live_duration: Optional[float] = None
        self.seekable_end: Optional[float] = None
        self.switched = False
        self.recovery_attempted = False
        self.fetch_in_flight = False

    # observable source
    def add_source_listener(self, listener: SourceListener) -> Callable[[], None]:
        """Subscribes to "effective source changed"; returns an unsubscribe function"""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener) if listener in self._listeners else None

    def _notify(self, source: PlaybackSource) -> None:
        for listener in list(self._listeners):
            listener(source)

    # video identity
    @property
    def video(self) -> Optional[CatalogVideo]:
        return self._video

    def bind(self, video: CatalogVideo) -> None:
        """Switches to another video, dropping all state of the previous one"""
        if self._video is not None and self._video.id == video.id:
            return
        self._video = video
        self._generation += 1
        self._reset_tracking()
        remote = PlaybackSource.remote(self.resolve_locator(video.media_locator))
        self.source.replace(remote)
        # Tracking was reset, so the player must reload even when the locator is shared
        self._notify(remote)

    @property
    def catalog_duration(self) -> Optional[float]:
        return self._video.catalog_duration_seconds if self._video else None

    @property
    def best_duration(self) -> Optional[float]:
        """Catalog duration when known, else what the player reports"""
        if self.catalog_duration is not None:
            return self.catalog_duration
        return self.live_duration

    # player events
    def observe(self) -> None:
        """Refreshes live duration and seekable bound, then checks the trigger"""
        if self._video is None:
            return
        self.live_duration = _finite_or_none(self.player.duration)
        self.seekable_end = _finite_or_none(self.player.seekable_end)
        if self.should_recover():
            self._start_recovery()

    def should_recover(self) -> bool:
        catalog = self.catalog_duration
        if catalog is None or self.live_duration is None:
            return False
        if self.switched or self.recovery_attempted or self.fetch_in_flight:
            return False
        return self.live_duration < catalog - self.tolerance

    def _start_recovery(self) -> None:
        video = self._video
        generation = self._generation
        locator = self.resolve_locator(video.media_locator)
        self.recovery_attempted = True
        self.fetch_in_flight = True
        if self.logger:
            self.logger.warning(_(
                "duration_mismatch",
                live=f"{self.live_duration:.2f}",
                catalog=f"{self.catalog_duration:.2f}",
            ))

        def worker():
            try:
                local_path = self.fetcher.fetch(locator)
            except Exception as e:
                if self.logger:
                    self.logger.warning(_("recovery_fetch_failed", error=e))
                local_path = None
            self.dispatch(lambda: self._complete_recovery(generation, local_path))

        self.spawn(worker)

    def _complete_recovery(self, generation: int, local_path: Optional[str]) -> None:
        if generation != self._generation:
            # Video changed while fetching
            if local_path:
                self.fetcher.release(local_path)
            return
        self.fetch_in_flight = False
        if not local_path:
            if self.logger:
                self.logger.warning(_("recovery_degraded"))
            return
        local = PlaybackSource.local(local_path)
        if not self.source.replace(local):
            return
        self.switched = True
        self.live_duration = None
        self.seekable_end = None
        if self.logger:
            self.logger.info(_("recovery_switched", path=local_path))
        self._notify(local)

    def close(self) -> None:
        """Invalidates pending fetches and frees the local copy"""
        self._generation += 1
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        self._video = None
        self._reset_tracking()
        self.source.release()
        self._listeners.clear()
