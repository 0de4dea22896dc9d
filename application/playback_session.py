"""Search-to-playback coordination for the video currently on screen"""
from typing import List, Optional

from domain import (
    CatalogVideo,
    IContentFetcher,
    IMediaPlayer,
    ILogger,
    NormalizedRange,
    PlaybackSource,
    SearchHit,
)
from infrastructure.scheduling import Dispatch, Spawn, run_inline, spawn_daemon
from .duration_reconciler import DurationReconciler
from .hit_normalizer import HitNormalizer
from .playback_controller import PlaybackController
from .video_search_service import VideoSearchService


class PlaybackSession:
    """Owns the reconciler and controller of one player.

    Hits are normalized when they are played, not when they were found, so a
    duration that improved in the meantime is taken into account.
    """

    def __init__(
        self,
        player: IMediaPlayer,
        fetcher: IContentFetcher,
        search_service: Optional[VideoSearchService] = None,
        logger: Optional[ILogger] = None,
        normalizer: Optional[HitNormalizer] = None,
        tolerance: float = 0.75,
        dispatch: Dispatch = run_inline,
        spawn: Spawn = spawn_daemon,
        resolve_locator=lambda locator: locator
    ):
        self.player = player
        self.search_service = search_service
        self.logger = logger
        self.normalizer = normalizer or HitNormalizer()
        self.controller = PlaybackController(player, logger)
        self.reconciler = DurationReconciler(
            player,
            fetcher,
            logger=logger,
            tolerance=tolerance,
            dispatch=dispatch,
            spawn=spawn,
            resolve_locator=resolve_locator,
        )
        self._unsubscribe_source = self.reconciler.add_source_listener(self._on_source_changed)

    @property
    def video(self) -> Optional[CatalogVideo]:
        return self.reconciler.video

    @property
    def active_source(self) -> Optional[PlaybackSource]:
        return self.reconciler.source.current

    def open_video(self, video: CatalogVideo) -> None:
        self.reconciler.bind(video)

    def _on_source_changed(self, source: PlaybackSource) -> None:
        self.controller.reset()
        self.player.load(source.location)

    def range_for(self, hit: SearchHit) -> NormalizedRange:
        return self.normalizer.normalize(hit.raw, self.reconciler.best_duration)

    def play_hit(self, hit: SearchHit) -> NormalizedRange:
        """Plays the hit's range and stops at its end"""
        target = self.range_for(hit)
        self.controller.seek_and_play(target.start, target.end)
        return target

    def jump_to_hit(self, hit: SearchHit) -> NormalizedRange:
        """Seeks to the hit's start and keeps playing"""
        target = self.range_for(hit)
        self.controller.jump_to(target.start)
        return target

    def search_and_play(self, query: str) -> List[SearchHit]:
        """Searches the open video and plays the best hit"""
        if self.video is None or self.search_service is None:
            return []
        hits = self.search_service.search(self.video.id, query)
        if hits:
            self.play_hit(hits[0])
        return hits

    def close(self) -> None:
        self._unsubscribe_source()
        self.controller.close()
        self.reconciler.close()
