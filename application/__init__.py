"""Application layer: use cases and playback state machines"""
from .hit_normalizer import HitNormalizer, normalize
from .playback_source_handle import PlaybackSourceHandle
from .duration_reconciler import DurationReconciler
from .playback_controller import PlaybackController
from .video_search_service import VideoSearchService
from .playback_session import PlaybackSession

__all__ = [
    'HitNormalizer',
    'normalize',
    'PlaybackSourceHandle',
    'DurationReconciler',
    'PlaybackController',
    'VideoSearchService',
    'PlaybackSession'
]
