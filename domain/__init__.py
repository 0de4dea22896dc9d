from .catalog_video import CatalogVideo
from .search_hit import SearchHit, RawHit
from .time_range import NormalizedRange
from .playback_source import PlaybackSource
from .playback_state import PlaybackState, PlaybackPhase, PendingSeek
from .player_signal import PlayerSignal, METADATA_SIGNALS
from .interfaces import (
    IVideoCatalog,
    ISearchClient,
    IMediaPlayer,
    IContentFetcher,
    MediaPlaybackError,
    IDownloadStrategy,
    ILogger
)

__all__ = [
    'CatalogVideo',
    'SearchHit',
    'RawHit',
    'NormalizedRange',
    'PlaybackSource',
    'PlaybackState',
    'PlaybackPhase',
    'PendingSeek',
    'PlayerSignal',
    'METADATA_SIGNALS',
    'IVideoCatalog',
    'ISearchClient',
    'IMediaPlayer',
    'IContentFetcher',
    'MediaPlaybackError',
    'IDownloadStrategy',
    'ILogger'
]
