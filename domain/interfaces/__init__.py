from .catalog import IVideoCatalog
from .search import ISearchClient
from .media import IMediaPlayer, IContentFetcher, MediaPlaybackError
from .video import IDownloadStrategy
from .infrastructure import ILogger

__all__ = [
    'IVideoCatalog',
    'ISearchClient',
    'IMediaPlayer',
    'IContentFetcher',
    'MediaPlaybackError',
    'IDownloadStrategy',
    'ILogger'
]
