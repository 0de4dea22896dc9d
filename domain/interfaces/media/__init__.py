from .i_media_player import IMediaPlayer, MediaPlaybackError
from .i_content_fetcher import IContentFetcher

__all__ = ['IMediaPlayer', 'MediaPlaybackError', 'IContentFetcher']
