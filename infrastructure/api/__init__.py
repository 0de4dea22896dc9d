from .video_api_client import VideoApiClient, ApiError

__all__ = ['VideoApiClient', 'ApiError']
