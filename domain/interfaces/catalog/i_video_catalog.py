from abc import ABC, abstractmethod
from typing import List
from ...catalog_video import CatalogVideo


class IVideoCatalog(ABC):
    """Video catalog interface"""
    @abstractmethod
    def list_videos(self) -> List[CatalogVideo]:
        """Returns all catalog records"""
        pass

    @abstractmethod
    def delete_video(self, video_id: int) -> None:
        pass

    @abstractmethod
    def to_absolute_media(self, url: str) -> str:
        """Resolves a media reference relative to the catalog host"""
        pass
