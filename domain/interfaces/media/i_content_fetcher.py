from abc import ABC, abstractmethod
from typing import Optional


class IContentFetcher(ABC):
    """Retrieves full media content as a locally playable copy"""
    @abstractmethod
    def fetch(self, locator: str) -> Optional[str]:
        """Downloads the whole resource and returns the local path, None on failure"""
        pass

    @abstractmethod
    def release(self, local_path: str) -> None:
        """Frees a copy previously returned by fetch"""
        pass
