"""
Dependency Inversion: implementation of IContentFetcher.
Turns a media locator into a locally playable file and owns its deletion.
"""
import os
from typing import Optional

from domain import IContentFetcher, ILogger
from infrastructure.downloader_strategy import MediaDownloader
from infrastructure.localization import _


class ContentFetcherImpl(IContentFetcher):
    """Single Responsibility: materializes full media copies into the cache folder."""

    def __init__(self, downloader: MediaDownloader, logger: Optional[ILogger] = None):
        self.downloader = downloader
        self.logger = logger

    def fetch(self, locator: str) -> Optional[str]:
        if os.path.isfile(locator):
            return None
        path = self.downloader.process_link(locator)
        if path and os.path.exists(path):
            if self.logger:
                self.logger.info(_("download_success", path=path))
            return path
        if self.logger:
            self.logger.warning(_("download_failed_for_url", url=locator))
        return None

    def release(self, local_path: str) -> None:
        """Deletes a copy created by fetch; paths outside the cache folder are left alone."""
        cache = os.path.abspath(self.downloader.folder)
        path = os.path.abspath(local_path)
        if os.path.commonpath([cache, path]) != cache:
            return
        if os.path.exists(path):
            os.remove(path)
