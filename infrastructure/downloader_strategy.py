"""
Strategy Pattern: download strategies and their Context.
This file only knows HOW to bring one media resource onto local disk.
"""
import os
import shutil
import uuid
from typing import List, Optional
from urllib.parse import urlparse

import gdown
import requests
import yt_dlp

from domain import IDownloadStrategy
from infrastructure.localization import _

CACHE_FOLDER = "media_cache"
CHUNK_SIZE = 1024 * 256


def _unique_name(url: str, default_ext: str = ".mp4") -> str:
    ext = os.path.splitext(urlparse(url).path)[1] or default_ext
    return f"{uuid.uuid4().hex}{ext}"


class YouTubeStrategy(IDownloadStrategy):
    """Strategy for YouTube links via yt-dlp."""

    def can_handle(self, url: str) -> bool:
        return "youtube.com" in url or "youtu.be" in url

    def download(self, url: str, output_folder: str) -> Optional[str]:
        print(_("youtube_download_start", url=url))
        stem = uuid.uuid4().hex
        ydl_opts = {
            'outtmpl': os.path.join(output_folder, f'{stem}.%(ext)s'),
            'format': 'best[ext=mp4]/best',
            'noplaylist': True,
            'quiet': True,
            'no_warnings': True,
        }
        try:
            with yt_dlp.YoutubeDL(ydl_opts) as ydl:
                info = ydl.extract_info(url, download=True)
                path = ydl.prepare_filename(info)
        except yt_dlp.utils.DownloadError as e:
            print(_("download_error", url=url, error=e))
            return None

        if os.path.exists(path):
            return path
        for file in os.listdir(output_folder):
            if file.startswith(stem):
                return os.path.join(output_folder, file)
        return None


class GoogleDriveStrategy(IDownloadStrategy):
    """Strategy for Google Drive files via gdown."""

    def can_handle(self, url: str) -> bool:
        return "drive.google.com" in url

    def download(self, url: str, output_folder: str) -> Optional[str]:
        print(_("drive_download_start", url=url))
        target = os.path.join(output_folder, _unique_name(url))
        try:
            output_file = gdown.download(url, output=target, fuzzy=True, quiet=True)
        except Exception as e:
            print(_("download_error", url=url, error=f"{type(e).__name__}: {e}"))
            return None
        if output_file and os.path.exists(output_file):
            return output_file
        print(_("download_error", url=url, error="gdown returned no file"))
        return None


class HttpStrategy(IDownloadStrategy):
    """Strategy for plain http(s) media URLs, streamed to disk with requests."""

    def __init__(self, timeout: float = 60.0):
        self.timeout = timeout

    def can_handle(self, url: str) -> bool:
        return url.startswith("http://") or url.startswith("https://")

    def download(self, url: str, output_folder: str) -> Optional[str]:
        print(_("http_download_start", url=url))
        target = os.path.join(output_folder, _unique_name(url))
        try:
            with requests.get(url, stream=True, timeout=self.timeout) as response:
                response.raise_for_status()
                with open(target, "wb") as f:
                    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)
        except (requests.exceptions.RequestException, OSError) as e:
            print(_("download_error", url=url, error=e))
            if os.path.exists(target):
                os.remove(target)
            return None
        return target


class MediaDownloader:
    """
    Strategy Pattern: Context.
    Picks the first strategy that accepts a link. Order matters: the generic
    HTTP strategy must come after the host-specific ones.
    """
    def __init__(self, folder: str = CACHE_FOLDER, strategies: Optional[List[IDownloadStrategy]] = None):
        self.folder = folder
        os.makedirs(self.folder, exist_ok=True)
        self.strategies: List[IDownloadStrategy] = strategies if strategies is not None else [
            YouTubeStrategy(),
            GoogleDriveStrategy(),
            HttpStrategy(),
        ]

    def process_link(self, url: str) -> Optional[str]:
        """Downloads the link with the first matching strategy."""
        for strategy in self.strategies:
            if strategy.can_handle(url):
                return strategy.download(url, self.folder)

        print(_("no_strategy_for_link", url=url))
        return None

    def clear(self) -> None:
        """Removes every cached download."""
        if os.path.isdir(self.folder):
            shutil.rmtree(self.folder, ignore_errors=True)
        os.makedirs(self.folder, exist_ok=True)
