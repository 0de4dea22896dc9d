"""HTTP client for the video catalog and transcript search API"""
from typing import Any, Dict, List, Optional

import requests

from domain import CatalogVideo, ISearchClient, IVideoCatalog


class ApiError(RuntimeError):
    """Non-2xx answer from the API; the message carries the server's detail when it sends one"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class VideoApiClient(IVideoCatalog, ISearchClient):
    """REST client: catalog listing/deletion, transcription and search"""

    def __init__(self, base_url: str, timeout: float = 30.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _raise_for(self, response: requests.Response, action: str) -> None:
        if response.ok:
            return
        detail = None
        try:
            body = response.json()
            if isinstance(body, dict):
                detail = body.get("detail")
        except ValueError:
            pass
        message = detail or f"{action}: {response.status_code} {response.reason}"
        raise ApiError(str(message), response.status_code)

    def _request(self, method: str, path: str, action: str, **kwargs) -> requests.Response:
        try:
            response = self.session.request(method, self._url(path), timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise ApiError(f"{action}: {e}") from e
        self._raise_for(response, action)
        return response

    def _json(self, response: requests.Response, action: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"{action}: invalid JSON in response", response.status_code) from e

    # catalog
    def list_videos(self) -> List[CatalogVideo]:
        response = self._request("GET", "/api/videos/", "Failed to list videos")
        videos = []
        for item in self._json(response, "Failed to list videos") or []:
            try:
                videos.append(CatalogVideo.from_api(item))
            except (KeyError, TypeError, ValueError):
                continue
        return videos

    def delete_video(self, video_id: int) -> None:
        self._request("DELETE", f"/api/videos/{video_id}/", "Failed to delete video")

    def to_absolute_media(self, url: str) -> str:
        if url.startswith("http://") or url.startswith("https://"):
            return url
        return f"{self.base_url}{url}"

    # transcript search
    def transcribe(self, video_id: int) -> None:
        self._request("POST", f"/api/videos/{video_id}/transcribe/", "Failed to transcribe")

    def search(
        self,
        video_id: int,
        query: str,
        include_frame: bool = True,
        top_k: int = 1
    ) -> List[Dict[str, Any]]:
        params = {
            "query": query,
            "include_frame": "1" if include_frame else "0",
            "top_k": str(top_k),
        }
        response = self._request(
            "GET", f"/api/videos/{video_id}/search", "Failed to search video", params=params
        )
        body = self._json(response, "Failed to search video") or {}
        results = body.get("results") if isinstance(body, dict) else None
        return [hit for hit in results or [] if isinstance(hit, dict)]
