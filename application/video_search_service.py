"""Transcript search use case"""
from typing import List, Optional, Set
from domain import ISearchClient, ILogger, SearchHit
from infrastructure.localization import _


class VideoSearchService:
    """Makes sure a video is transcribed, then searches its transcript"""

    def __init__(
        self,
        client: ISearchClient,
        logger: Optional[ILogger] = None,
        top_k: int = 3,
        include_frame: bool = True
    ):
        self.client = client
        self.logger = logger
        self.top_k = top_k
        self.include_frame = include_frame
        self._transcribed: Set[int] = set()

    def is_transcribed(self, video_id: int) -> bool:
        return video_id in self._transcribed

    def ensure_transcribed(self, video_id: int) -> None:
        """Requests transcription once per video; "already transcribed" counts as done"""
        if video_id in self._transcribed:
            return
        try:
            self.client.transcribe(video_id)
        except RuntimeError as e:
            if "already" not in str(e):
                raise
        if self.logger:
            self.logger.info(_("transcript_ready", video_id=video_id))
        self._transcribed.add(video_id)

    def forget(self, video_id: int) -> None:
        self._transcribed.discard(video_id)

    def search(
        self,
        video_id: int,
        query: str,
        top_k: Optional[int] = None,
        include_frame: Optional[bool] = None
    ) -> List[SearchHit]:
        """Returns hits best first; a blank query returns nothing"""
        query = (query or "").strip()
        if not query:
            return []
        self.ensure_transcribed(video_id)
        raw_hits = self.client.search(
            video_id,
            query,
            include_frame=self.include_frame if include_frame is None else include_frame,
            top_k=self.top_k if top_k is None else top_k,
        )
        hits = [SearchHit.from_raw(raw) for raw in raw_hits or []]
        if self.logger:
            self.logger.info(_("search_hits_found", count=len(hits), query=query))
        return hits
