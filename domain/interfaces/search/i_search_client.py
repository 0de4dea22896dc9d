from abc import ABC, abstractmethod
from typing import Any, Dict, List


class ISearchClient(ABC):
    """Remote transcription and transcript search interface"""
    @abstractmethod
    def transcribe(self, video_id: int) -> None:
        """Requests transcription of a video"""
        pass

    @abstractmethod
    def search(
        self,
        video_id: int,
        query: str,
        include_frame: bool = True,
        top_k: int = 1
    ) -> List[Dict[str, Any]]:
        """Returns raw hits ordered by relevance, best first"""
        pass
