from abc import ABC, abstractmethod
from typing import Callable, Optional
from ...player_signal import PlayerSignal


class MediaPlaybackError(RuntimeError):
    """Raised when the player refuses to start playback"""


class IMediaPlayer(ABC):
    """Media playback primitive interface"""
    @abstractmethod
    def load(self, location: str) -> None:
        """Binds a new source; live state (duration, position) is discarded"""
        pass

    @property
    @abstractmethod
    def position(self) -> float:
        """Current playback position in seconds"""
        pass

    @position.setter
    @abstractmethod
    def position(self, seconds: float) -> None:
        pass

    @property
    @abstractmethod
    def duration(self) -> Optional[float]:
        """Reported duration, None until metadata is loaded; may change over time"""
        pass

    @property
    @abstractmethod
    def seekable_end(self) -> Optional[float]:
        """Upper bound of the seekable range"""
        pass

    @property
    def has_metadata(self) -> bool:
        return self.duration is not None

    @abstractmethod
    def play(self) -> None:
        """Starts playback, raises MediaPlaybackError if refused"""
        pass

    @abstractmethod
    def pause(self) -> None:
        pass

    @abstractmethod
    def subscribe(self, signal: PlayerSignal, callback: Callable[[], None]) -> Callable[[], None]:
        """Registers a lifecycle callback and returns its unsubscribe function"""
        pass
