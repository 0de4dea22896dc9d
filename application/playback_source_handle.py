"""Single-owner handle for the player's active source"""
from typing import Callable, Optional
from domain import PlaybackSource, ILogger


class PlaybackSourceHandle:
    """Owns exactly one PlaybackSource and frees local copies it replaces"""

    def __init__(self, release_local: Callable[[str], None], logger: Optional[ILogger] = None):
        self._release_local = release_local
        self.logger = logger
        self._current: Optional[PlaybackSource] = None

    @property
    def current(self) -> Optional[PlaybackSource]:
        return self._current

    def replace(self, source: PlaybackSource) -> bool:
        """Installs ``source`` and releases the previous local copy. Returns False if unchanged"""
        if source == self._current:
            return False
        previous, self._current = self._current, source
        self._release(previous)
        return True

    def release(self) -> None:
        """Drops the current source, freeing it if it is a local copy"""
        previous, self._current = self._current, None
        self._release(previous)

    def _release(self, source: Optional[PlaybackSource]) -> None:
        if source is None or not source.is_local:
            return
        try:
            self._release_local(source.location)
        except OSError as e:
            if self.logger:
                self.logger.warning(f"Could not release local copy {source.location}: {e}")
