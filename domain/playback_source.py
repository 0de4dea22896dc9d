from dataclasses import dataclass


@dataclass(frozen=True)
class PlaybackSource:
    """Entity: The media location currently bound to the player"""
    location: str
    is_local: bool = False

    def __post_init__(self):
        """Validates data"""
        if not self.location:
            raise ValueError("Playback source location cannot be empty")

    @classmethod
    def remote(cls, url: str) -> "PlaybackSource":
        return cls(location=url, is_local=False)

    @classmethod
    def local(cls, path: str) -> "PlaybackSource":
        return cls(location=path, is_local=True)
