from enum import Enum


class PlayerSignal(Enum):
    """Lifecycle signals a media player emits"""
    METADATA_READY = "loadedmetadata"
    DURATION_CHANGE = "durationchange"
    PROGRESS = "progress"
    POSITION_UPDATE = "timeupdate"


METADATA_SIGNALS = (
    PlayerSignal.METADATA_READY,
    PlayerSignal.DURATION_CHANGE,
    PlayerSignal.PROGRESS,
)
