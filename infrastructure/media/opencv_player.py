"""
OpenCV-backed media player.

Public API
----------
load(location)      opens a file path or URL in the background
tick()              advances one frame while playing; call from the UI loop
position            read/write, seconds
duration            None until opened; may grow while playing
play() / pause()
current_frame()     latest RGB frame (HxWx3 uint8) or None
"""
import math
from typing import Callable, Optional

import cv2

from domain import IMediaPlayer, ILogger, MediaPlaybackError, PlayerSignal
from infrastructure.scheduling import Dispatch, Spawn, run_inline, spawn_daemon
from infrastructure.localization import _
from .signal_hub import SignalHub

DEFAULT_FPS = 25.0


class OpenCVMediaPlayer(IMediaPlayer):
    def __init__(
        self,
        dispatch: Dispatch = run_inline,
        spawn: Spawn = spawn_daemon,
        logger: Optional[ILogger] = None,
        capture_factory: Callable[[str], "cv2.VideoCapture"] = cv2.VideoCapture
    ):
        self.dispatch = dispatch
        self.spawn = spawn
        self.logger = logger
        self.capture_factory = capture_factory
        self.signals = SignalHub()
        self.location = ""
        self.fps = DEFAULT_FPS
        self._cap = None
        self._load_generation = 0
        self._duration: Optional[float] = None
        self._position = 0.0
        self._playing = False
        self._frame = None

    # IMediaPlayer
    def subscribe(self, signal: PlayerSignal, callback: Callable[[], None]) -> Callable[[], None]:
        return self.signals.subscribe(signal, callback)

    def load(self, location: str) -> None:
        self._release_capture()
        self._load_generation += 1
        generation = self._load_generation
        self.location = location
        self._duration = None
        self._position = 0.0
        self._playing = False
        self._frame = None

        def worker():
            cap = self.capture_factory(location)
            self.dispatch(lambda: self._on_opened(generation, cap))

        self.spawn(worker)

    @property
    def position(self) -> float:
        return self._position

    @position.setter
    def position(self, seconds: float) -> None:
        seconds = max(0.0, seconds)
        if self._cap is not None:
            self._cap.set(cv2.CAP_PROP_POS_MSEC, seconds * 1000)
            self._read_frame()
        self._position = seconds
        self.signals.emit(PlayerSignal.POSITION_UPDATE)

    @property
    def duration(self) -> Optional[float]:
        return self._duration

    @property
    def seekable_end(self) -> Optional[float]:
        return self._duration

    @property
    def is_playing(self) -> bool:
        return self._playing

    def play(self) -> None:
        if self._cap is None:
            raise MediaPlaybackError(_("player_not_ready"))
        self._playing = True

    def pause(self) -> None:
        self._playing = False

    # frame loop
    @property
    def frame_interval_ms(self) -> int:
        return max(10, int(1000 / self.fps))

    def tick(self) -> None:
        """Reads the next frame while playing and reports the new position"""
        if not self._playing or self._cap is None:
            return
        if not self._read_frame():
            self._playing = False
            return
        self._position = self._cap.get(cv2.CAP_PROP_POS_MSEC) / 1000.0
        if self._duration is not None and math.isfinite(self._duration) and self._position > self._duration:
            # Container under-reported its length
            self._duration = self._position
            self.signals.emit(PlayerSignal.DURATION_CHANGE)
            self.signals.emit(PlayerSignal.PROGRESS)
        self.signals.emit(PlayerSignal.POSITION_UPDATE)

    def current_frame(self):
        return self._frame

    def close(self) -> None:
        self._load_generation += 1
        self._release_capture()
        self._duration = None
        self._playing = False

    # internals
    def _on_opened(self, generation: int, cap) -> None:
        if generation != self._load_generation:
            cap.release()
            return
        if not cap.isOpened():
            cap.release()
            if self.logger:
                self.logger.error(_("player_open_failed", location=self.location))
            return
        self._cap = cap
        fps = cap.get(cv2.CAP_PROP_FPS)
        self.fps = fps if fps and fps > 0 else DEFAULT_FPS
        frame_count = cap.get(cv2.CAP_PROP_FRAME_COUNT)
        self._duration = frame_count / self.fps if frame_count and frame_count > 0 else math.inf
        self._read_frame()
        cap.set(cv2.CAP_PROP_POS_FRAMES, 0)
        self.signals.emit(PlayerSignal.METADATA_READY)
        self.signals.emit(PlayerSignal.DURATION_CHANGE)
        self.signals.emit(PlayerSignal.PROGRESS)

    def _read_frame(self) -> bool:
        ret, frame = self._cap.read()
        if not ret or frame is None:
            return False
        self._frame = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        return True

    def _release_capture(self) -> None:
        if self._cap is not None:
            self._cap.release()
            self._cap = None
