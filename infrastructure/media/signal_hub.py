"""Per-player signal fan-out"""
from collections import defaultdict
from typing import Callable, DefaultDict, List

from domain import PlayerSignal

Callback = Callable[[], None]


class SignalHub:
    """Keeps lifecycle subscribers and calls them on the emitting thread"""

    def __init__(self):
        self._subscribers: DefaultDict[PlayerSignal, List[Callback]] = defaultdict(list)

    def subscribe(self, signal: PlayerSignal, callback: Callback) -> Callable[[], None]:
        self._subscribers[signal].append(callback)

        def unsubscribe() -> None:
            callbacks = self._subscribers[signal]
            if callback in callbacks:
                callbacks.remove(callback)

        return unsubscribe

    def emit(self, signal: PlayerSignal) -> None:
        for callback in list(self._subscribers[signal]):
            callback()
