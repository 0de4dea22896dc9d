"""Hand-off helpers between the UI thread and background workers.

``spawn`` starts blocking work off the UI thread; ``dispatch`` brings the
result back (``App.after(0, fn)`` in the GUI, a direct call otherwise).
"""
import threading
from typing import Callable

Task = Callable[[], None]
Dispatch = Callable[[Task], None]
Spawn = Callable[[Task], None]


def run_inline(fn: Task) -> None:
    fn()


def spawn_daemon(fn: Task) -> None:
    threading.Thread(target=fn, daemon=True).start()
