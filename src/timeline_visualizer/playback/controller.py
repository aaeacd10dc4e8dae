"""
Frame Loop

Drives the visualizer once per display frame (~60 FPS) from the Qt event
loop, measuring the wall-clock time between ticks.
"""

from typing import Optional, Callable
from PyQt6.QtCore import QObject, QTimer, QElapsedTimer, pyqtSignal

from ..logging import TimelineLog as Log

from ..constants import PLAYHEAD_UPDATE_INTERVAL_MS


class FrameLoop(QObject):
    """
    Per-frame ticker.

    Runs on the thread of its owner; ticks are serialized with pointer and
    wheel events by the Qt event queue. It keeps ticking until stop() is
    called or its owner is destroyed.

    Signals:
        frame(dt): Emitted every tick with the seconds since the previous tick
    """

    frame = pyqtSignal(float)

    def __init__(
        self,
        callback: Optional[Callable[[float], None]] = None,
        interval_ms: int = PLAYHEAD_UPDATE_INTERVAL_MS,
        parent=None
    ):
        super().__init__(parent)

        self._callback = callback
        self._interval_ms = interval_ms

        self._update_timer = QTimer(self)
        self._update_timer.setInterval(interval_ms)
        self._update_timer.timeout.connect(self._on_update_tick)

        self._elapsed_timer = QElapsedTimer()

    @property
    def is_running(self) -> bool:
        return self._update_timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def start(self):
        """Start ticking. The first tick uses the nominal frame interval as dt."""
        if self.is_running:
            return
        self._elapsed_timer.invalidate()
        self._update_timer.start()
        Log.debug(f"FrameLoop: started ({self._interval_ms}ms interval)")

    def stop(self):
        if not self.is_running:
            return
        self._update_timer.stop()
        Log.debug("FrameLoop: stopped")

    def next_dt(self) -> float:
        """Seconds since the previous tick (nominal interval on the first one)."""
        if not self._elapsed_timer.isValid():
            self._elapsed_timer.start()
            return self._interval_ms / 1000.0
        return self._elapsed_timer.restart() / 1000.0

    def _on_update_tick(self):
        """Handle timer tick"""
        dt = self.next_dt()
        self.frame.emit(dt)
        if self._callback:
            self._callback(dt)
