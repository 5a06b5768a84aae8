# Self-rearming frame loop driven by a Qt timer and a monotonic clock.

import logging
from typing import Optional

from PyQt5 import QtCore

logger = logging.getLogger(__name__)


class FrameLoop(QtCore.QObject):
    """Emits ``frame(dt_ms)`` roughly every ``interval_ms`` until stopped."""
    frame = QtCore.pyqtSignal(float)

    def __init__(self, interval_ms: int = 16, parent: Optional[QtCore.QObject] = None):
        super().__init__(parent)
        self.clock = QtCore.QElapsedTimer()
        self._last: Optional[float] = None

        self.timer = QtCore.QTimer(self)
        self.timer.setTimerType(QtCore.Qt.PreciseTimer)
        self.timer.setInterval(interval_ms)
        self.timer.timeout.connect(self._on_timeout)

    @property
    def active(self) -> bool:
        return self.timer.isActive()

    def start(self):
        if self.timer.isActive():
            return
        self.clock.start()
        self._last = 0.0
        self.timer.start()
        logger.debug("Frame loop started (%d ms)", self.timer.interval())

    def stop(self):
        if not self.timer.isActive():
            return
        self.timer.stop()
        self._last = None
        logger.debug("Frame loop stopped")

    def tick(self, now_ms: float) -> float:
        """Return the time since the previous tick and remember ``now_ms``."""
        dt = 0.0 if self._last is None else now_ms - self._last
        self._last = now_ms
        return dt

    def _on_timeout(self):
        now = self.clock.nsecsElapsed() / 1e6
        self.frame.emit(self.tick(now))
