# The full-window canvas: wires Qt input, resize and timer events to the simulation.

import logging
import random
from typing import List, Optional, Tuple

from PyQt5 import QtCore, QtGui, QtWidgets

from glyphtrail.config import APP_NAME, Config
from glyphtrail.loop import FrameLoop
from glyphtrail.modes import DrawMode, ModeSelector
from glyphtrail.renderer import Renderer
from glyphtrail.simulation import TrailSimulation
from glyphtrail.surface import SurfaceManager

logger = logging.getLogger(__name__)

LABEL_STYLE = (
    "QLabel { color: rgba(230, 236, 255, 200); background: rgba(255, 255, 255, 18);"
    " border-radius: 6px; padding: 4px 10px; font-size: 13px; }"
)
TOUCH_EVENTS = (QtCore.QEvent.TouchBegin, QtCore.QEvent.TouchUpdate, QtCore.QEvent.TouchEnd)


class TrailCanvas(QtWidgets.QWidget):
    def __init__(self, cfg: Config, settings: Optional[QtCore.QSettings] = None,
                 rng: Optional[random.Random] = None, parent=None):
        super().__init__(parent)
        self.cfg = cfg
        self.settings = settings

        self.setWindowTitle(APP_NAME)
        self.setMouseTracking(True)  # Move events without a pressed button
        self.setAttribute(QtCore.Qt.WA_AcceptTouchEvents, True)
        self.setAttribute(QtCore.Qt.WA_OpaquePaintEvent, True)
        self.setFocusPolicy(QtCore.Qt.StrongFocus)

        self.simulation = TrailSimulation(cfg, rng=rng)
        self.surface = SurfaceManager(cfg.background)
        self.renderer = Renderer(cfg.background, cfg.trail_fade_alpha)

        self.modes = ModeSelector(cfg.draw_mode, self)
        self.mode_label = QtWidgets.QLabel(self.modes.label, self)
        self.mode_label.setStyleSheet(LABEL_STYLE)
        self.mode_label.setAttribute(QtCore.Qt.WA_TransparentForMouseEvents, True)
        self.mode_label.adjustSize()
        self.mode_label.move(12, 12)
        self.modes.label_changed.connect(self._on_label_changed)
        self.modes.mode_changed.connect(self._on_mode_changed)

        self.surface.resize(self.width(), self.height(), self.devicePixelRatioF())

        self.loop = FrameLoop(cfg.frame_interval_ms, self)
        self.loop.frame.connect(self.on_frame)
        self.loop.start()

    # ----- mode -----
    def _on_label_changed(self, text: str):
        self.mode_label.setText(text)
        self.mode_label.adjustSize()

    def _on_mode_changed(self, mode: DrawMode):
        self.cfg.draw_mode = mode
        if self.settings is not None:
            self.cfg.save(self.settings)  # Persist the change

    # ----- frame -----
    def on_frame(self, dt: float):
        drawn = self.simulation.step(dt)
        painter = self.surface.begin()
        try:
            self.renderer.render(painter, drawn, self.modes.mode, self.surface.width, self.surface.height)
        finally:
            painter.end()
        self.update()

    # ----- Qt events -----
    def resizeEvent(self, ev: QtGui.QResizeEvent):
        self.surface.resize(ev.size().width(), ev.size().height(), self.devicePixelRatioF())
        super().resizeEvent(ev)

    def mouseMoveEvent(self, ev: QtGui.QMouseEvent):
        pos = ev.localPos()
        self.simulation.on_move(pos.x(), pos.y())

    def event(self, ev: QtCore.QEvent) -> bool:
        kind = ev.type()
        if kind in TOUCH_EVENTS:
            self._on_touch(kind, [(p.pos().x(), p.pos().y()) for p in ev.touchPoints()])
            ev.accept()
            return True
        return super().event(ev)

    def _on_touch(self, kind: QtCore.QEvent.Type, positions: List[Tuple[float, float]]) -> int:
        """Feed a touch event's local positions; returns the particles spawned."""
        if kind == QtCore.QEvent.TouchBegin:
            # A new touch starts a new path, not a jump from the last one
            self.simulation.tracker.reset()
        if not positions or kind == QtCore.QEvent.TouchEnd:
            return 0
        x, y = positions[0]  # Only the first finger drives the trail
        return self.simulation.on_move(x, y)

    def keyPressEvent(self, ev: QtGui.QKeyEvent):
        if self.modes.handle_key(ev.key()):
            ev.accept()
            return
        super().keyPressEvent(ev)

    def paintEvent(self, ev: QtGui.QPaintEvent):
        painter = QtGui.QPainter(self)
        painter.drawImage(QtCore.QRectF(0, 0, self.surface.width, self.surface.height), self.surface.image)
        painter.end()

    def closeEvent(self, ev: QtGui.QCloseEvent):
        self.loop.stop()
        super().closeEvent(ev)
