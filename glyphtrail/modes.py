# Drawing modes and the selector that cycles through them.

import logging
from enum import Enum
from typing import Optional, Tuple

from PyQt5 import QtCore

logger = logging.getLogger(__name__)


class DrawMode(Enum):
    POINT = "point"
    LINE = "line"
    RING = "ring"


# Fixed cycle order used by set_mode()/advance()
MODES: Tuple[DrawMode, ...] = (DrawMode.POINT, DrawMode.LINE, DrawMode.RING)

MODE_LABELS = {
    DrawMode.POINT: "Point",
    DrawMode.LINE: "Line",
    DrawMode.RING: "Ring",
}

ADVANCE = "advance"

# Qt key code -> mode index, or ADVANCE for the cycle key
KEY_BINDINGS = {
    QtCore.Qt.Key_1: 0,
    QtCore.Qt.Key_2: 1,
    QtCore.Qt.Key_3: 2,
    QtCore.Qt.Key_Space: ADVANCE,
}


def mode_for_key(key: int):
    """Return the mode index bound to ``key``, ADVANCE, or None if unbound."""
    return KEY_BINDINGS.get(key)


class ModeSelector(QtCore.QObject):
    """Holds the active drawing mode and announces changes to the label."""
    mode_changed = QtCore.pyqtSignal(DrawMode)
    label_changed = QtCore.pyqtSignal(str)

    def __init__(self, mode: DrawMode = DrawMode.POINT, parent: Optional[QtCore.QObject] = None):
        super().__init__(parent)
        self._index = MODES.index(mode)

    @property
    def index(self) -> int:
        return self._index

    @property
    def mode(self) -> DrawMode:
        return MODES[self._index]

    @property
    def label(self) -> str:
        return MODE_LABELS[self.mode]

    def set_mode(self, i: int) -> DrawMode:
        # Python's % already wraps negatives forward (-1 -> 2)
        self._index = i % len(MODES)
        mode = self.mode
        logger.info("Draw mode set to %s", mode.value)
        self.mode_changed.emit(mode)
        self.label_changed.emit(self.label)
        return mode

    def advance(self) -> DrawMode:
        return self.set_mode(self._index + 1)

    def handle_key(self, key: int) -> bool:
        """Apply the binding for ``key``; returns False when the key is unbound."""
        action = mode_for_key(key)
        if action is None:
            return False
        if action == ADVANCE:
            self.advance()
        else:
            self.set_mode(action)
        return True
