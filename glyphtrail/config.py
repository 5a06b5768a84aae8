# Application identity and tuning constants.

import logging
from dataclasses import dataclass, field

from PyQt5 import QtCore, QtGui

from glyphtrail.modes import DrawMode

logger = logging.getLogger(__name__)

APP_NAME    = "GlyphTrail"
APP_VERSION = "1.0.0"
ORG_NAME    = "GlyphTrail"   # for QSettings
ORG_DOMAIN  = "glyphtrail.local"


# ------------------------- Config model -------------------------
@dataclass
class Config:
    background: QtGui.QColor = field(default_factory=lambda: QtGui.QColor(7, 10, 18))  # Night blue
    trail_fade_alpha: float = 0.12   # Lower value = longer trails
    max_particles: int = 1200        # Oldest particles are evicted past this
    spawn_step: float = 6.0          # Distance per spawned particle (lower = denser)
    damping: float = 0.985           # Velocity multiplier per frame
    max_frame_ms: float = 32.0       # Ceiling on frame delta after a stall
    frame_interval_ms: int = 16      # Timer interval (~60 FPS)
    start_hue: float = 210.0
    draw_mode: DrawMode = DrawMode.POINT

    # Only the last chosen mode is remembered between runs
    def save(self, s: QtCore.QSettings):
        s.setValue("draw_mode", self.draw_mode.value)

    @staticmethod
    def load(s: QtCore.QSettings) -> "Config":
        cfg = Config()
        draw_mode_str = s.value("draw_mode", cfg.draw_mode.value)
        try:
            cfg.draw_mode = DrawMode(draw_mode_str)
        except ValueError:
            logger.warning("Ignoring unknown stored draw mode %r", draw_mode_str)
            cfg.draw_mode = DrawMode.POINT
        return cfg
