# Drawing the trail: background fade, glow layer and the mode-specific glyph.

import math
from typing import Iterable, Optional, Tuple

from PyQt5 import QtCore, QtGui

from glyphtrail.modes import DrawMode
from glyphtrail.particles import Particle

SATURATION       = 0.95
GLOW_LIGHTNESS   = 0.65
GLYPH_LIGHTNESS  = 0.72
GLOW_RADIUS      = 4.2    # Glow radius as a multiple of glyph size
GLOW_ALPHA       = 0.22
RING_RADIUS      = 1.8
RING_WIDTH       = 0.55
LINE_WIDTH       = 0.7


def glyph_metrics(p: Particle) -> Tuple[float, float]:
    """Return ``(alpha, scaled_size)`` for a particle.

    Alpha eases quadratically with remaining life; size grows slightly as
    the particle ages.
    """
    t = max(0.0, p.life / p.max_life)
    alpha = t * t
    s = p.size * (0.6 + (1 - t) * 0.8)
    return alpha, s


def hsla(hue: float, lightness: float, alpha: float) -> QtGui.QColor:
    return QtGui.QColor.fromHslF((hue % 360.0) / 360.0, SATURATION, lightness,
                                 max(0.0, min(1.0, alpha)))


class Renderer:
    def __init__(self, background: Optional[QtGui.QColor] = None, fade_alpha: float = 0.12):
        self.fade_color = QtGui.QColor(background) if background is not None else QtGui.QColor(7, 10, 18)
        self.fade_color.setAlphaF(fade_alpha)

    def fade_background(self, painter: QtGui.QPainter, width: float, height: float):
        """Partially erase the previous frame; the alpha sets trail length."""
        painter.setCompositionMode(QtGui.QPainter.CompositionMode_SourceOver)
        painter.fillRect(QtCore.QRectF(0, 0, width, height), self.fade_color)

    def draw_particle(self, painter: QtGui.QPainter, p: Particle, mode: DrawMode):
        alpha, s = glyph_metrics(p)
        center = QtCore.QPointF(p.x, p.y)

        # Glow layer
        painter.setPen(QtCore.Qt.NoPen)
        painter.setBrush(QtGui.QBrush(hsla(p.hue, GLOW_LIGHTNESS, alpha * GLOW_ALPHA)))
        painter.drawEllipse(center, s * GLOW_RADIUS, s * GLOW_RADIUS)

        color = hsla(p.hue, GLYPH_LIGHTNESS, alpha)
        if mode == DrawMode.POINT:
            painter.setBrush(QtGui.QBrush(color))
            painter.drawEllipse(center, s, s)
        elif mode == DrawMode.RING:
            pen = QtGui.QPen(color)
            pen.setWidthF(max(1.0, s * RING_WIDTH))
            painter.setPen(pen)
            painter.setBrush(QtCore.Qt.NoBrush)
            painter.drawEllipse(center, s * RING_RADIUS, s * RING_RADIUS)
        elif mode == DrawMode.LINE:
            pen = QtGui.QPen(color)
            pen.setWidthF(max(1.0, s * LINE_WIDTH))
            pen.setCapStyle(QtCore.Qt.RoundCap)
            painter.setPen(pen)
            painter.drawLine(QtCore.QPointF(p.px, p.py), center)

    def render(self, painter: QtGui.QPainter, particles: Iterable[Particle], mode: DrawMode,
               width: float, height: float):
        """Paint one frame: fade overlay, then every particle additively."""
        self.fade_background(painter, width, height)

        painter.setCompositionMode(QtGui.QPainter.CompositionMode_Plus)
        for p in particles:
            self.draw_particle(painter, p, mode)
        painter.setCompositionMode(QtGui.QPainter.CompositionMode_SourceOver)
