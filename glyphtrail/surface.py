# Persistent drawing surface sized to the window and its pixel density.

import logging
import math
from dataclasses import dataclass
from typing import Optional

from PyQt5 import QtCore, QtGui

logger = logging.getLogger(__name__)

MIN_PIXEL_RATIO = 1.0
MAX_PIXEL_RATIO = 2.0


@dataclass(frozen=True)
class SurfaceGeometry:
    width: int; height: int                  # Logical (display) size
    pixel_ratio: float
    backing_width: int; backing_height: int  # Image resolution in device pixels


def clamp_pixel_ratio(ratio: Optional[float]) -> float:
    """Clamp a device pixel ratio to [1, 2]; missing or bogus values become 1."""
    if not ratio or math.isnan(ratio):
        return MIN_PIXEL_RATIO
    return max(MIN_PIXEL_RATIO, min(MAX_PIXEL_RATIO, float(ratio)))


def compute_geometry(width: float, height: float, ratio: Optional[float] = None) -> SurfaceGeometry:
    dpr = clamp_pixel_ratio(ratio)
    w = max(0, math.floor(width)); h = max(0, math.floor(height))
    return SurfaceGeometry(w, h, dpr, math.floor(w * dpr), math.floor(h * dpr))


class SurfaceManager:
    """Owns the off-screen image the trail accumulates on.

    Frames are painted into the image and never cleared, which is what lets
    the low-alpha fade overlay leave trails behind.
    """

    def __init__(self, background: Optional[QtGui.QColor] = None):
        self.background = QtGui.QColor(background) if background is not None else QtGui.QColor(7, 10, 18)
        self.geometry = compute_geometry(0, 0, 1.0)
        self.image = QtGui.QImage()

    @property
    def width(self) -> int:
        return self.geometry.width

    @property
    def height(self) -> int:
        return self.geometry.height

    @property
    def display_size(self) -> QtCore.QSize:
        return QtCore.QSize(self.geometry.width, self.geometry.height)

    def resize(self, width: float, height: float, ratio: Optional[float] = None) -> SurfaceGeometry:
        geo = compute_geometry(width, height, ratio)
        self.geometry = geo
        self.image = QtGui.QImage(
            max(1, geo.backing_width), max(1, geo.backing_height),
            QtGui.QImage.Format_ARGB32_Premultiplied,
        )
        self.image.fill(self.background)
        logger.debug("Surface resized to %dx%d @%.2fx (backing %dx%d)",
                     geo.width, geo.height, geo.pixel_ratio, geo.backing_width, geo.backing_height)
        return geo

    def begin(self) -> QtGui.QPainter:
        """Open a painter on the surface that draws in logical coordinates."""
        painter = QtGui.QPainter(self.image)
        painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
        painter.scale(self.geometry.pixel_ratio, self.geometry.pixel_ratio)
        return painter
