import math

from PyQt5 import QtCore, QtGui

from glyphtrail.surface import SurfaceManager, clamp_pixel_ratio, compute_geometry


def test_geometry_at_double_density():
    geo = compute_geometry(800, 600, 2.0)
    assert (geo.width, geo.height) == (800, 600)
    assert (geo.backing_width, geo.backing_height) == (1600, 1200)
    assert geo.pixel_ratio == 2.0


def test_pixel_ratio_clamped():
    assert clamp_pixel_ratio(None) == 1.0
    assert clamp_pixel_ratio(0) == 1.0
    assert clamp_pixel_ratio(math.nan) == 1.0
    assert clamp_pixel_ratio(0.5) == 1.0
    assert clamp_pixel_ratio(1.5) == 1.5
    assert clamp_pixel_ratio(3.0) == 2.0


def test_fractional_sizes_floor():
    geo = compute_geometry(800.7, 600.2, 1.5)
    assert (geo.width, geo.height) == (800, 600)
    assert (geo.backing_width, geo.backing_height) == (1200, 900)


def test_resize_allocates_backing_image(qapp):
    surface = SurfaceManager()
    surface.resize(800, 600, 2.0)

    assert (surface.image.width(), surface.image.height()) == (1600, 1200)
    assert surface.display_size == QtCore.QSize(800, 600)
    assert surface.image.pixelColor(0, 0).rgb() == QtGui.QColor(7, 10, 18).rgb()


def test_painter_draws_in_logical_coordinates(qapp):
    surface = SurfaceManager()
    surface.resize(100, 100, 2.0)

    painter = surface.begin()
    painter.fillRect(QtCore.QRectF(0, 0, 10, 10), QtGui.QColor(255, 255, 255))
    painter.end()

    assert surface.image.pixelColor(19, 19).rgb() == QtGui.QColor(255, 255, 255).rgb()
    assert surface.image.pixelColor(21, 21).rgb() == QtGui.QColor(7, 10, 18).rgb()
