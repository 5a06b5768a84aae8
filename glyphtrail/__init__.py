"""GlyphTrail: a pointer-driven particle trail drawn with PyQt5."""
from glyphtrail.config import APP_NAME, APP_VERSION, Config
from glyphtrail.modes import DrawMode, ModeSelector
from glyphtrail.simulation import TrailSimulation

__all__ = ["APP_NAME", "APP_VERSION", "Config", "DrawMode", "ModeSelector", "TrailSimulation"]
