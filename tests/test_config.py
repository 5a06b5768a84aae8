import logging

from PyQt5 import QtCore

from glyphtrail.config import Config
from glyphtrail.logging_config import setup_logging
from glyphtrail.modes import DrawMode


def make_settings(tmp_path):
    return QtCore.QSettings(str(tmp_path / "glyphtrail.ini"), QtCore.QSettings.IniFormat)


def test_defaults(qapp, tmp_path):
    cfg = Config.load(make_settings(tmp_path))
    assert cfg.draw_mode == DrawMode.POINT
    assert cfg.max_particles == 1200
    assert cfg.spawn_step == 6.0
    assert cfg.damping == 0.985
    assert cfg.max_frame_ms == 32.0
    assert cfg.background.getRgb()[:3] == (7, 10, 18)


def test_draw_mode_round_trips(qapp, tmp_path):
    settings = make_settings(tmp_path)
    Config(draw_mode=DrawMode.RING).save(settings)
    assert Config.load(settings).draw_mode == DrawMode.RING


def test_unknown_draw_mode_falls_back(qapp, tmp_path):
    settings = make_settings(tmp_path)
    settings.setValue("draw_mode", "spiral")
    assert Config.load(settings).draw_mode == DrawMode.POINT


def test_setup_logging_does_not_stack_handlers(tmp_path):
    log_file = tmp_path / "glyphtrail.log"
    setup_logging(logging.DEBUG)
    setup_logging(logging.DEBUG, str(log_file))

    logger = logging.getLogger("glyphtrail")
    assert len(logger.handlers) == 2
    logging.getLogger("glyphtrail.modes").debug("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
