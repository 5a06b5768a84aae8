# glyphtrail/app.py
# Full-window particle trail that follows the mouse or a finger.
# - 1 / 2 / 3 pick Point, Line or Ring glyphs
# - Space cycles through the modes
# - The last chosen mode is remembered between runs
#
# Run: python -m glyphtrail

import logging
import os
import sys

from PyQt5 import QtCore, QtWidgets

from glyphtrail.config import APP_NAME, APP_VERSION, ORG_DOMAIN, ORG_NAME, Config
from glyphtrail.logging_config import setup_logging
from glyphtrail.overlay import TrailCanvas

logger = logging.getLogger(__name__)


def main():
    level = logging.DEBUG if os.environ.get("GLYPHTRAIL_DEBUG") else logging.INFO
    setup_logging(level)

    QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_EnableHighDpiScaling, True)
    QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_UseHighDpiPixmaps, True)
    app = QtWidgets.QApplication(sys.argv)
    app.setOrganizationName(ORG_NAME); app.setOrganizationDomain(ORG_DOMAIN); app.setApplicationName(APP_NAME)

    settings = QtCore.QSettings(QtCore.QSettings.UserScope, ORG_NAME, APP_NAME)
    cfg = Config.load(settings)
    logger.info("%s v%s starting in %s mode", APP_NAME, APP_VERSION, cfg.draw_mode.value)

    canvas = TrailCanvas(cfg, settings)
    canvas.showMaximized()

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
