"""Main entry point for the A* grid pathfinding visualizer."""

import logging
import os
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from .config import load_config

logger = logging.getLogger(__name__)


def _configure_logging(level_name: str):
    numeric_level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def main():
    """Main entry point for the application."""
    config = load_config()
    _configure_logging(config.log_level)

    # Set environment variables to fix DPI scaling issues on macOS
    os.environ.setdefault('QT_AUTO_SCREEN_SCALE_FACTOR', '0')
    os.environ.setdefault('QT_SCALE_FACTOR', '1')
    os.environ.setdefault('QT_SCREEN_SCALE_FACTORS', '1')
    os.environ.setdefault('QT_DEVICE_PIXEL_RATIO', '1')
    os.environ.setdefault('QT_LOGGING_RULES', 'qt.qpa.backingstore=false')

    # Set high DPI policy before creating QApplication to disable scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(Qt.HighDpiScaleFactorRoundingPolicy.Floor)

    app = QApplication(sys.argv)
    app.setApplicationName("A* Pathfinding")
    app.setApplicationVersion("1.0.0")

    # Import UI components (after QApplication is created)
    from .app.audio import CuePlayer
    from .app.controller import GridController, PLACE_CUE, RESET_CUE
    from .ui.main_window import MainWindow

    cue_player = None

    try:
        cue_player = CuePlayer(
            {PLACE_CUE: config.place_sound, RESET_CUE: config.reset_sound},
            base_dir=Path.cwd(),
        )
        controller = GridController(config, cue_player)
        window = MainWindow(controller)

        window.show()
        return app.exec()

    except Exception:
        logger.exception("Application error")
        return 1

    finally:
        if cue_player is not None:
            cue_player.stop_all()


if __name__ == "__main__":
    sys.exit(main())
