"""
Main entry point for Stim Config.
Launches the channel configuration window.
"""

import sys

from PyQt5.QtWidgets import QApplication


def main():
    # Initialize logger first
    from stimconfig.utils.logger import log_level_from_env, logger, set_log_level
    from stimconfig.utils.app_paths import get_log_file_path

    try:
        level = log_level_from_env()
    except ValueError as e:
        level = None
        logger.warning("Ignoring log level setting", component="APP", details=str(e))
    if level is not None:
        set_log_level(level)

    log_file = get_log_file_path()
    if log_file is not None:
        logger.enable_file_logging(str(log_file))

    logger.info("=" * 40, component="APP")
    logger.info("Stim Config starting", component="APP",
                details=f"console level {logger.console_level.name}")
    logger.info("Click a channel to edit it; shift/ctrl-click to edit several", component="APP")
    logger.info("=" * 40, component="APP")

    app = QApplication(sys.argv)

    from stimconfig.gui.main_window import MainWindow

    window = MainWindow()
    window.show()

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
