# Rev 0.2.0

# src/taskmanager/main.py
import sys
from PySide6.QtCore import Qt, QCoreApplication
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from .app_context import AppContext
from .ui.main_window import MainWindow
from .ui.theme import apply_theme
from .utils.config import AppConfig
from .utils.logging_setup import setup_logging, teardown_logging
from .utils.paths import ensure_dirs
from .viewmodels.tasks_viewmodel import TasksViewModel


def main() -> int:
    QGuiApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )
    app = QApplication(sys.argv)
    QCoreApplication.setOrganizationName("taskManager")
    QCoreApplication.setApplicationName("taskManager")

    config = AppConfig.from_env()
    ensure_dirs()
    logfile = setup_logging(config.log_level)

    # --- composition root ---
    ctx = AppContext.create(config)
    try:
        vm = TasksViewModel(ctx.store, ctx.theme)
        apply_theme(app, ctx.theme.is_dark)

        win = MainWindow(vm, logfile=logfile)
        win.show()
        app.setProperty("mainWindow", win)

        return app.exec()
    finally:
        ctx.close()
        teardown_logging()


if __name__ == "__main__":
    sys.exit(main())
