# Rev 0.2.0

# ui/theme.py
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

from ..models.entities import Priority

ACCENT = QColor(63, 81, 181)  # indigo

PRIORITY_COLORS = {
    Priority.HIGH: "#ef5350",
    Priority.MEDIUM: "#ffa726",
    Priority.LOW: "#66bb6a",
}


def _dark_palette() -> QPalette:
    p = QPalette()
    base, window, text = QColor(30, 30, 34), QColor(45, 45, 50), QColor(230, 230, 235)
    p.setColor(QPalette.Window, window)
    p.setColor(QPalette.WindowText, text)
    p.setColor(QPalette.Base, base)
    p.setColor(QPalette.AlternateBase, window)
    p.setColor(QPalette.ToolTipBase, window)
    p.setColor(QPalette.ToolTipText, text)
    p.setColor(QPalette.Text, text)
    p.setColor(QPalette.Button, window)
    p.setColor(QPalette.ButtonText, text)
    p.setColor(QPalette.Highlight, ACCENT)
    p.setColor(QPalette.HighlightedText, QColor(255, 255, 255))
    p.setColor(QPalette.PlaceholderText, QColor(140, 140, 150))
    p.setColor(QPalette.Disabled, QPalette.Text, QColor(120, 120, 125))
    p.setColor(QPalette.Disabled, QPalette.ButtonText, QColor(120, 120, 125))
    return p


def apply_theme(app: QApplication, dark: bool) -> None:
    """Fusion style with a dark or light palette."""
    app.setStyle("Fusion")
    if dark:
        app.setPalette(_dark_palette())
    else:
        pal = app.style().standardPalette()
        pal.setColor(QPalette.Highlight, ACCENT)
        app.setPalette(pal)
