# taskManager diagnostics panel
# Rev 0.2.0

from __future__ import annotations
from pathlib import Path

from PySide6.QtWidgets import QWidget, QVBoxLayout, QTextEdit, QPushButton

TAIL_BYTES = 64_000


class DiagnosticsPanel(QWidget):
    """Simple log viewer with manual refresh."""
    def __init__(self, logfile: Path | None, parent=None):
        super().__init__(parent)
        self.setObjectName("DiagnosticsPanel")
        self._logfile = logfile

        layout = QVBoxLayout(self)
        self.text = QTextEdit(self)
        self.text.setReadOnly(True)
        self.text.setLineWrapMode(QTextEdit.NoWrap)

        self.btn_refresh = QPushButton("Tail Log", self)
        self.btn_refresh.clicked.connect(self.refresh)

        layout.addWidget(self.text)
        layout.addWidget(self.btn_refresh)

        self.refresh()

    def refresh(self):
        """Reload the tail of the log file into the panel."""
        if self._logfile is None:
            self.text.setPlainText("<logging to file is not configured>")
            return
        try:
            with open(self._logfile, "rb") as f:
                f.seek(0, 2)
                size = f.tell()
                f.seek(max(0, size - TAIL_BYTES))
                self.text.setPlainText(f.read().decode("utf-8", errors="ignore"))
        except OSError as e:
            self.text.setPlainText(f"<error reading log>\n{e}")
