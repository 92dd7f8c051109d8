# Rev 0.2.0
# taskManager — single-screen task list
# Top bar: theme switch | clear all ; add row: name | priority | Add ; list of TaskRow

from __future__ import annotations
import logging
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton,
    QLineEdit, QComboBox, QLabel, QCheckBox, QListWidget, QListWidgetItem,
    QStackedWidget, QMessageBox, QDockWidget, QFrame
)

from ..models.entities import Priority, Task
from ..viewmodels.tasks_viewmodel import TasksViewModel
from ..utils.config import load_settings, save_settings
from .diagnostics_panel import DiagnosticsPanel
from .task_row import TaskRow
from .theme import apply_theme

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(
        self,
        vm: TasksViewModel,
        *,
        logfile: Path | None = None,
        settings_path: Path | None = None,
        parent=None,
    ):
        super().__init__(parent)
        self._vm = vm
        self._settings_path = settings_path
        self._settings = load_settings(settings_path)

        self.setWindowTitle("Task Manager")
        mw = self._settings["main_window"]
        self.resize(int(mw.get("width", 560)), int(mw.get("height", 720)))

        # ---------- Top bar ----------
        self._theme_icon = QLabel(self)
        self._chk_dark = QCheckBox("Dark mode", self)
        self._chk_dark.setChecked(vm.is_dark)
        self._chk_dark.toggled.connect(self._vm.set_dark_mode)

        self._btn_clear = QPushButton("Clear all", self)
        self._btn_clear.setToolTip("Clear all tasks")
        self._btn_clear.clicked.connect(self._on_clear_clicked)

        top_bar = QHBoxLayout()
        top_bar.addStretch(1)
        top_bar.addWidget(self._theme_icon)
        top_bar.addWidget(self._chk_dark)
        top_bar.addWidget(self._btn_clear)

        # ---------- Add row ----------
        self._edit_name = QLineEdit(self)
        self._edit_name.setPlaceholderText("Enter task name")
        self._edit_name.returnPressed.connect(self._on_add)

        self._cmb_priority = QComboBox(self)
        for p in Priority:
            self._cmb_priority.addItem(p.label, p.value)
        self._cmb_priority.currentIndexChanged.connect(self._on_priority_selected)

        self._btn_add = QPushButton("Add", self)
        self._btn_add.clicked.connect(self._on_add)

        add_row = QHBoxLayout()
        add_row.addWidget(self._edit_name, 1)
        add_row.addWidget(self._cmb_priority)
        add_row.addWidget(self._btn_add)

        # ---------- Caption ----------
        caption = QHBoxLayout()
        caption.addWidget(QLabel("Tasks list", self))
        caption.addStretch(1)
        caption.addWidget(QLabel("Sorted: High → Low, incomplete first", self))

        rule = QFrame(self)
        rule.setFrameShape(QFrame.HLine)

        # ---------- List / empty state ----------
        self._list = QListWidget(self)
        self._list.setSelectionMode(QListWidget.SingleSelection)
        self._list.setAlternatingRowColors(True)

        self._empty = QLabel("No tasks yet. Add one!", self)
        self._empty.setObjectName("EmptyState")
        self._empty.setAlignment(Qt.AlignCenter)

        self._stack = QStackedWidget(self)
        self._stack.addWidget(self._empty)
        self._stack.addWidget(self._list)

        central = QWidget(self)
        root = QVBoxLayout(central)
        root.setContentsMargins(12, 10, 12, 10)
        root.addLayout(top_bar)
        root.addLayout(add_row)
        root.addLayout(caption)
        root.addWidget(rule)
        root.addWidget(self._stack, 1)
        self.setCentralWidget(central)

        # ---------- Diagnostics dock ----------
        self._dock = QDockWidget("Diagnostics", self)
        self._dock.setObjectName("DiagnosticsDock")
        self._dock.setAllowedAreas(Qt.BottomDockWidgetArea | Qt.TopDockWidgetArea)
        self._dock.setWidget(DiagnosticsPanel(logfile, self))
        self.addDockWidget(Qt.BottomDockWidgetArea, self._dock)
        self._dock.setVisible(bool(self._settings["ui"].get("diagnostics_dock_visible", False)))
        view_menu = self.menuBar().addMenu("&View")
        view_menu.addAction(self._dock.toggleViewAction())

        # ---------- VM signals ----------
        self._vm.tasksReloaded.connect(self._render)
        self._vm.themeChanged.connect(self._on_theme_changed)

        self._sync_priority_combo()
        self._update_theme_icon(vm.is_dark)
        self._vm.reload()

    # ---------- Rendering ----------
    def _render(self, tasks: list[Task]) -> None:
        self._list.clear()
        for task in tasks:
            row = TaskRow(task, self._list)
            row.toggled.connect(self._vm.toggle_completed)
            row.priorityChosen.connect(self._vm.change_priority)
            row.deleteRequested.connect(self._vm.delete_task)
            item = QListWidgetItem(self._list)
            item.setData(Qt.UserRole, task.id)
            item.setSizeHint(row.sizeHint())
            self._list.setItemWidget(item, row)
        self._stack.setCurrentWidget(self._list if tasks else self._empty)
        self._btn_clear.setEnabled(self._vm.can_clear)

    def task_rows(self) -> list[TaskRow]:
        return [self._list.itemWidget(self._list.item(i)) for i in range(self._list.count())]

    def _selected_task_id(self) -> str | None:
        item = self._list.currentItem()
        return item.data(Qt.UserRole) if item is not None else None

    # ---------- Intents ----------
    def _on_add(self) -> None:
        if self._vm.add_task(self._edit_name.text()) is not None:
            self._edit_name.clear()
            self._sync_priority_combo()

    def _on_priority_selected(self, index: int) -> None:
        rank = self._cmb_priority.itemData(index)
        if rank is not None:
            self._vm.set_add_priority(Priority(int(rank)))

    def _sync_priority_combo(self) -> None:
        idx = self._cmb_priority.findData(self._vm.add_priority.value)
        if idx >= 0:
            self._cmb_priority.setCurrentIndex(idx)

    def _confirm_clear(self) -> bool:
        return QMessageBox.question(
            self, "Clear all tasks?", "This will delete all tasks permanently.",
            QMessageBox.Yes | QMessageBox.Cancel, QMessageBox.Cancel,
        ) == QMessageBox.Yes

    def _on_clear_clicked(self) -> None:
        if not self._vm.can_clear:
            return
        if self._confirm_clear():
            self._vm.clear_all()

    def keyPressEvent(self, ev):
        if ev.key() in (Qt.Key_Delete, Qt.Key_Backspace) and self._list.hasFocus():
            tid = self._selected_task_id()
            if tid is not None:
                self._vm.delete_task(tid)
                return
        super().keyPressEvent(ev)

    # ---------- Theme ----------
    def _on_theme_changed(self, dark: bool) -> None:
        app = QApplication.instance()
        if isinstance(app, QApplication):
            apply_theme(app, dark)
        self._update_theme_icon(dark)

    def _update_theme_icon(self, dark: bool) -> None:
        self._theme_icon.setText("🌙" if dark else "☀")

    # ---------- Lifecycle ----------
    def closeEvent(self, ev):
        self._settings["main_window"].update(width=self.width(), height=self.height())
        self._settings["ui"]["diagnostics_dock_visible"] = not self._dock.isHidden()
        try:
            save_settings(self._settings, self._settings_path)
        except OSError:
            log.exception("Could not save window settings")
        super().closeEvent(ev)
