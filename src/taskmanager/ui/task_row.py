# Rev 0.2.0 — one list row: checkbox | name + added | priority chip | menu
from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QWidget, QHBoxLayout, QVBoxLayout, QCheckBox, QLabel, QToolButton, QMenu
)

from ..models.entities import Priority, Task
from ..viewmodels.tasks_viewmodel import TasksViewModel
from .theme import PRIORITY_COLORS


class TaskRow(QWidget):
    toggled = Signal(str)
    priorityChosen = Signal(str, object)
    deleteRequested = Signal(str)

    def __init__(self, task: Task, parent=None):
        super().__init__(parent)
        self.task_id = task.id

        self._check = QCheckBox(self)
        self._check.setChecked(task.completed)
        self._check.toggled.connect(lambda _on: self.toggled.emit(self.task_id))

        self._name = QLabel(task.name, self)
        self._name.setObjectName("TaskName")
        font = self._name.font()
        font.setStrikeOut(task.completed)
        if font.pointSizeF() > 0:
            font.setPointSizeF(font.pointSizeF() * 1.15)
        self._name.setFont(font)

        self._added = QLabel(TasksViewModel.format_added(task), self)
        self._added.setObjectName("TaskAdded")
        small = self._added.font()
        if small.pointSizeF() > 0:
            small.setPointSizeF(small.pointSizeF() * 0.85)
        self._added.setFont(small)

        self._chip = QLabel(task.priority.label, self)
        self._chip.setObjectName("PriorityChip")
        self._chip.setAlignment(Qt.AlignCenter)
        self._chip.setStyleSheet(
            f"background:{PRIORITY_COLORS[task.priority]}; color:white;"
            " border-radius:9px; padding:2px 10px;"
        )

        self._menu_btn = QToolButton(self)
        self._menu_btn.setText("⋮")
        self._menu_btn.setPopupMode(QToolButton.InstantPopup)
        self._menu_btn.setMenu(self._build_menu())

        text_col = QVBoxLayout()
        text_col.setSpacing(0)
        text_col.addWidget(self._name)
        text_col.addWidget(self._added)

        lay = QHBoxLayout(self)
        lay.setContentsMargins(8, 4, 8, 4)
        lay.addWidget(self._check)
        lay.addLayout(text_col, 1)
        lay.addWidget(self._chip)
        lay.addWidget(self._menu_btn)

    def _build_menu(self) -> QMenu:
        menu = QMenu(self)
        for p in TasksViewModel.priority_choices():
            act = menu.addAction(f"Set {p.label}")
            act.triggered.connect(lambda _=False, p=p: self.priorityChosen.emit(self.task_id, p))
        menu.addSeparator()
        act_del = menu.addAction("Delete")
        act_del.triggered.connect(lambda _=False: self.deleteRequested.emit(self.task_id))
        return menu

    # read-back accessors for the list view
    def is_checked(self) -> bool:
        return self._check.isChecked()

    def name_text(self) -> str:
        return self._name.text()

    def chip_text(self) -> str:
        return self._chip.text()
