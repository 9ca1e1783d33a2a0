"""Seed word input with keyboard-driven suggestion navigation."""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QGuiApplication, QKeyEvent, QKeySequence
from PySide6.QtWidgets import QLineEdit, QWidget


class WordInput(QLineEdit):
    """A ``QLineEdit`` for one seed slot.

    Suggestion state lives in the owning panel; this widget only reports
    intent:

    Signals:
        navigate(int)      — +1 for Down, -1 for Up
        commit_requested() — Enter / Tab while suggestions are shown
        pasted(str)        — clipboard text, for bulk paste handling
    """

    navigate = Signal(int)
    commit_requested = Signal()
    pasted = Signal(str)

    def __init__(self, slot: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.slot = slot
        self.suggesting = False
        self.setPlaceholderText(f"word {slot + 1}")

    def set_invalid(self, invalid: bool) -> None:
        """Flag a word missing from the vocabulary (advisory styling)."""
        self.setProperty("invalid", "true" if invalid else "false")
        self.style().unpolish(self)
        self.style().polish(self)

    def keyPressEvent(self, event: QKeyEvent) -> None:  # noqa: N802
        if event.matches(QKeySequence.StandardKey.Paste):
            self.pasted.emit(QGuiApplication.clipboard().text())
            return
        if self.suggesting:
            key = event.key()
            if key == Qt.Key.Key_Down:
                self.navigate.emit(1)
                return
            if key == Qt.Key.Key_Up:
                self.navigate.emit(-1)
                return
            if key in (Qt.Key.Key_Return, Qt.Key.Key_Enter, Qt.Key.Key_Tab):
                self.commit_requested.emit()
                return
        super().keyPressEvent(event)

    def focusNextPrevChild(self, next: bool) -> bool:  # noqa: A002, N802
        # Tab commits a suggestion instead of moving focus.
        if next and self.suggesting:
            self.commit_requested.emit()
            return True
        return super().focusNextPrevChild(next)
