"""Common reusable widgets — typed labels and cards."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget


def heading_label(text: str = "", parent: QWidget | None = None) -> QLabel:
    """Create a heading-styled ``QLabel`` (role='heading')."""
    lbl = QLabel(text, parent)
    lbl.setProperty("role", "heading")
    return lbl


def caption_label(text: str = "", parent: QWidget | None = None) -> QLabel:
    """Create a caption-styled ``QLabel`` (role='caption')."""
    lbl = QLabel(text, parent)
    lbl.setProperty("role", "caption")
    lbl.setWordWrap(True)
    return lbl


def mono_label(text: str = "", parent: QWidget | None = None) -> QLabel:
    """Create a selectable monospace ``QLabel`` (role='mono')."""
    lbl = QLabel(text, parent)
    lbl.setProperty("role", "mono")
    lbl.setWordWrap(True)
    lbl.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
    return lbl


def error_label(parent: QWidget | None = None) -> QLabel:
    """Create a hidden inline error ``QLabel`` (role='error')."""
    lbl = QLabel("", parent)
    lbl.setProperty("role", "error")
    lbl.setWordWrap(True)
    lbl.hide()
    return lbl


class Card(QFrame):
    """A card container with rounded corners (role='card')."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setProperty("role", "card")
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(16, 16, 16, 16)
        self._layout.setSpacing(8)

    def layout(self) -> QVBoxLayout:
        return self._layout
