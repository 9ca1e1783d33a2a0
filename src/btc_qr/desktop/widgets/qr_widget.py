"""QR code display widget — shows PNG bytes produced by ``QRRenderer``."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QLabel, QSizePolicy, QWidget

_PLACEHOLDER = "No QR code yet"


class QRWidget(QLabel):
    """A ``QLabel`` that displays a rendered QR image, scaled to a fixed box."""

    def __init__(self, parent: QWidget | None = None, size: int = 280) -> None:
        super().__init__(parent)
        self._size = size
        self._png = b""
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setMinimumSize(size, size)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.clear_image()

    @property
    def png(self) -> bytes:
        """The PNG currently shown, empty when cleared."""
        return self._png

    def set_png(self, png: bytes) -> None:
        """Show *png*; falls back to the placeholder if Qt cannot decode it."""
        pixmap = QPixmap()
        if not png or not pixmap.loadFromData(png, "PNG"):
            self.clear_image()
            return
        self._png = png
        self.setPixmap(
            pixmap.scaled(
                self._size,
                self._size,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.FastTransformation,
            )
        )
        self.setText("")

    def clear_image(self) -> None:
        self._png = b""
        self.setPixmap(QPixmap())
        self.setText(_PLACEHOLDER)
