"""Shared composer panel — form, inline error, generate / clear / save, QR preview."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from btc_qr.desktop.render_api import RenderAPI
from btc_qr.desktop.widgets.common import Card, caption_label, error_label, heading_label
from btc_qr.desktop.widgets.qr_widget import QRWidget
from btc_qr.render.export import export_filename

if TYPE_CHECKING:
    from btc_qr.encoders.results import EncodeResult
    from btc_qr.render.export import ExportMode
    from btc_qr.render.qr import ErrorCorrection
    from btc_qr.render.service import QRImage, QRService


class ComposerPanel(QWidget):
    """Base panel: subclasses build the form and produce an ``EncodeResult``.

    Layout:
        [Heading / subtitle]
        [Form (subclass)]
        [Inline error]
        [Generate] [Clear]
        [Card: QR preview + Save + notice]
    """

    title = ""
    subtitle = ""
    notice = ""

    def __init__(self, service: QRService, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._api = RenderAPI(service, self)
        self._image: QRImage | None = None
        self._setup_ui()
        self._api.image_ready.connect(self._on_image)
        self._api.render_failed.connect(self._on_render_failed)

    # ------------------------------------------------------------------
    # Subclass hooks
    # ------------------------------------------------------------------

    @property
    def export_mode(self) -> ExportMode:
        raise NotImplementedError

    def _build_form(self, layout: QVBoxLayout) -> None:
        raise NotImplementedError

    def _encode(self) -> tuple[EncodeResult, ErrorCorrection]:
        raise NotImplementedError

    def _reset_form(self) -> None:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------

    def _setup_ui(self) -> None:
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        outer.addWidget(scroll)

        body = QWidget()
        scroll.setWidget(body)
        layout = QVBoxLayout(body)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(12)

        layout.addWidget(heading_label(self.title))
        if self.subtitle:
            layout.addWidget(caption_label(self.subtitle))

        self._build_form(layout)

        self._error = error_label()
        layout.addWidget(self._error)

        btn_row = QHBoxLayout()
        self._generate_btn = QPushButton("Generate QR Code")
        self._generate_btn.setProperty("role", "primary")
        self._generate_btn.clicked.connect(self._on_generate)
        btn_row.addWidget(self._generate_btn, stretch=1)
        clear_btn = QPushButton("Clear")
        clear_btn.clicked.connect(self._on_clear)
        btn_row.addWidget(clear_btn)
        layout.addLayout(btn_row)

        self._result_card = Card()
        self._qr = QRWidget(size=320)
        qr_row = QHBoxLayout()
        qr_row.addStretch()
        qr_row.addWidget(self._qr)
        qr_row.addStretch()
        self._result_card.layout().addLayout(qr_row)
        self._save_btn = QPushButton("Save QR Code…")
        self._save_btn.clicked.connect(self._on_save)
        self._result_card.layout().addWidget(self._save_btn)
        if self.notice:
            self._result_card.layout().addWidget(caption_label(self.notice))
        self._result_card.hide()
        layout.addWidget(self._result_card)

        layout.addStretch()

    # ------------------------------------------------------------------
    # Helpers for subclasses
    # ------------------------------------------------------------------

    def show_error(self, message: str) -> None:
        self._error.setText(message)
        self._error.show()

    def clear_error(self) -> None:
        self._error.clear()
        self._error.hide()

    def discard_output(self) -> None:
        """Hide the preview and ignore any render still in flight."""
        self._api.invalidate()
        self._image = None
        self._qr.clear_image()
        self._result_card.hide()
        self._generate_btn.setEnabled(True)

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    @Slot()
    def _on_generate(self) -> None:
        self.clear_error()
        result, level = self._encode()
        if not result:
            self.show_error(result.message)
            return
        self._generate_btn.setEnabled(False)
        self._api.generate(self.export_mode, result, level)

    @Slot(object)
    def _on_image(self, image: QRImage) -> None:
        self._image = image
        self._qr.set_png(image.png)
        self._result_card.show()
        self._generate_btn.setEnabled(True)

    @Slot(str)
    def _on_render_failed(self, message: str) -> None:
        self.show_error(message)
        self._generate_btn.setEnabled(True)

    @Slot()
    def _on_clear(self) -> None:
        self._reset_form()
        self.clear_error()
        self.discard_output()

    @Slot()
    def _on_save(self) -> None:
        if self._image is None:
            return
        path, _ = QFileDialog.getSaveFileName(
            self, "Save QR Code", export_filename(self._image.mode), "PNG Images (*.png)"
        )
        if path:
            Path(path).write_bytes(self._image.png)
