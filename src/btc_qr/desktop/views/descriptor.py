"""Wallet descriptor composer — live type detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QHBoxLayout, QPlainTextEdit, QPushButton, QVBoxLayout

from btc_qr.desktop.views.base import ComposerPanel
from btc_qr.desktop.widgets.common import caption_label
from btc_qr.encoders.descriptor import DescriptorEncoder
from btc_qr.render.export import ExportMode

if TYPE_CHECKING:
    from btc_qr.encoders.results import EncodeResult
    from btc_qr.render.qr import ErrorCorrection


class DescriptorPanel(ComposerPanel):
    """Enter an output descriptor and render it verbatim as a QR code."""

    title = "Wallet Descriptor"
    subtitle = (
        "Enter an output descriptor for your wallet. Supports pkh, wpkh, sh, wsh, tr, "
        "and other standard formats."
    )
    notice = (
        "Privacy notice: this descriptor contains extended public keys (xpubs) which "
        "can reveal all your addresses. Share carefully."
    )

    _encoder: DescriptorEncoder

    @property
    def export_mode(self) -> ExportMode:
        return ExportMode.WALLET_DESCRIPTOR

    def _build_form(self, layout: QVBoxLayout) -> None:
        self._encoder = DescriptorEncoder()

        header = QHBoxLayout()
        header.addStretch()
        example_btn = QPushButton("Load Example")
        example_btn.clicked.connect(self._on_example)
        header.addWidget(example_btn)
        layout.addLayout(header)

        self._editor = QPlainTextEdit()
        self._editor.setPlaceholderText(
            "wpkh([fingerprint/derivation]xpub.../*) or other descriptor format"
        )
        self._editor.setMinimumHeight(120)
        self._editor.textChanged.connect(self._on_text_changed)
        layout.addWidget(self._editor)

        self._detected = caption_label()
        self._detected.setProperty("role", "badge")
        self._detected.hide()
        layout.addWidget(self._detected)

    def _encode(self) -> tuple[EncodeResult, ErrorCorrection]:
        return self._encoder.encode(), self._encoder.error_correction

    def _reset_form(self) -> None:
        self._encoder.clear()
        self._editor.setPlainText("")

    @Slot()
    def _on_text_changed(self) -> None:
        self._encoder.text = self._editor.toPlainText()
        variant = self._encoder.detected
        if variant is None:
            self._detected.hide()
        else:
            self._detected.setText(f"Detected: {variant.label}")
            self._detected.show()
        self.clear_error()
        self.discard_output()

    @Slot()
    def _on_example(self) -> None:
        self._encoder.load_example()
        self._editor.setPlainText(self._encoder.text)
