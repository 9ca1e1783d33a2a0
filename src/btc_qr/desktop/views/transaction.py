"""Transaction composer — payment URI, PSBT or raw transaction."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QFormLayout,
    QHBoxLayout,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QTabBar,
    QVBoxLayout,
    QWidget,
)

from btc_qr.desktop.views.base import ComposerPanel
from btc_qr.desktop.widgets.common import caption_label
from btc_qr.encoders.transaction import TransactionFormat, TransactionPayloadBuilder
from btc_qr.render.export import ExportMode

if TYPE_CHECKING:
    from btc_qr.encoders.results import EncodeResult
    from btc_qr.render.qr import ErrorCorrection

_TABS = [
    (TransactionFormat.PAYMENT_URI, "Payment URI"),
    (TransactionFormat.PSBT, "PSBT"),
    (TransactionFormat.RAW_TX, "Raw TX"),
]

_HINTS = {
    TransactionFormat.PAYMENT_URI: (
        "Creates a standard BIP21 bitcoin: URI that wallets open to pre-fill payment details."
    ),
    TransactionFormat.PSBT: "Paste your Partially Signed Bitcoin Transaction in base64 format.",
    TransactionFormat.RAW_TX: "Paste your signed Bitcoin transaction in raw hexadecimal format.",
}

_PLACEHOLDERS = {
    TransactionFormat.PSBT: "cHNidP8BAH...",
    TransactionFormat.RAW_TX: "0200000001...",
}


class TransactionPanel(ComposerPanel):
    """Build a transaction payload and render it as a QR code."""

    title = "Transaction"
    notice = "Scan with a compatible wallet to pay, sign or broadcast."

    _builder: TransactionPayloadBuilder

    @property
    def export_mode(self) -> ExportMode:
        return ExportMode(str(self._builder.format))

    @property
    def builder(self) -> TransactionPayloadBuilder:
        return self._builder

    # ------------------------------------------------------------------
    # Form
    # ------------------------------------------------------------------

    def _build_form(self, layout: QVBoxLayout) -> None:
        self._builder = TransactionPayloadBuilder()

        self._tabs = QTabBar()
        for _fmt, label in _TABS:
            self._tabs.addTab(label)
        self._tabs.currentChanged.connect(self._on_format)
        layout.addWidget(self._tabs)

        header = QHBoxLayout()
        self._hint = caption_label(_HINTS[self._builder.format])
        header.addWidget(self._hint, stretch=1)
        example_btn = QPushButton("Load Example")
        example_btn.clicked.connect(self._on_example)
        header.addWidget(example_btn)
        layout.addLayout(header)

        self._uri_form = QWidget()
        form = QFormLayout(self._uri_form)
        self._address = QLineEdit()
        self._address.setPlaceholderText("bc1q... or 1... or 3...")
        self._amount = QLineEdit()
        self._amount.setPlaceholderText("0.001")
        self._label = QLineEdit()
        self._label.setPlaceholderText("Payment description")
        self._message = QLineEdit()
        self._message.setPlaceholderText("Additional message")
        form.addRow("Bitcoin Address *", self._address)
        form.addRow("Amount (BTC, optional)", self._amount)
        form.addRow("Label (optional)", self._label)
        form.addRow("Message (optional)", self._message)
        layout.addWidget(self._uri_form)

        self._data = QPlainTextEdit()
        self._data.setMinimumHeight(150)
        self._data.hide()
        layout.addWidget(self._data)

    def _read_fields(self) -> None:
        self._builder.update(
            address=self._address.text(),
            amount=self._amount.text(),
            label=self._label.text(),
            message=self._message.text(),
            data=self._data.toPlainText(),
        )

    def _write_fields(self) -> None:
        fields = self._builder.fields
        self._address.setText(fields.address)
        self._amount.setText(fields.amount)
        self._label.setText(fields.label)
        self._message.setText(fields.message)
        self._data.setPlainText(fields.data)

    def _encode(self) -> tuple[EncodeResult, ErrorCorrection]:
        self._read_fields()
        return self._builder.build_payload(), self._builder.error_correction

    def _reset_form(self) -> None:
        self._builder.clear()
        self._write_fields()

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    @Slot(int)
    def _on_format(self, index: int) -> None:
        fmt = _TABS[index][0]
        self._builder.set_format(fmt)
        self._write_fields()
        is_uri = fmt is TransactionFormat.PAYMENT_URI
        self._uri_form.setVisible(is_uri)
        self._data.setVisible(not is_uri)
        self._data.setPlaceholderText(_PLACEHOLDERS.get(fmt, ""))
        self._hint.setText(_HINTS[fmt])
        self.clear_error()
        self.discard_output()

    @Slot()
    def _on_example(self) -> None:
        self._builder.load_example()
        self._write_fields()
        self.clear_error()
        self.discard_output()
