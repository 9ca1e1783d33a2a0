"""Main window — QMainWindow with sidebar navigation and stacked composer panels."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from btc_qr.desktop.theme import DARK_STYLESHEET, PALETTE
from btc_qr.desktop.views.descriptor import DescriptorPanel
from btc_qr.desktop.views.seed import SeedPhrasePanel
from btc_qr.desktop.views.transaction import TransactionPanel
from btc_qr.desktop.widgets.common import heading_label

if TYPE_CHECKING:
    from btc_qr.encoders.wordlist import WordlistMatcher
    from btc_qr.render.service import QRService

_NAV_ITEMS = ["Seed Phrase", "Wallet Descriptor", "Transaction"]


class MainWindow(QMainWindow):
    """Primary application window.

    Layout::

        ┌───────────┬──────────────────────────┐
        │  Sidebar  │   Composer panel         │
        │  (nav)    │   (seed / descriptor / …)│
        ├───────────┴──────────────────────────┤
        │  Status bar                          │
        └──────────────────────────────────────┘
    """

    def __init__(self, service: QRService, matcher: WordlistMatcher) -> None:
        super().__init__()
        self.setWindowTitle("Bitcoin QR Tools")
        self.setMinimumSize(900, 640)
        self.setStyleSheet(DARK_STYLESHEET)

        self._panels: list[QWidget] = [
            SeedPhrasePanel(service, matcher),
            DescriptorPanel(service),
            TransactionPanel(service),
        ]
        self._setup_ui()
        self.statusBar().showMessage(
            "All processing happens locally. Your data never leaves this device."
        )

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        root.addWidget(self._build_sidebar())

        self._stack = QStackedWidget()
        for panel in self._panels:
            self._stack.addWidget(panel)
        root.addWidget(self._stack, stretch=1)

    def _build_sidebar(self) -> QWidget:
        sidebar = QWidget()
        sidebar.setFixedWidth(190)
        sidebar.setStyleSheet(f"background-color: {PALETTE.bg_surface};")

        layout = QVBoxLayout(sidebar)
        layout.setContentsMargins(8, 16, 8, 16)
        layout.setSpacing(4)

        title = heading_label("₿ QR Tools")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet(f"color: {PALETTE.accent};")
        layout.addWidget(title)
        layout.addSpacing(16)

        self._nav_group = QButtonGroup(self)
        self._nav_group.setExclusive(True)
        for idx, label in enumerate(_NAV_ITEMS):
            btn = QPushButton(label)
            btn.setProperty("role", "nav")
            btn.setCheckable(True)
            btn.setChecked(idx == 0)
            self._nav_group.addButton(btn, idx)
            layout.addWidget(btn)
        self._nav_group.idClicked.connect(self._on_nav)

        layout.addStretch()
        return sidebar

    @Slot(int)
    def _on_nav(self, index: int) -> None:
        self._stack.setCurrentIndex(index)

    @property
    def panels(self) -> list[QWidget]:
        return list(self._panels)
