"""Desktop application entry point — QApplication lifecycle."""

from __future__ import annotations

import logging
import sys


def main() -> None:
    """Launch the btc-qr-tools desktop application."""
    try:
        from PySide6.QtWidgets import QApplication

        from btc_qr.desktop.main_window import MainWindow
        from btc_qr.desktop.theme import DARK_STYLESHEET
    except ImportError:
        print(  # noqa: T201
            "Desktop dependencies not installed. Install with: pip install btc-qr-tools[desktop]"
        )
        sys.exit(1)

    from btc_qr.config.settings import AppConfig
    from btc_qr.encoders.wordlist import WordlistMatcher
    from btc_qr.render.qr import QRRenderer
    from btc_qr.render.service import QRService

    config = AppConfig()
    logging.basicConfig(level=logging.DEBUG if config.debug else logging.INFO)

    app = QApplication(sys.argv)
    app.setApplicationName("btc-qr-tools")
    app.setStyleSheet(DARK_STYLESHEET)

    service = QRService(QRRenderer(config.render.to_options()))
    matcher = WordlistMatcher.bip39(config.wordlist.language)

    window = MainWindow(service, matcher)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
