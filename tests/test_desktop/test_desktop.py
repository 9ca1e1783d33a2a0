"""Desktop application tests — theme, render queue and composer panels.

Theme tests need no Qt at all; everything marked ``desktop`` runs against an
offscreen ``QApplication``.
"""

from __future__ import annotations

import pytest

from btc_qr.encoders.results import EncodeResult, ErrorKind
from btc_qr.render.export import ExportMode
from btc_qr.render.qr import ErrorCorrection, QRRenderer
from btc_qr.render.service import QRService

# ============================================================================
# Theme tests (no Qt dependency)
# ============================================================================


class TestTheme:
    """Tests for the desktop theme system."""

    def test_palette_has_required_colours(self) -> None:
        from btc_qr.desktop.theme import PALETTE

        assert PALETTE.bg_base == "#1a1a1a"
        assert PALETTE.accent == "#f7931a"
        assert PALETTE.error == "#ef4444"
        assert PALETTE.success == "#22c55e"

    def test_build_stylesheet_with_custom_palette(self) -> None:
        from btc_qr.desktop.theme import Palette, build_stylesheet

        qss = build_stylesheet(Palette(accent="#ff0000"))
        assert "#ff0000" in qss
        assert "#f7931a" in qss  # still used for focus borders

    def test_dark_stylesheet_singleton(self) -> None:
        from btc_qr.desktop.theme import DARK_STYLESHEET, build_stylesheet

        assert build_stylesheet() == DARK_STYLESHEET

    def test_palette_is_frozen(self) -> None:
        from btc_qr.desktop.theme import PALETTE

        with pytest.raises(AttributeError):
            PALETTE.accent = "#ff0000"  # type: ignore[misc]

    def test_stylesheet_covers_key_widgets(self) -> None:
        from btc_qr.desktop.theme import DARK_STYLESHEET

        for widget in (
            "QMainWindow",
            "QPushButton",
            "QLineEdit",
            "QPlainTextEdit",
            "QListWidget",
            "QTabBar",
            "QStatusBar",
        ):
            assert widget in DARK_STYLESHEET, f"{widget} not styled"


# ============================================================================
# RenderAPI (stale-result dropping)
# ============================================================================


class _DeferredPool:
    """Collects workers so a test can run them in any order."""

    def __init__(self) -> None:
        self.workers: list = []

    def start(self, worker) -> None:
        self.workers.append(worker)


@pytest.fixture
def service() -> QRService:
    return QRService(QRRenderer())


@pytest.mark.desktop
class TestRenderAPI:
    def test_latest_result_wins(self, qapp, service: QRService) -> None:
        from btc_qr.desktop.render_api import RenderAPI

        pool = _DeferredPool()
        api = RenderAPI(service, pool=pool)
        images: list = []
        api.image_ready.connect(images.append)

        api.generate(ExportMode.PSBT, EncodeResult.success("old"), ErrorCorrection.L)
        api.generate(ExportMode.PSBT, EncodeResult.success("new"), ErrorCorrection.L)
        newer, older = pool.workers[1], pool.workers[0]
        newer.run()
        older.run()

        assert len(images) == 1
        assert images[0].filename == "psbt-qr.png"

    def test_invalidate_drops_in_flight(self, qapp, service: QRService) -> None:
        from btc_qr.desktop.render_api import RenderAPI

        pool = _DeferredPool()
        api = RenderAPI(service, pool=pool)
        images: list = []
        api.image_ready.connect(images.append)

        api.generate(ExportMode.RAW_TX, EncodeResult.success("00"), ErrorCorrection.L)
        api.invalidate()
        pool.workers[0].run()
        assert images == []

    def test_failure_message(self, qapp, service: QRService) -> None:
        from btc_qr.desktop.render_api import RenderAPI

        pool = _DeferredPool()
        api = RenderAPI(service, pool=pool)
        errors: list[str] = []
        api.render_failed.connect(errors.append)

        result = EncodeResult.failure(ErrorKind.INVALID_ENCODING, "Invalid PSBT format.")
        api.generate(ExportMode.PSBT, result, ErrorCorrection.L)
        pool.workers[0].run()
        assert errors == ["Invalid PSBT format."]


# ============================================================================
# Composer panels
# ============================================================================


@pytest.mark.desktop
class TestTransactionPanel:
    def test_format_switch_clears_fields(self, qapp, service: QRService) -> None:
        from btc_qr.desktop.views.transaction import TransactionPanel
        from btc_qr.encoders.transaction import TransactionFields, TransactionFormat

        panel = TransactionPanel(service)
        panel._on_example()
        assert panel.builder.fields.address

        panel._tabs.setCurrentIndex(1)
        assert panel.builder.format is TransactionFormat.PSBT
        assert panel.builder.fields == TransactionFields()
        assert panel.export_mode is ExportMode.PSBT

    def test_invalid_input_shows_error(self, qapp, service: QRService) -> None:
        from btc_qr.desktop.views.transaction import TransactionPanel

        panel = TransactionPanel(service)
        panel._on_generate()
        assert panel._error.text() == "Please enter a Bitcoin address"


@pytest.mark.desktop
class TestDescriptorPanel:
    def test_example_detected(self, qapp, service: QRService) -> None:
        from btc_qr.desktop.views.descriptor import DescriptorPanel

        panel = DescriptorPanel(service)
        panel._on_example()
        assert "Native SegWit (P2WPKH)" in panel._detected.text()


@pytest.mark.desktop
class TestSeedPhrasePanel:
    _PHRASE = (
        "abandon ability able about above absent absorb abstract absurd abuse access accident"
    )

    def test_paste_fills_every_slot(self, qapp, service: QRService) -> None:
        from btc_qr.desktop.views.seed import SeedPhrasePanel
        from btc_qr.encoders.wordlist import WordlistMatcher

        panel = SeedPhrasePanel(service, WordlistMatcher.bip39())
        panel._on_paste(5, self._PHRASE.upper())
        assert panel.encoder.is_complete
        assert [field.text() for field in panel._inputs] == self._PHRASE.split()

    def test_wrong_paste_shows_error(self, qapp, service: QRService) -> None:
        from btc_qr.desktop.views.seed import SeedPhrasePanel
        from btc_qr.encoders.wordlist import WordlistMatcher

        panel = SeedPhrasePanel(service, WordlistMatcher.bip39())
        panel._on_paste(0, "one two three")
        assert panel._error.text() == "Please paste exactly 12 words"
        assert panel.encoder.filled_count == 0

    def test_switch_to_24_words(self, qapp, service: QRService) -> None:
        from btc_qr.desktop.views.seed import SeedPhrasePanel
        from btc_qr.encoders.wordlist import WordlistMatcher

        panel = SeedPhrasePanel(service, WordlistMatcher.bip39())
        panel._on_word_count(24)
        assert len(panel._inputs) == 24
        assert panel.encoder.word_count == 24
