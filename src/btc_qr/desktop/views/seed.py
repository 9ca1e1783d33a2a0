"""Seed phrase composer — 12/24 word grid with BIP-39 autocomplete."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QButtonGroup,
    QGridLayout,
    QHBoxLayout,
    QListWidget,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from btc_qr.desktop.views.base import ComposerPanel
from btc_qr.desktop.widgets.common import caption_label
from btc_qr.desktop.widgets.word_input import WordInput
from btc_qr.encoders.seed import VALID_WORD_COUNTS, SeedPhraseEncoder
from btc_qr.encoders.wordlist import SuggestionCursor
from btc_qr.render.export import ExportMode

if TYPE_CHECKING:
    from btc_qr.encoders.results import EncodeResult
    from btc_qr.encoders.wordlist import WordlistMatcher
    from btc_qr.render.qr import ErrorCorrection
    from btc_qr.render.service import QRService

_COLUMNS = 4


class SeedPhrasePanel(ComposerPanel):
    """Enter or paste a seed phrase and render it as a QR code."""

    title = "Seed Phrase"
    subtitle = "Paste your entire seed phrase into any box, or enter words individually."
    notice = (
        "Security warning: store this QR code securely. Anyone with access to it "
        "can access your wallet."
    )

    def __init__(
        self,
        service: QRService,
        matcher: WordlistMatcher,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(service, parent)
        self._matcher = matcher

    @property
    def export_mode(self) -> ExportMode:
        return ExportMode.SEED_PHRASE

    @property
    def encoder(self) -> SeedPhraseEncoder:
        return self._encoder

    # ------------------------------------------------------------------
    # Form
    # ------------------------------------------------------------------

    def _build_form(self, layout: QVBoxLayout) -> None:
        self._encoder = SeedPhraseEncoder()
        self._cursor = SuggestionCursor()
        self._inputs: list[WordInput] = []
        self._active_slot = 0

        count_row = QHBoxLayout()
        self._count_group = QButtonGroup(self)
        self._count_group.setExclusive(True)
        for count in VALID_WORD_COUNTS:
            btn = QPushButton(f"{count} Words")
            btn.setProperty("role", "toggle")
            btn.setCheckable(True)
            btn.setChecked(count == self._encoder.word_count)
            self._count_group.addButton(btn, count)
            count_row.addWidget(btn)
        self._count_group.idClicked.connect(self._on_word_count)
        layout.addLayout(count_row)

        self._progress = caption_label()
        layout.addWidget(self._progress)

        self._grid = QGridLayout()
        self._grid.setSpacing(8)
        layout.addLayout(self._grid)

        self._suggestions = QListWidget()
        self._suggestions.setProperty("role", "suggestions")
        self._suggestions.setMaximumHeight(180)
        self._suggestions.itemClicked.connect(lambda _item: self._commit())
        self._suggestions.hide()
        layout.addWidget(self._suggestions)

        self._rebuild_grid()

    def _rebuild_grid(self) -> None:
        for field in self._inputs:
            self._grid.removeWidget(field)
            field.deleteLater()
        self._inputs = []
        for slot in range(self._encoder.word_count):
            field = WordInput(slot)
            field.textEdited.connect(lambda text, s=slot: self._on_text_edited(s, text))
            field.navigate.connect(self._on_navigate)
            field.commit_requested.connect(self._commit)
            field.pasted.connect(lambda text, s=slot: self._on_paste(s, text))
            self._grid.addWidget(field, slot // _COLUMNS, slot % _COLUMNS)
            self._inputs.append(field)
        self._hide_suggestions()
        self._refresh_progress()

    def _sync_inputs(self) -> None:
        """Copy encoder slots back into the line edits."""
        for field, word in zip(self._inputs, self._encoder.words, strict=True):
            if field.text() != word:
                field.setText(word)
        unknown = set(self._encoder.unknown_words(self._matcher))
        for field in self._inputs:
            field.set_invalid(field.slot in unknown)
        self._refresh_progress()

    def _refresh_progress(self) -> None:
        self._progress.setText(
            f"{self._encoder.filled_count} / {self._encoder.word_count} words"
        )

    def _encode(self) -> tuple[EncodeResult, ErrorCorrection]:
        return self._encoder.encode(), self._encoder.error_correction

    def _reset_form(self) -> None:
        self._encoder.clear()
        self._hide_suggestions()
        self._sync_inputs()

    # ------------------------------------------------------------------
    # Suggestions
    # ------------------------------------------------------------------

    def _show_suggestions(self, slot: int, prefix: str) -> None:
        self._active_slot = slot
        self._cursor.update(self._matcher.suggest(prefix))
        self._suggestions.clear()
        if not self._cursor.suggestions:
            self._hide_suggestions()
            return
        self._suggestions.addItems(self._cursor.suggestions)
        self._suggestions.setCurrentRow(self._cursor.index)
        self._suggestions.show()
        self._inputs[slot].suggesting = True

    def _hide_suggestions(self) -> None:
        self._cursor.update([])
        self._suggestions.clear()
        self._suggestions.hide()
        for field in self._inputs:
            field.suggesting = False

    @Slot(int)
    def _on_navigate(self, delta: int) -> None:
        index = self._cursor.next() if delta > 0 else self._cursor.previous()
        self._suggestions.setCurrentRow(index)

    @Slot()
    def _commit(self) -> None:
        row = self._suggestions.currentRow()
        if row >= 0:
            self._cursor.index = row
        committed = self._cursor.commit(self._active_slot, self._encoder.word_count)
        self._hide_suggestions()
        if committed is None:
            return
        word, next_slot = committed
        self._encoder.set_word(self._active_slot, word)
        self._sync_inputs()
        if next_slot is not None:
            self._inputs[next_slot].setFocus()

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    @Slot(int)
    def _on_word_count(self, count: int) -> None:
        self._encoder.set_word_count(count)
        self.clear_error()
        self.discard_output()
        self._rebuild_grid()

    def _on_text_edited(self, slot: int, text: str) -> None:
        self._encoder.set_word(slot, text)
        self._refresh_progress()
        self._show_suggestions(slot, text.strip())

    def _on_paste(self, slot: int, text: str) -> None:
        result = self._encoder.paste_bulk(text, slot)
        self._hide_suggestions()
        if not result:
            self.show_error(result.message)
            return
        self.clear_error()
        self._sync_inputs()
