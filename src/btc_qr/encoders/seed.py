"""Seed phrase assembly — fixed 12 or 24 word slots.

Words are normalised on entry (trimmed, lowercased) but not checked against
the BIP-39 vocabulary: ``encode()`` only requires every slot to be filled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from btc_qr.encoders.results import EncodeResult, ErrorKind, ValidationResult
from btc_qr.render.qr import ErrorCorrection

if TYPE_CHECKING:
    from btc_qr.encoders.wordlist import WordlistMatcher

VALID_WORD_COUNTS = (12, 24)


class SeedPhraseEncoder:
    """Slot state for an N-word mnemonic, N in {12, 24}."""

    error_correction = ErrorCorrection.H

    def __init__(self, word_count: int = 12) -> None:
        self._words: list[str] = []
        self._count = 0
        self.last_payload: str | None = None
        self.last_error: ValidationResult | None = None
        self.set_word_count(word_count)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def word_count(self) -> int:
        return self._count

    @property
    def words(self) -> tuple[str, ...]:
        return tuple(self._words)

    @property
    def filled_count(self) -> int:
        return sum(1 for w in self._words if w)

    @property
    def is_complete(self) -> bool:
        return self.filled_count == self._count

    def set_word_count(self, count: int) -> None:
        """Reallocate *count* empty slots and drop any previous output.

        Raises:
            ValueError: If *count* is not 12 or 24.
        """
        if count not in VALID_WORD_COUNTS:
            msg = f"word count must be 12 or 24, got {count}"
            raise ValueError(msg)
        self._count = count
        self._words = [""] * count
        self._reset_output()

    def clear(self) -> None:
        """Empty every slot, keeping the current word count."""
        self._words = [""] * self._count
        self._reset_output()

    def _reset_output(self) -> None:
        self.last_payload = None
        self.last_error = None

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def set_word(self, index: int, raw_text: str) -> None:
        """Store the trimmed, lowercased *raw_text* in slot *index*.

        Raises:
            IndexError: If *index* is outside the current slots.
        """
        if not 0 <= index < self._count:
            msg = f"slot {index} out of range for {self._count} words"
            raise IndexError(msg)
        self._words[index] = raw_text.strip().lower()

    def paste_bulk(self, raw_text: str, target_index: int) -> ValidationResult:
        """Apply pasted text.

        Exactly N tokens replace every slot; a single token edits
        *target_index*; any other count changes nothing.
        """
        tokens = raw_text.split()
        if len(tokens) == self._count:
            self._words = [t.lower() for t in tokens]
            return ValidationResult.success()
        if len(tokens) == 1:
            self.set_word(target_index, tokens[0])
            return ValidationResult.success()
        result = ValidationResult.failure(
            ErrorKind.WRONG_WORD_COUNT,
            f"Please paste exactly {self._count} words",
        )
        self.last_error = result
        return result

    # ------------------------------------------------------------------
    # Validation / encoding
    # ------------------------------------------------------------------

    def validate(self) -> ValidationResult:
        if not self.is_complete:
            return ValidationResult.failure(
                ErrorKind.INCOMPLETE_PHRASE,
                f"Please enter all {self._count} words",
            )
        return ValidationResult.success()

    def unknown_words(self, matcher: WordlistMatcher) -> list[int]:
        """Indexes of filled slots whose word is not in *matcher*'s vocabulary.

        Advisory only; ``encode()`` does not consult it.
        """
        return [i for i, w in enumerate(self._words) if w and w not in matcher]

    def build_payload(self) -> str:
        return " ".join(self._words)

    def encode(self) -> EncodeResult:
        """Join the slots with single spaces, or fail if any slot is empty."""
        check = self.validate()
        if not check:
            self.last_payload = None
            self.last_error = check
            return EncodeResult.from_validation(check)
        payload = self.build_payload()
        self.last_payload = payload
        self.last_error = None
        return EncodeResult.success(payload)
