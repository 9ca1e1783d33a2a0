"""Autocomplete over the BIP-39 vocabulary.

The vocabulary is loaded once per language and shared as an immutable tuple.
Matching is a plain case-insensitive prefix scan in vocabulary order, which
keeps suggestions deterministic and stable between keystrokes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

SUGGESTION_LIMIT = 10
BIP39_WORD_COUNT = 2048


@lru_cache(maxsize=4)
def load_wordlist(language: str = "english") -> tuple[str, ...]:
    """Return the BIP-39 word list for *language*.

    Raises:
        ValueError: If the list does not hold exactly 2048 words.
    """
    from mnemonic import Mnemonic  # noqa: PLC0415

    words = tuple(Mnemonic(language).wordlist)
    if len(words) != BIP39_WORD_COUNT:
        msg = f"BIP-39 {language} word list has {len(words)} words, expected {BIP39_WORD_COUNT}"
        raise ValueError(msg)
    return words


def suggest(prefix: str, vocabulary: Sequence[str], limit: int = SUGGESTION_LIMIT) -> list[str]:
    """Return vocabulary entries starting with *prefix*, in vocabulary order.

    An empty prefix yields no suggestions. At most *limit* entries are returned.
    """
    if not prefix or limit <= 0:
        return []
    needle = prefix.lower()
    matches: list[str] = []
    for word in vocabulary:
        if word.lower().startswith(needle):
            matches.append(word)
            if len(matches) == limit:
                break
    return matches


class WordlistMatcher:
    """Bind :func:`suggest` to a fixed vocabulary and limit."""

    def __init__(self, vocabulary: Sequence[str], *, limit: int = SUGGESTION_LIMIT) -> None:
        self._vocabulary = tuple(vocabulary)
        self._words = frozenset(w.lower() for w in self._vocabulary)
        self._limit = limit

    @classmethod
    def bip39(cls, language: str = "english") -> WordlistMatcher:
        """Build a matcher over the BIP-39 list for *language*."""
        return cls(load_wordlist(language))

    @property
    def vocabulary(self) -> tuple[str, ...]:
        return self._vocabulary

    def suggest(self, prefix: str) -> list[str]:
        return suggest(prefix, self._vocabulary, self._limit)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._words


@dataclass
class SuggestionCursor:
    """Highlighted-index selection over a suggestion list.

    The index is clamped to ``[0, len - 1]``. Committing returns the
    highlighted word and clears the list.
    """

    suggestions: list[str] = field(default_factory=list)
    index: int = 0

    def update(self, suggestions: Sequence[str]) -> None:
        """Replace the suggestion list and reset the highlight to the top."""
        self.suggestions = list(suggestions)
        self.index = 0

    @property
    def highlighted(self) -> str | None:
        if not self.suggestions:
            return None
        return self.suggestions[self.index]

    def next(self) -> int:
        """Move the highlight down, stopping at the last entry."""
        if self.suggestions:
            self.index = min(self.index + 1, len(self.suggestions) - 1)
        return self.index

    def previous(self) -> int:
        """Move the highlight up, stopping at zero."""
        self.index = max(self.index - 1, 0)
        return self.index

    def commit(self, slot: int, slot_count: int) -> tuple[str, int | None] | None:
        """Select the highlighted word for *slot*.

        Returns:
            ``(word, next_slot)`` where ``next_slot`` is ``None`` when *slot*
            is the last one, or ``None`` when there is nothing to commit.
        """
        word = self.highlighted
        if word is None:
            return None
        self.suggestions = []
        self.index = 0
        next_slot = slot + 1 if slot + 1 < slot_count else None
        return word, next_slot
