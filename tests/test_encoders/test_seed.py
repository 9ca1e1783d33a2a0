"""Tests for seed phrase assembly — encoders/seed.py."""

from __future__ import annotations

import pytest

from btc_qr.encoders.results import ErrorKind
from btc_qr.encoders.seed import SeedPhraseEncoder
from btc_qr.encoders.wordlist import WordlistMatcher

_WORDS_12 = (
    "abandon ability able about above absent absorb abstract absurd abuse access accident"
).split()
_WORDS_24 = _WORDS_12 + (
    "account accuse achieve acid acoustic acquire across act action actor actress actual"
).split()


def _filled(count: int) -> SeedPhraseEncoder:
    enc = SeedPhraseEncoder(count)
    for i, word in enumerate(_WORDS_24[:count]):
        enc.set_word(i, word)
    return enc


class TestWordCount:
    def test_default_is_12_empty(self) -> None:
        enc = SeedPhraseEncoder()
        assert enc.word_count == 12
        assert enc.words == ("",) * 12
        assert enc.filled_count == 0

    def test_switch_reallocates(self) -> None:
        enc = _filled(12)
        enc.set_word_count(24)
        assert enc.words == ("",) * 24

    def test_same_count_still_resets(self) -> None:
        enc = _filled(12)
        enc.encode()
        enc.set_word_count(12)
        assert enc.filled_count == 0
        assert enc.last_payload is None
        assert enc.last_error is None

    @pytest.mark.parametrize("count", [0, 11, 13, 18, 25])
    def test_rejects_other_counts(self, count: int) -> None:
        with pytest.raises(ValueError, match="12 or 24"):
            SeedPhraseEncoder(count)


class TestSetWord:
    def test_normalises(self) -> None:
        enc = SeedPhraseEncoder()
        enc.set_word(0, "  Abandon\t")
        assert enc.words[0] == "abandon"

    def test_accepts_non_vocabulary_words(self) -> None:
        enc = SeedPhraseEncoder()
        enc.set_word(5, "qwerty")
        assert enc.words[5] == "qwerty"

    @pytest.mark.parametrize("index", [-1, 12, 100])
    def test_out_of_range(self, index: int) -> None:
        with pytest.raises(IndexError):
            SeedPhraseEncoder().set_word(index, "abandon")


class TestPasteBulk:
    def test_full_phrase_replaces_all_slots(self) -> None:
        enc = SeedPhraseEncoder()
        enc.set_word(0, "zoo")
        text = "  ABANDON ability\nable about\tabove absent absorb abstract absurd abuse access accident "
        result = enc.paste_bulk(text, 7)
        assert result.ok
        assert list(enc.words) == _WORDS_12

    def test_full_24_word_phrase(self) -> None:
        enc = SeedPhraseEncoder(24)
        assert enc.paste_bulk(" ".join(_WORDS_24), 0)
        assert list(enc.words) == _WORDS_24

    def test_single_token_edits_target_only(self) -> None:
        enc = _filled(12)
        before = list(enc.words)
        assert enc.paste_bulk("  Zoo  ", 4)
        after = list(enc.words)
        assert after[4] == "zoo"
        assert after[:4] == before[:4]
        assert after[5:] == before[5:]

    @pytest.mark.parametrize("text", ["", "   ", "one two", " ".join(_WORDS_24)])
    def test_wrong_count_mutates_nothing(self, text: str) -> None:
        enc = _filled(12)
        before = enc.words
        result = enc.paste_bulk(text, 0)
        assert not result
        assert result.reason is ErrorKind.WRONG_WORD_COUNT
        assert result.message == "Please paste exactly 12 words"
        assert enc.words == before


class TestEncode:
    @pytest.mark.parametrize("count", [12, 24])
    def test_joins_with_single_spaces(self, count: int) -> None:
        enc = _filled(count)
        result = enc.encode()
        assert result.ok
        assert result.payload == " ".join(_WORDS_24[:count])
        assert enc.last_payload == result.payload

    @pytest.mark.parametrize("count", [12, 24])
    def test_any_empty_slot_fails(self, count: int) -> None:
        for missing in (0, count // 2, count - 1):
            enc = _filled(count)
            enc.set_word(missing, "   ")
            result = enc.encode()
            assert not result
            assert result.error is ErrorKind.INCOMPLETE_PHRASE
            assert result.error is ErrorKind.INCOMPLETE_INPUT
            assert result.message == f"Please enter all {count} words"

    def test_no_checksum_or_vocabulary_check(self) -> None:
        enc = SeedPhraseEncoder()
        enc.paste_bulk(" ".join(["qwerty"] * 12), 0)
        assert enc.encode().payload == " ".join(["qwerty"] * 12)

    def test_clear_keeps_count(self) -> None:
        enc = _filled(24)
        enc.encode()
        enc.clear()
        assert enc.word_count == 24
        assert enc.filled_count == 0
        assert enc.last_payload is None


class TestUnknownWords:
    def test_flags_non_bip39_words(self) -> None:
        enc = SeedPhraseEncoder()
        enc.set_word(0, "abandon")
        enc.set_word(1, "qwerty")
        enc.set_word(2, "zoo")
        assert enc.unknown_words(WordlistMatcher.bip39()) == [1]
