"""助记词生成、校验与种子转换测试。"""

import pytest

from exceptions import InvalidMnemonic
from mnemonic_manager import (
    MNEMONIC_GEN,
    ensure_valid_mnemonic,
    generate_mnemonic,
    mnemonic_to_seed,
    split_words,
    validate_mnemonic,
)
from tests.vectors import ABANDON_MNEMONIC, ABANDON_SEED_HEX


class TestGenerate:
    def test_generates_twelve_valid_words(self) -> None:
        phrase = generate_mnemonic()
        assert len(split_words(phrase)) == 12
        assert validate_mnemonic(phrase)

    def test_generated_phrases_differ(self) -> None:
        assert generate_mnemonic() != generate_mnemonic()


class TestValidate:
    def test_known_valid_phrases(self) -> None:
        assert validate_mnemonic(ABANDON_MNEMONIC)
        assert validate_mnemonic(" ".join(["zoo"] * 11 + ["wrong"]))
        assert validate_mnemonic(" ".join(["abandon"] * 23 + ["art"]))

    @pytest.mark.parametrize("last_word", ["abandon", "ability", "able", "above"])
    def test_last_word_mutations_fail(self, last_word: str) -> None:
        """前 11 个词固定时，末词序号低 4 位必须为 3。"""
        words = split_words(ABANDON_MNEMONIC)[:-1] + [last_word]
        assert not validate_mnemonic(" ".join(words))

    @pytest.mark.parametrize(
        "phrase",
        [
            "",
            "abandon abandon abandon",
            " ".join(["abandon"] * 12),
            ABANDON_MNEMONIC.replace("about", "notaword"),
            ABANDON_MNEMONIC.replace(" ", "  ", 1),
            ABANDON_MNEMONIC.upper(),
        ],
    )
    def test_invalid_phrases(self, phrase: str) -> None:
        assert not validate_mnemonic(phrase)

    def test_fifteen_words_rejected(self) -> None:
        """15 词虽符合 BIP39，但只接受 12 / 24 词。"""
        fifteen = MNEMONIC_GEN.generate(strength=160)
        assert MNEMONIC_GEN.check(fifteen)
        assert not validate_mnemonic(fifteen)

    def test_ensure_valid_raises(self) -> None:
        with pytest.raises(InvalidMnemonic):
            ensure_valid_mnemonic("abandon abandon abandon")
        assert ensure_valid_mnemonic(ABANDON_MNEMONIC) == ABANDON_MNEMONIC


class TestSeed:
    def test_known_seed(self) -> None:
        assert mnemonic_to_seed(ABANDON_MNEMONIC).hex() == ABANDON_SEED_HEX

    def test_seed_is_deterministic(self) -> None:
        phrase = generate_mnemonic()
        seed = mnemonic_to_seed(phrase)
        assert len(seed) == 64
        assert mnemonic_to_seed(phrase) == seed

    def test_invalid_phrase_has_no_seed(self) -> None:
        with pytest.raises(InvalidMnemonic):
            mnemonic_to_seed("abandon abandon abandon")
