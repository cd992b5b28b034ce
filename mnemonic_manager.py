"""助记词生成、校验与种子转换（BIP39 英文词表）。"""

from typing import List

from loguru import logger
from mnemonic import Mnemonic

from config import MNEMONIC_LANGUAGE, MNEMONIC_STRENGTH, SUPPORTED_WORD_COUNTS
from exceptions import InvalidMnemonic

# 使用标准 BIP39 英文词表的生成器
MNEMONIC_GEN = Mnemonic(MNEMONIC_LANGUAGE)


def generate_mnemonic() -> str:
    """生成新的 12 词助记词，熵来自系统安全随机源。"""
    phrase = MNEMONIC_GEN.generate(strength=MNEMONIC_STRENGTH)
    logger.debug("已生成新的助记词（{} 个单词）", len(phrase.split(" ")))
    return phrase


def split_words(phrase: str) -> List[str]:
    """按单个空格拆分助记词。"""
    return phrase.split(" ")


def validate_mnemonic(phrase: str) -> bool:
    """单词数为 12 或 24 且 BIP39 校验和正确时返回 True。"""
    if not phrase:
        return False
    if len(split_words(phrase)) not in SUPPORTED_WORD_COUNTS:
        return False
    return MNEMONIC_GEN.check(phrase)


def ensure_valid_mnemonic(phrase: str) -> str:
    """校验助记词，不合法时抛出 InvalidMnemonic。"""
    if not validate_mnemonic(phrase):
        raise InvalidMnemonic("助记词校验未通过：单词数需为 12 或 24，且校验和正确")
    return phrase


def mnemonic_to_seed(phrase: str) -> bytes:
    """通过 BIP39 标准（PBKDF2-HMAC-SHA512，空口令）将助记词转换为 64 字节种子。"""
    ensure_valid_mnemonic(phrase)
    return MNEMONIC_GEN.to_seed(phrase, passphrase="")
