"""全局配置，提供链类型枚举、派生路径模板、持久化键名与用户设置文件路径。"""

import os
from enum import Enum
from pathlib import Path
from typing import Tuple


class ChainType(Enum):
    """链类型封闭枚举，值为 BIP44 coin type。"""

    SOLANA = 501
    ETHEREUM = 60

    @property
    def coin_type(self) -> int:
        return self.value

    @property
    def display_name(self) -> str:
        return "Solana" if self is ChainType.SOLANA else "Ethereum"

    @property
    def code(self) -> str:
        """持久化时使用的字符串编码，例如 "501"。"""
        return str(self.value)

    @classmethod
    def from_code(cls, code: str) -> "ChainType":
        """由字符串编码还原链类型；未知编码抛出 ValueError。"""
        return cls(int(code))


# 全硬化派生路径，账户序号位于最后一段
DERIVATION_PATH_TEMPLATE = "m/44'/{coin_type}'/0'/{index}'"

# 硬化位
HARDENED_OFFSET = 0x80000000

# 助记词仅支持 12 / 24 个单词，生成时使用 128 位熵（12 词）
SUPPORTED_WORD_COUNTS: Tuple[int, ...] = (12, 24)
MNEMONIC_STRENGTH = 128
MNEMONIC_LANGUAGE = "english"

# 持久化键名
STORAGE_KEY_WALLETS = "wallets"
STORAGE_KEY_MNEMONICS = "mnemonics"
STORAGE_KEY_PATHS = "paths"

# 私钥隐藏时的掩码字符与最大长度
MASK_CHAR = "•"
MASK_MAX_LENGTH = 40

# 钱包数据与主题设置存储位置
WALLET_STORE_FILE = Path(os.environ.get("SEREIN_WALLET_STORE", "wallet_store.json"))
USER_SETTINGS_FILE = Path("user_settings.json")
DEFAULT_THEME = "light"

# 日志级别
LOG_LEVEL = os.environ.get("SEREIN_LOG_LEVEL", "INFO").upper()
