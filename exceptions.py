"""钱包派生与集合管理的异常定义。"""

from typing import Optional


class WalletError(Exception):
    """所有钱包相关错误的基类。"""

    pass


# =============================================================================
# 派生层异常
# =============================================================================


class InvalidMnemonic(WalletError):
    """助记词单词数不符或校验和错误。"""

    pass


class InvalidPath(WalletError):
    """派生路径格式错误（段不是非负整数或缺少硬化标记）。"""

    pass


class UnsupportedChain(WalletError):
    """链类型不在支持范围内。"""

    pass


class KeyDerivationError(WalletError):
    """派生结果不是合法的 secp256k1 私钥。"""

    pass


# =============================================================================
# 集合层异常
# =============================================================================


class NoMnemonic(WalletError):
    """尚未建立助记词时调用了追加钱包。"""

    pass


class ChainNotSelected(WalletError):
    """尚未选择链类型。"""

    pass


class CollectionNotEmpty(WalletError):
    """集合中仍有钱包，不允许切换链或重新创建首个钱包。"""

    pass


class WalletIndexError(WalletError):
    """钱包下标越界。"""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"钱包下标越界: {index}（当前共 {size} 个）")
        self.index = index
        self.size = size


# =============================================================================
# 持久化异常
# =============================================================================


class PersistenceFailure(WalletError):
    """读写键值存储失败或内容无法解析。

    Attributes:
        key: 出错的存储键名（若可确定）。
    """

    def __init__(self, message: str, key: Optional[str] = None) -> None:
        super().__init__(message)
        self.key = key
