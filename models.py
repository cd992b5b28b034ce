"""数据模型定义，包含钱包记录与钱包集合。"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from config import ChainType


@dataclass(frozen=True)
class Wallet:
    """单个钱包记录模型，创建后公钥、私钥与路径不可变。"""

    public_key: str
    private_key: str
    mnemonic: str
    path: str

    def to_dict(self) -> Dict[str, str]:
        """转换为持久化格式（字段名保持 camelCase）。"""
        return {
            "publicKey": self.public_key,
            "privateKey": self.private_key,
            "mnemonic": self.mnemonic,
            "path": self.path,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Wallet":
        return Wallet(
            public_key=str(data["publicKey"]),
            private_key=str(data["privateKey"]),
            mnemonic=str(data["mnemonic"]),
            path=str(data["path"]),
        )


@dataclass
class WalletCollection:
    """一组共享同一助记词与链类型的钱包。

    visible 与 wallets 等长，仅作为私钥明文/掩码展示的开关；
    next_account_index 是账户序号的高水位，删除钱包后不会回退。
    """

    chain_type: Optional[ChainType] = None
    mnemonic_words: List[str] = field(default_factory=list)
    wallets: List[Wallet] = field(default_factory=list)
    visible: List[bool] = field(default_factory=list)
    next_account_index: int = 0

    @property
    def mnemonic(self) -> str:
        return " ".join(self.mnemonic_words)

    @property
    def has_mnemonic(self) -> bool:
        return bool(self.mnemonic_words)

    @property
    def is_empty(self) -> bool:
        return not self.wallets

    def __len__(self) -> int:
        return len(self.wallets)

    def copy(self) -> "WalletCollection":
        """浅拷贝列表字段；Wallet 本身不可变，可直接共享。"""
        return WalletCollection(
            chain_type=self.chain_type,
            mnemonic_words=list(self.mnemonic_words),
            wallets=list(self.wallets),
            visible=list(self.visible),
            next_account_index=self.next_account_index,
        )

    def replace_with(self, other: "WalletCollection") -> None:
        """用另一份状态原地覆盖当前集合。"""
        self.chain_type = other.chain_type
        self.mnemonic_words = list(other.mnemonic_words)
        self.wallets = list(other.wallets)
        self.visible = list(other.visible)
        self.next_account_index = other.next_account_index
