"""钱包派生流水线与钱包集合操作，支持 Solana 与 Ethereum 双链。

集合操作均作用于显式传入的 WalletCollection：先在副本上完成全部派生，
成功后才写回原集合，失败时原集合保持不变。
"""

from typing import Optional, Sequence

from loguru import logger

from config import MASK_CHAR, MASK_MAX_LENGTH, ChainType
from derivation import account_index_from_path, build_path, derive_key
from exceptions import (
    ChainNotSelected,
    CollectionNotEmpty,
    NoMnemonic,
    UnsupportedChain,
    WalletIndexError,
)
from keypair_factory import from_derived_key
from mnemonic_manager import ensure_valid_mnemonic, generate_mnemonic, mnemonic_to_seed, split_words
from models import Wallet, WalletCollection


def derive_wallet(chain_type: ChainType, mnemonic: str, account_index: int) -> Wallet:
    """助记词 → 种子 → 路径派生 → 密钥对，返回完整钱包记录。"""
    if not isinstance(chain_type, ChainType):
        raise UnsupportedChain(f"未支持的链类型: {chain_type!r}")
    seed = mnemonic_to_seed(mnemonic)
    path = build_path(chain_type, account_index)
    keypair = from_derived_key(chain_type, derive_key(path, seed))
    logger.debug("已派生 {} 钱包: {}", chain_type.display_name, path)
    return Wallet(
        public_key=keypair.public_key,
        private_key=keypair.private_key,
        mnemonic=mnemonic,
        path=path,
    )


def next_index_for(wallets: Sequence[Wallet]) -> int:
    """由已有钱包路径推算下一个账户序号（无钱包时为 0）。"""
    if not wallets:
        return 0
    return max(account_index_from_path(w.path) for w in wallets) + 1


# ------------------------- 集合操作 ------------------------- #
def choose_chain(collection: WalletCollection, chain_type: ChainType) -> WalletCollection:
    """选择链类型；集合中已有钱包时不允许切换。"""
    if not isinstance(chain_type, ChainType):
        raise UnsupportedChain(f"未支持的链类型: {chain_type!r}")
    if not collection.is_empty and collection.chain_type is not chain_type:
        raise CollectionNotEmpty("集合中仍有钱包，请先清空再切换链")
    collection.chain_type = chain_type
    return collection


def plan_first_wallet(
    collection: WalletCollection,
    chain_type: Optional[ChainType] = None,
    mnemonic_input: str = "",
) -> WalletCollection:
    """计算创建首个钱包后的新状态，不修改原集合。

    输入为空时生成新助记词，否则校验后导入；派生账户序号 0。
    """
    if not collection.is_empty:
        raise CollectionNotEmpty("集合中已有钱包，请使用追加钱包")
    target_chain = chain_type or collection.chain_type
    if target_chain is None:
        raise ChainNotSelected("请先选择区块链")
    updated = choose_chain(collection.copy(), target_chain)

    phrase = mnemonic_input.strip()
    if phrase:
        ensure_valid_mnemonic(phrase)
    else:
        phrase = generate_mnemonic()

    wallet = derive_wallet(target_chain, phrase, 0)
    updated.mnemonic_words = split_words(phrase)
    updated.wallets = [wallet]
    updated.visible = [False]
    updated.next_account_index = 1
    return updated


def plan_add_wallet(collection: WalletCollection) -> WalletCollection:
    """计算追加一个钱包后的新状态：复用助记词，序号取高水位。"""
    if not collection.has_mnemonic:
        raise NoMnemonic("尚未生成助记词，请先创建钱包")
    if collection.chain_type is None:
        raise ChainNotSelected("请先选择区块链")
    index = collection.next_account_index
    wallet = derive_wallet(collection.chain_type, collection.mnemonic, index)
    updated = collection.copy()
    updated.wallets.append(wallet)
    updated.visible.append(False)
    updated.next_account_index = index + 1
    return updated


def plan_delete_wallet(collection: WalletCollection, index: int) -> WalletCollection:
    """计算删除指定下标钱包后的新状态；其余钱包的路径保持不变。"""
    _check_index(collection, index)
    updated = collection.copy()
    del updated.wallets[index]
    del updated.visible[index]
    return updated


def create_first_wallet(
    collection: WalletCollection,
    chain_type: Optional[ChainType] = None,
    mnemonic_input: str = "",
) -> Wallet:
    """创建首个钱包并写回集合。"""
    collection.replace_with(plan_first_wallet(collection, chain_type, mnemonic_input))
    return collection.wallets[-1]


def add_wallet(collection: WalletCollection) -> Wallet:
    """追加钱包并写回集合。"""
    collection.replace_with(plan_add_wallet(collection))
    return collection.wallets[-1]


def delete_wallet(collection: WalletCollection, index: int) -> Wallet:
    """删除并返回指定下标的钱包。"""
    updated = plan_delete_wallet(collection, index)
    removed = collection.wallets[index]
    collection.replace_with(updated)
    return removed


def clear_all(collection: WalletCollection) -> None:
    """清空钱包、助记词与链选择。"""
    collection.replace_with(WalletCollection())


# ------------------------- 展示辅助 ------------------------- #
def toggle_visibility(collection: WalletCollection, index: int) -> bool:
    """切换私钥显示开关，仅影响展示，不构成安全边界。"""
    _check_index(collection, index)
    collection.visible[index] = not collection.visible[index]
    return collection.visible[index]


def mask_value(value: str) -> str:
    """返回私钥掩码。"""
    return MASK_CHAR * min(MASK_MAX_LENGTH, len(value))


def wallet_at(collection: WalletCollection, index: int) -> Wallet:
    _check_index(collection, index)
    return collection.wallets[index]


def display_private_key(collection: WalletCollection, index: int) -> str:
    """根据显示开关返回明文或掩码。"""
    private_key = wallet_at(collection, index).private_key
    if collection.visible[index]:
        return private_key
    return mask_value(private_key)


def _check_index(collection: WalletCollection, index: int) -> None:
    if not 0 <= index < len(collection):
        raise WalletIndexError(index, len(collection))
