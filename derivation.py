"""派生路径的构造、解析，以及 SLIP-0010 ed25519 分层派生。

两条链共用同一棵 ed25519 派生树：Solana 直接把结果当作 ed25519 种子，
Ethereum 把同样的 32 字节当作 secp256k1 私钥。因此得到的以太坊地址与
标准 BIP44 secp256k1 钱包（如 MetaMask）并不相同。
"""

import hashlib
import hmac
import re
from typing import List, Tuple

from config import DERIVATION_PATH_TEMPLATE, HARDENED_OFFSET, ChainType
from exceptions import InvalidPath, UnsupportedChain

ED25519_SEED_KEY = b"ed25519 seed"

_SEGMENT_RE = re.compile(r"(\d+)'")


def build_path(chain_type: ChainType, account_index: int) -> str:
    """生成 m/44'/<coin>'/0'/<index>' 形式的路径。"""
    if not isinstance(chain_type, ChainType):
        raise UnsupportedChain(f"未支持的链类型: {chain_type!r}")
    if account_index < 0 or account_index >= HARDENED_OFFSET:
        raise InvalidPath(f"账户序号超出范围: {account_index}")
    return DERIVATION_PATH_TEMPLATE.format(coin_type=chain_type.coin_type, index=account_index)


def parse_path(path: str) -> List[int]:
    """解析路径为不含硬化位的序号列表；每段都必须带 ' 硬化标记。"""
    parts = path.split("/")
    if len(parts) < 2 or parts[0] != "m":
        raise InvalidPath(f"派生路径必须以 m/ 开头: {path!r}")
    indexes = []
    for seg in parts[1:]:
        match = _SEGMENT_RE.fullmatch(seg)
        if match is None:
            raise InvalidPath(f"派生路径段无效（需为带 ' 的非负整数）: {seg!r}")
        index = int(match.group(1))
        if index >= HARDENED_OFFSET:
            raise InvalidPath(f"派生路径段超出范围: {seg!r}")
        indexes.append(index)
    return indexes


def account_index_from_path(path: str) -> int:
    """取出路径最后一段的账户序号。"""
    return parse_path(path)[-1]


def _master_key(seed: bytes) -> Tuple[bytes, bytes]:
    I = hmac.new(ED25519_SEED_KEY, seed, hashlib.sha512).digest()
    return I[:32], I[32:]


def _derive_hardened_child(key: bytes, chain_code: bytes, index: int) -> Tuple[bytes, bytes]:
    data = b"\x00" + key + (index | HARDENED_OFFSET).to_bytes(4, "big")
    I = hmac.new(chain_code, data, hashlib.sha512).digest()
    return I[:32], I[32:]


def derive_key(path: str, seed: bytes) -> bytes:
    """依据 SLIP-0010 从种子派生 32 字节密钥材料，仅支持全硬化路径。"""
    indexes = parse_path(path)
    key, chain_code = _master_key(seed)
    for index in indexes:
        key, chain_code = _derive_hardened_child(key, chain_code, index)
    return key
