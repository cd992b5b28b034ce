"""将派生出的 32 字节密钥材料转换为各链的密钥对与可读标识。"""

from typing import NamedTuple

from base58 import b58encode
from eth_account import Account
from eth_keys import constants as eth_constants
from nacl.signing import SigningKey

from config import ChainType
from exceptions import KeyDerivationError, UnsupportedChain

# 曲线阶常量
SECP256K1_N = eth_constants.SECPK1_N


class Keypair(NamedTuple):
    public_key: str
    private_key: str


def _solana_keypair(derived_key: bytes) -> Keypair:
    """ed25519 种子扩展为 64 字节密钥（种子 ‖ 公钥），均以 Base58 编码。"""
    signing_key = SigningKey(derived_key)
    verify_key = signing_key.verify_key
    secret_key_bytes = signing_key.encode() + verify_key.encode()
    return Keypair(
        public_key=b58encode(bytes(verify_key)).decode("utf-8"),
        private_key=b58encode(secret_key_bytes).decode("utf-8"),
    )


def _ethereum_keypair(derived_key: bytes) -> Keypair:
    """直接作为 secp256k1 私钥，地址为 EIP-55 校验和格式。"""
    scalar = int.from_bytes(derived_key, "big")
    if not 0 < scalar < SECP256K1_N:
        raise KeyDerivationError("派生结果不是合法的 secp256k1 私钥")
    acct = Account.from_key(derived_key)
    return Keypair(public_key=acct.address, private_key="0x" + derived_key.hex())


def from_derived_key(chain_type: ChainType, derived_key: bytes) -> Keypair:
    """按链类型构造密钥对；相同输入总是得到相同输出。"""
    if len(derived_key) != 32:
        raise KeyDerivationError(f"密钥材料长度应为 32 字节，实际 {len(derived_key)}")
    if chain_type is ChainType.SOLANA:
        return _solana_keypair(derived_key)
    if chain_type is ChainType.ETHEREUM:
        return _ethereum_keypair(derived_key)
    raise UnsupportedChain(f"未支持的链类型: {chain_type!r}")
