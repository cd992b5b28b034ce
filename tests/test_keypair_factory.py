"""各链密钥对构造测试。"""

import pytest
from base58 import b58decode

from config import ChainType
from exceptions import KeyDerivationError, UnsupportedChain
from keypair_factory import SECP256K1_N, from_derived_key
from tests.vectors import ETH_ADDRESS_0, ETH_KEY_0


class TestEthereum:
    def test_known_address(self) -> None:
        derived = bytes.fromhex(ETH_KEY_0[2:])
        keypair = from_derived_key(ChainType.ETHEREUM, derived)
        assert keypair.private_key == ETH_KEY_0
        assert keypair.public_key == ETH_ADDRESS_0

    def test_private_key_is_lowercase_hex(self) -> None:
        keypair = from_derived_key(ChainType.ETHEREUM, b"\xab" * 32)
        assert keypair.private_key == "0x" + "ab" * 32
        assert keypair.public_key.startswith("0x")
        assert len(keypair.public_key) == 42

    @pytest.mark.parametrize(
        "derived",
        [b"\x00" * 32, SECP256K1_N.to_bytes(32, "big"), b"\xff" * 32],
    )
    def test_out_of_range_scalar(self, derived: bytes) -> None:
        with pytest.raises(KeyDerivationError):
            from_derived_key(ChainType.ETHEREUM, derived)


class TestSolana:
    def test_secret_key_layout(self) -> None:
        """64 字节私钥 = 32 字节种子 ‖ 32 字节公钥。"""
        derived = bytes(range(32))
        keypair = from_derived_key(ChainType.SOLANA, derived)
        secret = b58decode(keypair.private_key)
        public = b58decode(keypair.public_key)
        assert len(secret) == 64
        assert len(public) == 32
        assert secret[:32] == derived
        assert secret[32:] == public

    def test_pure_function(self) -> None:
        derived = b"\x42" * 32
        assert from_derived_key(ChainType.SOLANA, derived) == from_derived_key(
            ChainType.SOLANA, derived
        )


class TestErrors:
    def test_unsupported_chain(self) -> None:
        with pytest.raises(UnsupportedChain):
            from_derived_key("501", b"\x01" * 32)  # type: ignore[arg-type]

    def test_wrong_length(self) -> None:
        with pytest.raises(KeyDerivationError):
            from_derived_key(ChainType.SOLANA, b"\x01" * 31)
