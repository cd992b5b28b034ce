"""派生路径与 SLIP-0010 ed25519 派生测试。"""

import pytest

from config import ChainType
from derivation import account_index_from_path, build_path, derive_key, parse_path
from exceptions import InvalidPath, UnsupportedChain
from mnemonic_manager import mnemonic_to_seed
from tests.vectors import ABANDON_MNEMONIC, ETH_KEY_0

SLIP10_SEED = bytes.fromhex("000102030405060708090a0b0c0d0e0f")


class TestBuildPath:
    def test_paths_per_chain(self) -> None:
        assert build_path(ChainType.ETHEREUM, 0) == "m/44'/60'/0'/0'"
        assert build_path(ChainType.SOLANA, 7) == "m/44'/501'/0'/7'"

    def test_rejects_unknown_chain(self) -> None:
        with pytest.raises(UnsupportedChain):
            build_path("60", 0)  # type: ignore[arg-type]

    def test_rejects_negative_index(self) -> None:
        with pytest.raises(InvalidPath):
            build_path(ChainType.SOLANA, -1)


class TestParsePath:
    def test_parse(self) -> None:
        assert parse_path("m/44'/501'/0'/3'") == [44, 501, 0, 3]
        assert account_index_from_path("m/44'/60'/0'/12'") == 12

    @pytest.mark.parametrize(
        "path",
        [
            "",
            "m",
            "m/",
            "44'/60'/0'/0'",
            "m/44/60'/0'/0'",
            "m/44'/60'/0'/0",
            "m/44'/-1'/0'/0'",
            "m/44'/abc'/0'/0'",
            "m/44'//0'/0'",
            "m/44h/60'/0'/0'",
            "m/2147483648'",
        ],
    )
    def test_invalid_paths(self, path: str) -> None:
        with pytest.raises(InvalidPath):
            parse_path(path)


class TestDeriveKey:
    def test_slip10_vectors(self) -> None:
        """SLIP-0010 ed25519 官方测试向量 1。"""
        assert derive_key("m/0'", SLIP10_SEED).hex() == (
            "68e0fe46dfb67e368c75379acec591dad19df3cde26e63b93a8e704f1dade7a3"
        )
        assert derive_key("m/0'/1'", SLIP10_SEED).hex() == (
            "b1d0bad404bf35da785a64ca1ac54b2617211d2777696fbffaf208f746ae84f2"
        )

    def test_ethereum_path_from_mnemonic(self) -> None:
        seed = mnemonic_to_seed(ABANDON_MNEMONIC)
        key = derive_key("m/44'/60'/0'/0'", seed)
        assert len(key) == 32
        assert "0x" + key.hex() == ETH_KEY_0

    def test_deterministic_and_index_sensitive(self) -> None:
        seed = mnemonic_to_seed(ABANDON_MNEMONIC)
        first = derive_key("m/44'/501'/0'/0'", seed)
        assert derive_key("m/44'/501'/0'/0'", seed) == first
        assert derive_key("m/44'/501'/0'/1'", seed) != first

    def test_malformed_path_fails_before_derivation(self) -> None:
        with pytest.raises(InvalidPath):
            derive_key("m/44'/60'/0'/0", SLIP10_SEED)
