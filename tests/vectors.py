"""固定测试向量（abandon ×11 about，SLIP-0010 ed25519 派生）。"""

ABANDON_MNEMONIC = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)
ABANDON_SEED_HEX = (
    "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc1"
    "9a5ac40b389cd370d086206dec8aa6c43daea6690f20ad3d8d48b2d2ce9e38e4"
)

ETH_KEY_0 = "0xbca443f5149618b5dbe6e80b5c096ad4280d5a2e8bc0ce3ebc71c9c0878ba5de"
ETH_ADDRESS_0 = "0x2759A6Ad812b8A7B73A63a243816D66F5b72A0A7"
ETH_KEY_1 = "0x99dfaa5ce2c0f16e38f5efb4aa703f9b056e3c0655c6fedf0896e0eca563d81b"
ETH_ADDRESS_1 = "0x904f5439276a7CfE0adC19921aa1b604806f4C0d"
SOL_PUBLIC_0 = "HAgk14JpMQLgt6rVgv7cBQFJWFto5Dqxi472uT3DKpqk"
SOL_SECRET_0 = (
    "27npWoNE4HfmLeQo1TyWcW7NEA28qnsnDK7kcttDQEWrCWnro83HMJ97rMmpvYYZRwDAvG4KRuB7hTBacvwD7bgi"
)
SOL_PUBLIC_1 = "GKreMsHvt8A79VApjboYDq3J4ZCXSJRYYQk9BscMbi1H"

