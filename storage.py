"""钱包集合的本地持久化。

集合状态只通过三个键保存：wallets（钱包数组）、mnemonics（单词数组）、
paths（链类型编码与账户序号高水位）。三个键缺任何一个都视为“无存档”。
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from loguru import logger

from config import STORAGE_KEY_MNEMONICS, STORAGE_KEY_PATHS, STORAGE_KEY_WALLETS, ChainType
from exceptions import InvalidPath, PersistenceFailure
from models import Wallet, WalletCollection
from wallet_service import next_index_for

STATE_KEYS = (STORAGE_KEY_WALLETS, STORAGE_KEY_MNEMONICS, STORAGE_KEY_PATHS)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class MemoryStore:
    """内存键值存储。"""

    def __init__(self, data: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class JsonFileStore:
    """以单个 JSON 对象文件保存所有键，写入时先写临时文件再替换。"""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)

    def _read_all(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceFailure(f"读取存储文件失败: {self._path}: {exc}") from exc
        if not isinstance(data, dict):
            raise PersistenceFailure(f"存储文件格式错误: {self._path}")
        return data

    def _write_all(self, data: Dict[str, str]) -> None:
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
            tmp_path.replace(self._path)
        except OSError as exc:
            raise PersistenceFailure(f"写入存储文件失败: {self._path}: {exc}") from exc


class WalletRepository:
    """在键值存储与 WalletCollection 之间做序列化。"""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def load(self) -> WalletCollection:
        """读取存档；键不全时返回空集合，内容损坏时抛出 PersistenceFailure。"""
        raw = {key: self._get(key) for key in STATE_KEYS}
        if any(value is None for value in raw.values()):
            logger.debug("未找到完整存档，使用空集合")
            return WalletCollection()

        wallets_data = _parse_list(raw[STORAGE_KEY_WALLETS], STORAGE_KEY_WALLETS)
        words = _parse_list(raw[STORAGE_KEY_MNEMONICS], STORAGE_KEY_MNEMONICS)
        codes = _parse_list(raw[STORAGE_KEY_PATHS], STORAGE_KEY_PATHS)
        if not codes:
            raise PersistenceFailure("存档中缺少链类型", key=STORAGE_KEY_PATHS)

        try:
            chain_type = ChainType.from_code(str(codes[0]))
        except ValueError as exc:
            raise PersistenceFailure(f"未知的链类型编码: {codes[0]!r}", key=STORAGE_KEY_PATHS) from exc
        try:
            wallets = [Wallet.from_dict(item) for item in wallets_data]
            next_index = next_index_for(wallets)
        except (KeyError, TypeError, InvalidPath) as exc:
            raise PersistenceFailure(f"钱包存档格式错误: {exc}", key=STORAGE_KEY_WALLETS) from exc
        if len(codes) > 1:
            high_water = codes[1]
            if isinstance(high_water, bool) or not isinstance(high_water, int) or high_water < 0:
                raise PersistenceFailure(f"账户序号高水位无效: {high_water!r}", key=STORAGE_KEY_PATHS)
            next_index = max(next_index, high_water)
        if not all(isinstance(word, str) for word in words):
            raise PersistenceFailure("助记词存档格式错误", key=STORAGE_KEY_MNEMONICS)

        logger.info("已加载 {} 个 {} 钱包", len(wallets), chain_type.display_name)
        return WalletCollection(
            chain_type=chain_type,
            mnemonic_words=list(words),
            wallets=wallets,
            visible=[False] * len(wallets),
            next_account_index=next_index,
        )

    def save(self, collection: WalletCollection) -> None:
        """依次写入 wallets、mnemonics、paths；任一写入失败时恢复三个键的原值再抛出。"""
        if collection.chain_type is None:
            raise PersistenceFailure("未选择链类型，无法保存", key=STORAGE_KEY_PATHS)
        values = {
            STORAGE_KEY_WALLETS: json.dumps([w.to_dict() for w in collection.wallets]),
            STORAGE_KEY_MNEMONICS: json.dumps(collection.mnemonic_words),
            # 第二个元素是账户序号高水位，旧存档没有时按钱包路径推算
            STORAGE_KEY_PATHS: json.dumps([collection.chain_type.code, collection.next_account_index]),
        }
        previous = {key: self._get(key) for key in STATE_KEYS}
        attempted: List[str] = []
        try:
            for key in STATE_KEYS:
                attempted.append(key)
                self._set(key, values[key])
        except PersistenceFailure:
            self._restore(previous, attempted)
            raise
        logger.debug("已保存 {} 个钱包", len(collection))

    def _restore(self, previous: Dict[str, Optional[str]], keys: List[str]) -> None:
        for key in keys:
            try:
                if previous[key] is None:
                    self._store.remove(key)
                else:
                    self._store.set(key, previous[key])
            except Exception as exc:  # noqa: BLE001
                logger.error("恢复存储键 {} 失败: {}", key, exc)

    def clear(self) -> None:
        for key in STATE_KEYS:
            try:
                self._store.remove(key)
            except PersistenceFailure:
                raise
            except Exception as exc:  # noqa: BLE001
                raise PersistenceFailure(f"删除存储键失败: {exc}", key=key) from exc

    def _get(self, key: str) -> Optional[str]:
        try:
            return self._store.get(key)
        except PersistenceFailure:
            raise
        except Exception as exc:  # noqa: BLE001
            raise PersistenceFailure(f"读取存储键失败: {exc}", key=key) from exc

    def _set(self, key: str, value: str) -> None:
        try:
            self._store.set(key, value)
        except PersistenceFailure:
            raise
        except Exception as exc:  # noqa: BLE001
            raise PersistenceFailure(f"写入存储键失败: {exc}", key=key) from exc


def _parse_list(raw: str, key: str) -> List[Any]:
    try:
        value = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise PersistenceFailure(f"存档内容无法解析: {key}", key=key) from exc
    if not isinstance(value, list):
        raise PersistenceFailure(f"存档内容应为数组: {key}", key=key)
    return value
