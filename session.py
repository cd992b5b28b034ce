"""钱包会话：持有一个钱包集合，负责持久化、通知与剪贴板交互。

每个变更操作先计算新状态并写入存储，写入成功后才更新内存中的集合；
每个完成的操作（无论成功或失败）都发出一条通知。
"""

from typing import Optional

from loguru import logger

import wallet_service
from collaborators import Clipboard, LogNotifier, MemoryClipboard, Notifier
from config import ChainType
from exceptions import InvalidMnemonic, NoMnemonic, PersistenceFailure, WalletError
from models import Wallet, WalletCollection
from storage import KeyValueStore, WalletRepository


class WalletSession:
    """界面层使用的钱包会话。

    Usage:
        session = WalletSession(JsonFileStore(WALLET_STORE_FILE))
        session.load()
        session.choose_chain(ChainType.SOLANA)
        wallet = session.create_first_wallet()
        session.add_wallet()
    """

    def __init__(
        self,
        store: KeyValueStore,
        notifier: Optional[Notifier] = None,
        clipboard: Optional[Clipboard] = None,
    ) -> None:
        self._repository = WalletRepository(store)
        self._notifier: Notifier = notifier or LogNotifier()
        self._clipboard: Clipboard = clipboard or MemoryClipboard()
        self._collection = WalletCollection()

    @property
    def collection(self) -> WalletCollection:
        return self._collection

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    @notifier.setter
    def notifier(self, value: Notifier) -> None:
        self._notifier = value

    @property
    def clipboard(self) -> Clipboard:
        return self._clipboard

    @clipboard.setter
    def clipboard(self, value: Clipboard) -> None:
        self._clipboard = value

    # ------------------------- 加载 ------------------------- #
    def load(self) -> WalletCollection:
        """读取存档；失败时回退为空集合（未选择链）。"""
        try:
            loaded = self._repository.load()
        except PersistenceFailure as exc:
            logger.error("加载钱包存档失败: {}", exc)
            self._notifier.error("加载已保存的钱包失败")
            loaded = WalletCollection()
        self._collection.replace_with(loaded)
        return self._collection

    # ------------------------- 变更操作 ------------------------- #
    def choose_chain(self, chain_type: ChainType) -> None:
        """选择链类型（仅在内存中，首次生成钱包时一并保存）。"""
        try:
            wallet_service.choose_chain(self._collection, chain_type)
        except WalletError as exc:
            self._report(exc)
            raise
        self._notifier.info(f"已选择 {chain_type.display_name}")

    def create_first_wallet(
        self, chain_type: Optional[ChainType] = None, mnemonic_input: str = ""
    ) -> Wallet:
        """生成或导入助记词并创建首个钱包。"""
        try:
            updated = wallet_service.plan_first_wallet(self._collection, chain_type, mnemonic_input)
            self._repository.save(updated)
        except WalletError as exc:
            self._report(exc)
            raise
        self._collection.replace_with(updated)
        wallet = self._collection.wallets[-1]
        logger.info("已创建首个钱包: {}", wallet.path)
        self._notifier.success("钱包创建成功")
        return wallet

    def add_wallet(self) -> Wallet:
        """复用当前助记词追加下一个账户序号的钱包。"""
        try:
            updated = wallet_service.plan_add_wallet(self._collection)
            self._repository.save(updated)
        except WalletError as exc:
            self._report(exc)
            raise
        self._collection.replace_with(updated)
        wallet = self._collection.wallets[-1]
        logger.info("已追加钱包: {}", wallet.path)
        self._notifier.success("已追加新钱包")
        return wallet

    def delete_wallet(self, index: int) -> Wallet:
        """删除指定下标的钱包，其余钱包保持原有路径与顺序。"""
        try:
            updated = wallet_service.plan_delete_wallet(self._collection, index)
            self._repository.save(updated)
        except WalletError as exc:
            self._report(exc)
            raise
        removed = self._collection.wallets[index]
        self._collection.replace_with(updated)
        logger.info("已删除钱包: {}", removed.path)
        self._notifier.success("钱包已删除")
        return removed

    def clear_all(self) -> None:
        """清空钱包、助记词与链选择，并删除存档。"""
        try:
            self._repository.clear()
        except WalletError as exc:
            self._report(exc)
            raise
        wallet_service.clear_all(self._collection)
        logger.info("已清空所有钱包")
        self._notifier.info("已清空所有钱包")

    # ------------------------- 展示与复制 ------------------------- #
    def toggle_visibility(self, index: int) -> bool:
        """切换私钥明文显示，仅为展示开关。"""
        return wallet_service.toggle_visibility(self._collection, index)

    def display_private_key(self, index: int) -> str:
        return wallet_service.display_private_key(self._collection, index)

    def copy_public_key(self, index: int) -> bool:
        return self._copy(self._wallet_at(index).public_key)

    def copy_private_key(self, index: int) -> bool:
        """仅在私钥已显示时复制。"""
        wallet = self._wallet_at(index)
        if not self._collection.visible[index]:
            self._notifier.warning("请先显示私钥再复制")
            return False
        return self._copy(wallet.private_key)

    def copy_mnemonic(self) -> bool:
        if not self._collection.has_mnemonic:
            self._notifier.warning("未找到助记词，请先生成钱包")
            return False
        return self._copy(self._collection.mnemonic)

    def _wallet_at(self, index: int) -> Wallet:
        try:
            return wallet_service.wallet_at(self._collection, index)
        except WalletError as exc:
            self._report(exc)
            raise

    def _copy(self, text: str) -> bool:
        if self._clipboard.write_text(text):
            self._notifier.success("已复制到剪贴板")
            return True
        self._notifier.error("复制失败")
        return False

    def _report(self, exc: WalletError) -> None:
        """将错误转换为一条通知。"""
        logger.warning("操作失败: {}: {}", type(exc).__name__, exc)
        if isinstance(exc, NoMnemonic):
            self._notifier.warning("未找到助记词，请先生成钱包")
        elif isinstance(exc, InvalidMnemonic):
            self._notifier.error("助记词无效")
        elif isinstance(exc, PersistenceFailure):
            self._notifier.error("保存钱包失败")
        else:
            self._notifier.error(str(exc))
