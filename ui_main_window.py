"""主窗口与界面逻辑，包含选链、生成/导入、钱包列表、复制与主题切换。"""

from typing import List

from loguru import logger
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QIcon
from PyQt5.QtWidgets import (
    QApplication,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMenu,
    QMessageBox,
    QPushButton,
    QStatusBar,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from config import ChainType
from exceptions import WalletError
from session import WalletSession
from theme_manager import ThemeName, apply_theme, save_theme


class StatusBarNotifier:
    """把会话通知显示在状态栏，错误额外弹窗提示。"""

    def __init__(self, window: "MainWindow") -> None:
        self._window = window

    def success(self, message: str) -> None:
        self._window.set_status(message)

    def info(self, message: str) -> None:
        self._window.set_status(message)

    def warning(self, message: str) -> None:
        self._window.set_status(message)
        QMessageBox.warning(self._window, "提示", message)

    def error(self, message: str) -> None:
        self._window.set_status(message)
        QMessageBox.critical(self._window, "操作失败", message)


class QtClipboard:
    """系统剪贴板。"""

    def write_text(self, text: str) -> bool:
        clipboard = QApplication.clipboard()
        if clipboard is None:
            return False
        clipboard.setText(text)
        return clipboard.text() == text


class MainWindow(QMainWindow):
    """主窗口，负责用户交互与状态展示。"""

    def __init__(self, app: QApplication, session: WalletSession, current_theme: ThemeName) -> None:
        super().__init__()
        self.app = app
        self.session = session
        self.current_theme: ThemeName = current_theme
        self.show_mnemonic = False
        self.session.notifier = StatusBarNotifier(self)
        self.session.clipboard = QtClipboard()

        self.setWindowTitle("Serein - 多链 HD 钱包")
        self.setMinimumSize(1100, 760)
        self.setWindowIcon(QIcon())  # 可在打包时替换为品牌图标

        self._setup_ui()
        self._init_menu()
        self.refresh()
        self.set_status("本地离线派生，准备就绪")

    # ------------------------- UI 构建 ------------------------- #
    def _setup_ui(self) -> None:
        """搭建界面布局。"""
        central = QWidget(self)
        self.setCentralWidget(central)

        main_layout = QVBoxLayout()
        central.setLayout(main_layout)

        title = QLabel("Serein - 多链 HD 钱包")
        title.setObjectName("TitleLabel")
        title.setAlignment(Qt.AlignCenter)
        main_layout.addWidget(title)

        warning = QLabel("安全提醒：请妥善保管助记词与私钥，不要截图或分享。所有密钥仅在本地派生，不会上传或联网。")
        warning.setWordWrap(True)
        warning.setObjectName("WarningLabel")
        main_layout.addWidget(warning)

        # 选链
        self.chain_group = QGroupBox("选择区块链")
        chain_layout = QHBoxLayout()
        self.chain_group.setLayout(chain_layout)
        for chain_type in ChainType:
            btn = QPushButton(chain_type.display_name)
            btn.clicked.connect(lambda _, c=chain_type: self._choose_chain(c))
            chain_layout.addWidget(btn)
        chain_layout.addStretch()
        main_layout.addWidget(self.chain_group)

        # 生成 / 导入
        self.phrase_group = QGroupBox("助记词")
        phrase_layout = QHBoxLayout()
        self.phrase_group.setLayout(phrase_layout)
        self.phrase_input = QLineEdit()
        self.phrase_input.setPlaceholderText("输入已有助记词导入，留空则生成新的助记词")
        self.phrase_input.textChanged.connect(self._update_generate_text)
        phrase_layout.addWidget(self.phrase_input)
        self.generate_btn = QPushButton("生成钱包")
        self.generate_btn.clicked.connect(self._create_first_wallet)
        phrase_layout.addWidget(self.generate_btn)
        main_layout.addWidget(self.phrase_group)

        # 助记词展示
        self.mnemonic_group = QGroupBox("你的助记词")
        mnemonic_layout = QVBoxLayout()
        self.mnemonic_group.setLayout(mnemonic_layout)
        toggle_row = QHBoxLayout()
        self.mnemonic_toggle_btn = QPushButton()
        self.mnemonic_toggle_btn.clicked.connect(self._toggle_mnemonic)
        toggle_row.addWidget(self.mnemonic_toggle_btn)
        self.copy_mnemonic_btn = QPushButton("复制完整助记词")
        self.copy_mnemonic_btn.clicked.connect(lambda: self.session.copy_mnemonic())
        toggle_row.addWidget(self.copy_mnemonic_btn)
        toggle_row.addStretch()
        mnemonic_layout.addLayout(toggle_row)
        self.words_widget = QWidget()
        self.words_layout = QGridLayout(self.words_widget)
        mnemonic_layout.addWidget(self.words_widget)
        main_layout.addWidget(self.mnemonic_group)

        # 钱包列表
        self.wallets_group = QGroupBox()
        wallets_layout = QVBoxLayout()
        self.wallets_group.setLayout(wallets_layout)
        btn_layout = QHBoxLayout()
        btn_layout.setAlignment(Qt.AlignLeft)
        self.add_btn = QPushButton("追加钱包")
        self.add_btn.clicked.connect(self._add_wallet)
        btn_layout.addWidget(self.add_btn)
        self.clear_btn = QPushButton("清空全部")
        self.clear_btn.setObjectName("DangerButton")
        self.clear_btn.clicked.connect(self._clear_wallets)
        btn_layout.addWidget(self.clear_btn)
        btn_layout.addStretch()
        wallets_layout.addLayout(btn_layout)

        self.table = QTableWidget(0, 5)
        self.table.setHorizontalHeaderLabels(["操作", "序号", "公钥 / 地址", "私钥", "派生路径"])
        self.table.setSelectionBehavior(QTableWidget.SelectRows)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.horizontalHeader().setDefaultSectionSize(210)
        self.table.verticalHeader().setVisible(False)
        wallets_layout.addWidget(self.table)
        main_layout.addWidget(self.wallets_group)
        main_layout.addStretch()

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

    def _init_menu(self) -> None:
        """初始化菜单栏（主题切换）。"""
        menu_bar = self.menuBar()
        view_menu: QMenu = menu_bar.addMenu("视图")
        theme_menu = view_menu.addMenu("主题")

        self.light_action = theme_menu.addAction("浅色模式")
        self.dark_action = theme_menu.addAction("深色模式")
        self.light_action.setCheckable(True)
        self.dark_action.setCheckable(True)

        self.light_action.triggered.connect(lambda: self._switch_theme("light"))
        self.dark_action.triggered.connect(lambda: self._switch_theme("dark"))

        self._refresh_theme_actions()

    # ------------------------- 刷新 ------------------------- #
    def refresh(self) -> None:
        """按集合状态切换各区域可见性并刷新表格。"""
        collection = self.session.collection
        empty = collection.is_empty
        self.chain_group.setVisible(empty and collection.chain_type is None)
        self.phrase_group.setVisible(empty and collection.chain_type is not None)
        self.mnemonic_group.setVisible(collection.has_mnemonic and not empty)
        self.wallets_group.setVisible(not empty)
        if collection.chain_type is not None:
            self.wallets_group.setTitle(f"{collection.chain_type.display_name} 钱包（{len(collection)}）")
        self._refresh_mnemonic()
        self._refresh_table()

    def _refresh_mnemonic(self) -> None:
        self.mnemonic_toggle_btn.setText("收起助记词 ▲" if self.show_mnemonic else "展开助记词 ▼")
        self.words_widget.setVisible(self.show_mnemonic)
        self.copy_mnemonic_btn.setVisible(self.show_mnemonic)
        while self.words_layout.count():
            item = self.words_layout.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()
        for pos, word in enumerate(self.session.collection.mnemonic_words):
            label = QLabel(f"{pos + 1}. {word}")
            label.setObjectName("MnemonicWord")
            self.words_layout.addWidget(label, pos // 4, pos % 4)

    def _refresh_table(self) -> None:
        """根据当前钱包列表刷新表格。"""
        wallets = self.session.collection.wallets
        self.table.setRowCount(len(wallets))
        for row, w in enumerate(wallets):
            self.table.setCellWidget(row, 0, self._build_action_buttons(row))
            items = [
                (1, QTableWidgetItem(f"#{row + 1}")),
                (2, QTableWidgetItem(w.public_key)),
                (3, QTableWidgetItem(self.session.display_private_key(row))),
                (4, QTableWidgetItem(w.path)),
            ]
            for col, item in items:
                item.setFlags(item.flags() & ~Qt.ItemIsEditable)
                self.table.setItem(row, col, item)
        self.table.resizeColumnsToContents()
        self.table.horizontalHeader().setStretchLastSection(True)

    def _build_action_buttons(self, row: int) -> QWidget:
        """为指定行创建操作按钮组。"""
        container = QWidget()
        layout = QHBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        visible = self.session.collection.visible[row]
        buttons: List[QPushButton] = []

        btn_pub = QPushButton("复制公钥")
        btn_pub.setToolTip("复制公钥 / 地址到剪贴板")
        btn_pub.clicked.connect(lambda _, r=row: self.session.copy_public_key(r))
        buttons.append(btn_pub)

        btn_toggle = QPushButton("隐藏私钥" if visible else "显示私钥")
        btn_toggle.clicked.connect(lambda _, r=row: self._toggle_private_key(r))
        buttons.append(btn_toggle)

        btn_priv = QPushButton("复制私钥")
        btn_priv.setToolTip("复制私钥，请勿泄露")
        btn_priv.setEnabled(visible)
        btn_priv.clicked.connect(lambda _, r=row: self.session.copy_private_key(r))
        buttons.append(btn_priv)

        btn_delete = QPushButton("删除")
        btn_delete.setObjectName("DangerButton")
        btn_delete.clicked.connect(lambda _, r=row: self._delete_wallet(r))
        buttons.append(btn_delete)

        for btn in buttons:
            layout.addWidget(btn)
        layout.addStretch()
        return container

    # ------------------------- 事件与逻辑 ------------------------- #
    def _choose_chain(self, chain_type: ChainType) -> None:
        try:
            self.session.choose_chain(chain_type)
        except WalletError:
            return
        self.refresh()

    def _update_generate_text(self, text: str) -> None:
        self.generate_btn.setText("导入钱包" if text.strip() else "生成钱包")

    def _create_first_wallet(self) -> None:
        try:
            self.session.create_first_wallet(mnemonic_input=self.phrase_input.text())
        except WalletError as exc:
            logger.debug("创建首个钱包失败: {}", type(exc).__name__)
            return
        self.phrase_input.clear()
        self.refresh()

    def _add_wallet(self) -> None:
        try:
            self.session.add_wallet()
        except WalletError as exc:
            logger.debug("追加钱包失败: {}", type(exc).__name__)
            return
        self.refresh()

    def _delete_wallet(self, row: int) -> None:
        answer = QMessageBox.question(self, "删除钱包", f"确定删除钱包 #{row + 1} 吗？")
        if answer != QMessageBox.Yes:
            return
        try:
            self.session.delete_wallet(row)
        except WalletError:
            return
        self.refresh()

    def _clear_wallets(self) -> None:
        answer = QMessageBox.question(self, "清空全部", "确定清空所有钱包吗？此操作无法撤销。")
        if answer != QMessageBox.Yes:
            return
        try:
            self.session.clear_all()
        except WalletError:
            return
        self.show_mnemonic = False
        self.refresh()

    def _toggle_private_key(self, row: int) -> None:
        self.session.toggle_visibility(row)
        self._refresh_table()

    def _toggle_mnemonic(self) -> None:
        self.show_mnemonic = not self.show_mnemonic
        self._refresh_mnemonic()

    def set_status(self, text: str) -> None:
        """更新底部状态文本。"""
        self.status_bar.showMessage(text, 3000)

    # ------------------------- 主题 ------------------------- #
    def _switch_theme(self, theme: ThemeName) -> None:
        """切换主题并持久化。"""
        if theme == self.current_theme:
            self._refresh_theme_actions()
            return
        self.current_theme = theme
        apply_theme(self.app, theme)
        try:
            save_theme(theme)
        except OSError:
            self.set_status("主题已切换，但保存设置失败")
        else:
            self.set_status("已切换为深色模式" if theme == "dark" else "已切换为浅色模式")
        self._refresh_theme_actions()

    def _refresh_theme_actions(self) -> None:
        """同步菜单勾选状态。"""
        self.light_action.setChecked(self.current_theme == "light")
        self.dark_action.setChecked(self.current_theme == "dark")
