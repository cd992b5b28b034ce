"""应用入口，负责配置日志、加载存档与主题并启动 QApplication。"""

import sys

from loguru import logger
from PyQt5.QtWidgets import QApplication

from config import LOG_LEVEL, WALLET_STORE_FILE
from session import WalletSession
from storage import JsonFileStore
from theme_manager import apply_theme, load_theme
from ui_main_window import MainWindow


def setup_logging(level: str = LOG_LEVEL) -> None:
    """只保留一个 stderr 输出；日志中不记录助记词与私钥。"""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}",
    )


def run_app() -> None:
    """启动 Serein 主窗口。"""
    setup_logging()
    app = QApplication(sys.argv)
    theme = load_theme()
    apply_theme(app, theme)

    session = WalletSession(JsonFileStore(WALLET_STORE_FILE))
    window = MainWindow(app=app, session=session, current_theme=theme)
    session.load()
    window.refresh()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    run_app()
