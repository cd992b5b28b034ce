"""通知与剪贴板协作者接口，以及默认的日志通知器与内存剪贴板。"""

from typing import List, Protocol, Tuple

from loguru import logger


class Notifier(Protocol):
    def success(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...

    def info(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        ...


class Clipboard(Protocol):
    def write_text(self, text: str) -> bool:
        ...


class LogNotifier:
    """把通知写入日志，适合无界面环境。"""

    def success(self, message: str) -> None:
        logger.success(message)

    def error(self, message: str) -> None:
        logger.error(message)

    def info(self, message: str) -> None:
        logger.info(message)

    def warning(self, message: str) -> None:
        logger.warning(message)


class RecordingNotifier:
    """记录所有通知，便于测试与回放。"""

    def __init__(self) -> None:
        self.messages: List[Tuple[str, str]] = []

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    @property
    def levels(self) -> List[str]:
        return [level for level, _ in self.messages]


class MemoryClipboard:
    """进程内剪贴板，保存最近一次写入的文本。"""

    def __init__(self) -> None:
        self.text = ""

    def write_text(self, text: str) -> bool:
        self.text = text
        return True
