"""测试公共夹具。"""

import pytest

from collaborators import MemoryClipboard, RecordingNotifier
from session import WalletSession
from storage import MemoryStore


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def clipboard() -> MemoryClipboard:
    return MemoryClipboard()


@pytest.fixture
def session(store, notifier, clipboard) -> WalletSession:
    return WalletSession(store, notifier=notifier, clipboard=clipboard)
