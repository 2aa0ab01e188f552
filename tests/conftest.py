import os
import sys
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to sys.path so tests can import modules without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from PyQt6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def app():
    return QApplication.instance() or QApplication([])


class FakeElapsedTimer:
    """QElapsedTimer の代わりに決まった経過時間(ms)を返す"""

    def __init__(self, steps):
        self.steps = list(steps)
        self.started = 0

    def start(self):
        self.started += 1

    def restart(self):
        return self.steps.pop(0)


@pytest.fixture
def fake_elapsed():
    return FakeElapsedTimer
