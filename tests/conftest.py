"""Shared pytest configuration: run Qt without a display."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

VALID_KEY = "AIza" + "x" * 35


class ManualThreadPool:
    """Thread pool stand-in that runs workers only when the test says so."""

    def __init__(self):
        self.started = []

    def start(self, worker):
        self.started.append(worker)

    def run_next(self):
        self.started.pop(0).run()


@pytest.fixture(scope="session")
def qt_app():
    """Provide the process-wide QApplication needed by timers, widgets and the clipboard."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def valid_key():
    """A credential that passes the local shape check."""
    return VALID_KEY


@pytest.fixture
def thread_pool():
    return ManualThreadPool()
