"""
Shared fixtures.

Qt runs on the offscreen platform so the widget tests need no display.
"""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from timeline_visualizer.logging import TimelineLog


@pytest.fixture
def qapp():
    """Ensure QApplication exists for widgets, timers and signals."""
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture(autouse=True)
def captured_logs():
    """Route timeline logs into a list instead of the console."""
    records = []
    TimelineLog.set_handler(lambda level, message: records.append((level, message)))
    yield records
    TimelineLog.set_handler(None)
