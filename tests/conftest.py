import os

import pytest

from BackEnd.services.app_state import AppState
from BackEnd.services.timer_service import TimerService
from tests.helpers import FIXED_NOW, TODAY


@pytest.fixture(scope="session")
def core_app():
	# one application per session; the window tests need widgets, timers only need QtCore
	os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
	try:
		from PySide6.QtWidgets import QApplication
	except ImportError:
		from PySide6.QtCore import QCoreApplication as QApplication
	return QApplication.instance() or QApplication([])


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
	monkeypatch.setenv("FLOW_DATA_DIR", str(tmp_path))
	return tmp_path


@pytest.fixture
def state(data_dir):
	return AppState(today=lambda: TODAY).load()


@pytest.fixture
def timer(core_app, state):
	return TimerService(state, minutes=1, now=lambda: FIXED_NOW)
