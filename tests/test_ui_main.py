import pytest

pytest.importorskip("PySide6.QtWidgets")

from BackEnd.core.models import YearMonth
from BackEnd.services.timer_service import TimerService
from FrontEnd.ui_main import MainWindow
from tests.helpers import FIXED_NOW, run_ticks


@pytest.fixture
def window(core_app, state):
	state.add_work_type("Math")
	state.add_work_type("Art")
	service = TimerService(state, minutes=1, now=lambda: FIXED_NOW)
	win = MainWindow(state, service)
	yield win
	win.close()
	win.deleteLater()


def test_initial_window_state(window):
	assert window.timer_label.text() == "01:00"
	assert window.work_type_combo.count() == 3
	assert window.work_type_combo.currentData() == ""
	assert not window.remove_type_btn.isEnabled()
	assert window.month_combo.count() == 3
	assert window.month_combo.currentData() == "2024-03"
	assert window.prev_btn.isEnabled()
	assert not window.next_btn.isEnabled()


def test_rejected_minutes_revert_the_input(window):
	window.minutes_input.setText("abc")
	window._on_minutes_entered()
	assert window.minutes_input.text() == "1"
	assert window.timer_service.configured_minutes == 1

	window.minutes_input.setText("5")
	window._on_minutes_entered()
	assert window.timer_service.configured_minutes == 5
	assert window.timer_label.text() == "05:00"


def test_start_and_reset_buttons(window):
	window.start_pause_btn.click()
	assert window.timer_service.running
	assert window.start_pause_btn.text() == "Pause"
	assert not window.minutes_input.isEnabled()
	window.start_pause_btn.click()
	assert window.timer_service.paused
	assert window.start_pause_btn.text() == "Start"
	window.reset_btn.click()
	assert window.minutes_input.isEnabled()
	assert window.timer_label.text() == "01:00"


def test_add_select_and_remove_work_type(window, state):
	window.new_type_input.setText("Bio")
	window._add_work_type()
	assert window.work_type_combo.count() == 4
	assert window.new_type_input.text() == ""

	window._on_work_type_selected(window.work_type_combo.findData("Math"))
	assert state.selected_work_type == "Math"
	assert window.remove_type_btn.isEnabled()

	window._remove_selected_work_type()
	assert state.work_types == ("Art", "Bio")
	assert state.selected_work_type == ""
	assert window.work_type_combo.count() == 3
	assert window.work_type_combo.currentData() == ""
	assert not window.remove_type_btn.isEnabled()


def test_month_navigation_buttons(window, state):
	window.prev_btn.click()
	assert state.selected_month == YearMonth(2024, 2)
	assert window.month_combo.currentData() == "2024-02"
	assert window.next_btn.isEnabled()
	window.prev_btn.click()
	assert state.selected_month == YearMonth(2024, 1)
	assert not window.prev_btn.isEnabled()
	window.next_btn.click()
	assert state.selected_month == YearMonth(2024, 2)


def test_completed_session_refreshes_summary(window, state):
	window._on_work_type_selected(window.work_type_combo.findData("Math"))
	window.timer_service.start()
	run_ticks(window.timer_service, 60)
	assert len(state.history) == 1
	assert window.summary.total_value.text() == "0.02 hours"
	assert window.summary.average_value.text() == "0.02 hours"
	assert window.month_total_label.text() == "Total: 0.02 hours"
	assert window.start_pause_btn.text() == "Start"


def test_dark_mode_toggle_persists(window, state):
	window.dark_toggle.setChecked(not state.dark_mode)
	assert state.dark_mode is False
	assert "#0D1117" not in window.styleSheet()
