import pytest

from BackEnd.core.errors import InvalidConfiguration
from BackEnd.core.models import StudySession, TimerState
from BackEnd.services.app_state import AppState
from BackEnd.services.timer_service import (
	DEFAULT_MINUTES, TimerService, parse_minutes, round_half_up,
)
from tests.helpers import FIXED_NOW, TODAY, run_ticks


def test_defaults(core_app, state):
	service = TimerService(state)
	assert service.configured_minutes == DEFAULT_MINUTES
	assert service.state is TimerState.IDLE
	assert service.format_remaining() == "60:00"
	assert not service.ticking


@pytest.mark.parametrize("minutes", [1, 25, 90, "45", " 5 "])
def test_configure_then_start_sets_remaining(timer, minutes):
	assert timer.configure(minutes)
	timer.start()
	assert timer.remaining_sec == int(minutes) * 60
	assert timer.elapsed_sec == 0
	assert timer.state is TimerState.RUNNING
	assert timer.ticking


@pytest.mark.parametrize("bad", [0, -5, "abc", "", "1.5", 2.5, None, True])
def test_invalid_configuration_keeps_prior_value(timer, bad):
	timer.configure(30)
	assert timer.configure(bad) is False
	assert timer.configured_minutes == 30
	assert timer.remaining_sec == 30 * 60


def test_configure_rejected_outside_idle(timer):
	timer.configure(10)
	timer.start()
	assert timer.configure(20) is False
	timer.pause()
	assert timer.configure(20) is False
	assert timer.configured_minutes == 10


def test_parse_minutes_raises():
	assert parse_minutes("12") == 12
	assert parse_minutes(3.0) == 3
	with pytest.raises(InvalidConfiguration) as exc:
		parse_minutes("-1")
	assert exc.value.code == "invalid_configuration"


def test_tick_decrements_remaining_and_counts_elapsed(timer):
	timer.configure(2)
	timer.start()
	run_ticks(timer, 5)
	assert timer.remaining_sec == 115
	assert timer.elapsed_sec == 5
	assert timer.remaining_sec + timer.elapsed_sec == 2 * 60
	assert timer.format_remaining() == "01:55"


def test_ticks_ignored_unless_running(timer):
	timer.advance()
	assert timer.remaining_sec == 60
	timer.start()
	run_ticks(timer, 3)
	timer.pause()
	run_ticks(timer, 10)
	assert timer.remaining_sec == 57
	assert timer.elapsed_sec == 3


def test_pause_then_start_is_lossless(timer):
	timer.configure(5)
	timer.start()
	run_ticks(timer, 42)
	assert timer.pause()
	assert timer.state is TimerState.PAUSED
	assert not timer.ticking
	before = (timer.remaining_sec, timer.elapsed_sec)
	timer.start()
	assert (timer.remaining_sec, timer.elapsed_sec) == before
	assert timer.state is TimerState.RUNNING
	assert timer.ticking


def test_pause_only_from_running(timer):
	assert timer.pause() is False
	timer.start()
	timer.pause()
	assert timer.pause() is False


def test_toggle_starts_pauses_and_resumes(timer):
	timer.toggle()
	assert timer.running
	run_ticks(timer, 2)
	timer.toggle()
	assert timer.paused
	timer.toggle()
	assert timer.running
	assert timer.elapsed_sec == 2


def test_full_countdown_records_one_session(timer, state):
	state.add_work_type("Math")
	state.select_work_type("Math")
	completed = []
	timer.session_completed.connect(completed.append)
	timer.start()
	run_ticks(timer, 60)

	assert state.history == (StudySession(date=FIXED_NOW, duration=1, work_type="Math"),)
	assert completed == list(state.history)
	assert timer.state is TimerState.IDLE
	assert timer.remaining_sec == 0
	assert timer.elapsed_sec == 0
	assert not timer.ticking

	# the zero crossing is not recorded twice
	run_ticks(timer, 5)
	assert len(state.history) == 1


def test_completion_is_persisted(timer, state):
	timer.start()
	run_ticks(timer, 60)
	reloaded = AppState(today=lambda: TODAY).load()
	assert reloaded.history == state.history


def test_completion_without_selection_records_empty_work_type(timer, state):
	timer.start()
	run_ticks(timer, 60)
	assert state.history[0].work_type == ""


def test_countdown_across_pause_records_full_duration(timer, state):
	timer.configure(2)
	timer.start()
	run_ticks(timer, 30)
	timer.pause()
	timer.start()
	run_ticks(timer, 90)
	assert [s.duration for s in state.history] == [2]


def test_restart_after_completion_begins_new_cycle(timer, state):
	timer.start()
	run_ticks(timer, 60)
	timer.start()
	assert timer.remaining_sec == 60
	assert timer.elapsed_sec == 0
	run_ticks(timer, 60)
	assert len(state.history) == 2


@pytest.mark.parametrize("ticks, pause", [(0, False), (10, False), (10, True)])
def test_reset_never_records(timer, state, ticks, pause):
	timer.configure(3)
	if ticks:
		timer.start()
		run_ticks(timer, ticks)
	if pause:
		timer.pause()
	timer.reset()
	assert state.history == ()
	assert timer.state is TimerState.IDLE
	assert timer.remaining_sec == 3 * 60
	assert timer.elapsed_sec == 0
	assert not timer.ticking


def test_state_changed_signals(timer):
	states = []
	timer.state_changed.connect(states.append)
	timer.start()
	timer.pause()
	timer.start()
	run_ticks(timer, 60)
	timer.reset()
	assert states == ["running", "paused", "running", "idle", "idle"]


def test_round_half_up():
	assert round_half_up(0.49) == 0
	assert round_half_up(0.5) == 1
	assert round_half_up(1.5) == 2
	assert round_half_up(2.5) == 3


def test_snapshot_reports_display_state(timer):
	timer.start()
	run_ticks(timer, 1)
	snap = timer.snapshot()
	assert snap.state is TimerState.RUNNING
	assert (snap.remaining_sec, snap.elapsed_sec, snap.configured_minutes) == (59, 1, 1)
	assert snap.display == "00:59"
