"""Countdown timer state machine.

idle -> running -> (paused <-> running) -> idle

The QTimer is the only tick source. It runs exactly while the state is
running and is stopped synchronously on every transition out of it, so a
queued timeout can never land after a pause or reset. Elapsed time counts
delivered ticks only; seconds lost while the host is suspended are not
replayed.
"""

import logging
import math
from dataclasses import dataclass

from PySide6.QtCore import QObject, QTimer, Signal

from BackEnd.core.clock import fmt_mmss, utc_now_iso
from BackEnd.core.errors import InvalidConfiguration
from BackEnd.core.models import StudySession, TimerState

log = logging.getLogger(__name__)

DEFAULT_MINUTES = 60
TICK_INTERVAL_MS = 1000


def parse_minutes(value) -> int:
	"""Validate a minutes value from code or from the text field."""
	if isinstance(value, bool):
		raise InvalidConfiguration(f"minutes must be a number, got {value!r}")
	if isinstance(value, str):
		text = value.strip()
		try:
			minutes = int(text)
		except ValueError:
			raise InvalidConfiguration(f"minutes must be a whole number, got {value!r}") from None
	elif isinstance(value, int):
		minutes = value
	elif isinstance(value, float) and value.is_integer():
		minutes = int(value)
	else:
		raise InvalidConfiguration(f"minutes must be a whole number, got {value!r}")
	if minutes < 1:
		raise InvalidConfiguration(f"minutes must be at least 1, got {minutes}")
	return minutes


def round_half_up(x: float) -> int:
	# round() would send 0.5 to 0 and 2.5 to 2
	return int(math.floor(x + 0.5))


@dataclass(frozen=True)
class TimerSnapshot:
	state: TimerState
	remaining_sec: int
	elapsed_sec: int
	configured_minutes: int

	@property
	def display(self) -> str:
		return fmt_mmss(self.remaining_sec)


class TimerService(QObject):
	tick = Signal(int)  # emits remaining seconds
	state_changed = Signal(str)  # emits 'idle', 'running', 'paused'
	session_completed = Signal(object)  # emits the recorded StudySession

	def __init__(self, app_state, minutes: int = DEFAULT_MINUTES, now=utc_now_iso):
		super().__init__()
		self.app_state = app_state
		self._now = now
		self.configured_minutes = parse_minutes(minutes)
		self.state = TimerState.IDLE
		self.remaining_sec = self.configured_minutes * 60
		self.elapsed_sec = 0
		self._timer = QTimer(self)
		self._timer.setInterval(TICK_INTERVAL_MS)
		self._timer.timeout.connect(self._on_tick)

	@property
	def running(self) -> bool:
		return self.state is TimerState.RUNNING

	@property
	def paused(self) -> bool:
		return self.state is TimerState.PAUSED

	@property
	def ticking(self) -> bool:
		"""True while the underlying tick source is scheduled."""
		return self._timer.isActive()

	def snapshot(self) -> TimerSnapshot:
		return TimerSnapshot(
			state=self.state,
			remaining_sec=self.remaining_sec,
			elapsed_sec=self.elapsed_sec,
			configured_minutes=self.configured_minutes,
		)

	def format_remaining(self) -> str:
		return fmt_mmss(self.remaining_sec)

	def _emit_state(self):
		self.state_changed.emit(self.state.value)
		self.tick.emit(self.remaining_sec)

	# ----- Commands -----
	def configure(self, minutes) -> bool:
		"""Set the countdown length. Only honoured while idle."""
		if self.state is not TimerState.IDLE:
			log.warning("Ignoring configure(%r) while %s", minutes, self.state.value)
			return False
		try:
			self.configured_minutes = parse_minutes(minutes)
		except InvalidConfiguration as e:
			log.warning("Rejected timer configuration: %s", e)
			return False
		self.remaining_sec = self.configured_minutes * 60
		self.tick.emit(self.remaining_sec)
		return True

	def start(self):
		if self.state is TimerState.RUNNING:
			return
		if self.state is TimerState.IDLE:
			self.remaining_sec = self.configured_minutes * 60
			self.elapsed_sec = 0
		# from paused: remaining_sec and elapsed_sec are the values captured at pause
		self.state = TimerState.RUNNING
		self._timer.start()
		self._emit_state()

	def pause(self) -> bool:
		if self.state is not TimerState.RUNNING:
			return False
		self._timer.stop()
		self.state = TimerState.PAUSED
		self._emit_state()
		return True

	def toggle(self):
		"""Start/Pause button: pause while running, otherwise start or resume."""
		if self.running:
			self.pause()
		else:
			self.start()

	def reset(self):
		self._timer.stop()
		self.state = TimerState.IDLE
		self.remaining_sec = self.configured_minutes * 60
		self.elapsed_sec = 0
		self._emit_state()

	def advance(self):
		"""Apply one delivered tick."""
		if self.state is not TimerState.RUNNING:
			return
		self.remaining_sec -= 1
		self.elapsed_sec += 1
		self.tick.emit(self.remaining_sec)
		if self.remaining_sec <= 0:
			self._complete()

	def _on_tick(self):
		self.advance()

	def _complete(self):
		self._timer.stop()
		self.state = TimerState.IDLE
		self.remaining_sec = 0
		if self.elapsed_sec > 0:
			session = StudySession(
				date=self._now(),
				duration=round_half_up(self.elapsed_sec / 60),
				work_type=self.app_state.selected_work_type,
			)
			self.app_state.record_session(session)
			log.info(
				"Recorded %d minute session (%s)",
				session.duration, session.work_type or "no work type",
			)
			self.session_completed.emit(session)
		self.elapsed_sec = 0
		self.state_changed.emit(self.state.value)
