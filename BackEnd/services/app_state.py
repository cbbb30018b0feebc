"""Process-wide application state shared by the timer and the stats views.

``AppState`` owns the study history, the work-type catalog, the selected
work type, the displayed month and the dark-mode preference. The timer
service is the only caller of ``record_session``; everything else reads the
history through the derived views below.
"""

import logging
from typing import Callable, List, Optional, Tuple, Union

from BackEnd.core.clock import local_today
from BackEnd.core.models import StudySession, YearMonth
from BackEnd.repos import state_repo
from BackEnd.services import stats_service

log = logging.getLogger(__name__)


class AppState:
	def __init__(self, dbfile=None, today: Callable = local_today):
		self.dbfile = dbfile
		self._today = today
		self._history: List[StudySession] = []
		self._work_types: List[str] = []
		self.selected_work_type = ""
		self.dark_mode = state_repo.DEFAULT_DARK_MODE
		self.selected_month = YearMonth.of(today())

	# ----- Load / save hooks -----
	def load(self) -> "AppState":
		"""Read every persisted key once; missing or corrupt keys use defaults."""
		self._history = state_repo.load_history(self.dbfile)
		self._work_types = state_repo.load_work_types(self.dbfile)
		self.dark_mode = state_repo.load_dark_mode(self.dbfile)
		if self.selected_work_type not in self._work_types:
			self.selected_work_type = ""
		log.info(
			"Loaded %d session(s) and %d work type(s)",
			len(self._history), len(self._work_types),
		)
		return self

	def _save_work_types(self) -> None:
		state_repo.save_work_types(self._work_types, self.dbfile)

	@property
	def history(self) -> Tuple[StudySession, ...]:
		return tuple(self._history)

	@property
	def work_types(self) -> Tuple[str, ...]:
		return tuple(self._work_types)

	def record_session(self, session: StudySession) -> None:
		"""Append a completed session and persist the whole history."""
		self._history.append(session)
		state_repo.save_history(self._history, self.dbfile)

	# ----- Work-type catalog -----
	def add_work_type(self, label: str) -> bool:
		"""Add label to the catalog. Empty or duplicate labels are ignored."""
		label = (label or "").strip()
		if not label or label in self._work_types:
			return False
		self._work_types.append(label)
		self._save_work_types()
		return True

	def remove_work_type(self, label: str) -> bool:
		if label not in self._work_types:
			return False
		self._work_types.remove(label)
		if self.selected_work_type == label:
			self.selected_work_type = ""
		self._save_work_types()
		return True

	def select_work_type(self, label: str) -> bool:
		if label and label not in self._work_types:
			log.warning("Ignoring selection of unknown work type %r", label)
			return False
		self.selected_work_type = label or ""
		return True

	# ----- Month navigation -----
	def selectable_months(self) -> List[YearMonth]:
		return stats_service.selectable_months(self._today())

	def select_month(self, month: Union[YearMonth, str]) -> bool:
		if isinstance(month, str):
			try:
				month = YearMonth.parse(month)
			except ValueError:
				log.warning("Ignoring malformed month %r", month)
				return False
		if month not in self.selectable_months():
			return False
		self.selected_month = month
		return True

	def can_go_previous(self) -> bool:
		return self.selected_month.previous() in self.selectable_months()

	def can_go_next(self) -> bool:
		return self.selected_month.next() in self.selectable_months()

	def previous_month(self) -> bool:
		return self.select_month(self.selected_month.previous())

	def next_month(self) -> bool:
		return self.select_month(self.selected_month.next())

	# ----- Dark mode -----
	def set_dark_mode(self, enabled: bool) -> None:
		self.dark_mode = bool(enabled)
		state_repo.save_dark_mode(self.dark_mode, self.dbfile)

	def toggle_dark_mode(self) -> bool:
		self.set_dark_mode(not self.dark_mode)
		return self.dark_mode

	# ----- Derived views -----
	def daily_breakdown(self, month: Optional[YearMonth] = None):
		return stats_service.daily_breakdown(self._history, self._work_types, month or self.selected_month)

	def current_month_breakdown(self):
		return stats_service.current_month_breakdown(self._history, self._work_types, self._today())

	def total_hours(self) -> float:
		return stats_service.total_hours(self.current_month_breakdown())

	def average_hours_per_active_day(self) -> float:
		return stats_service.average_hours_per_active_day(self._history)
