"""Derived read model over the study history.

Every function here is pure: it takes the history, the work-type catalog and
a month, and returns fresh values without touching its inputs. Session dates
are bucketed by their local calendar date.
"""

import datetime as dt
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from BackEnd.core.clock import local_date_of, local_today
from BackEnd.core.models import StudySession, YearMonth


@dataclass(frozen=True)
class DayBreakdown:
	day: dt.date
	hours: Dict[str, float]  # catalog order
	total: float

	@property
	def label(self) -> str:
		return f"{self.day.day:02}"

	def as_row(self) -> Dict[str, object]:
		"""Chart row: {"date": "dd", <work type>: hours, ..., "total": hours}."""
		row: Dict[str, object] = {"date": self.label}
		row.update(self.hours)
		row["total"] = self.total
		return row


def _dated(history: Sequence[StudySession]) -> List[Tuple[Optional[dt.date], StudySession]]:
	return [(local_date_of(s.date), s) for s in history]


def daily_breakdown(
	history: Sequence[StudySession],
	work_types: Sequence[str],
	month: YearMonth,
) -> List[DayBreakdown]:
	"""Per-day hours for each work type across every day of month."""
	minutes: Dict[Tuple[dt.date, str], int] = {}
	for day, session in _dated(history):
		if day is None or not month.contains(day):
			continue
		key = (day, session.work_type)
		minutes[key] = minutes.get(key, 0) + session.duration

	result = []
	for day in month.days():
		hours = {w: minutes.get((day, w), 0) / 60 for w in work_types}
		result.append(DayBreakdown(day=day, hours=hours, total=sum(hours.values())))
	return result


def current_month_breakdown(
	history: Sequence[StudySession],
	work_types: Sequence[str],
	today: Optional[dt.date] = None,
) -> List[Tuple[str, float]]:
	"""Hours per work type for the live current month, zero entries dropped."""
	month = YearMonth.of(today or local_today())
	minutes = dict.fromkeys(work_types, 0)
	for day, session in _dated(history):
		if day is not None and month.contains(day) and session.work_type in minutes:
			minutes[session.work_type] += session.duration
	return [(w, minutes[w] / 60) for w in work_types if minutes[w] > 0]


def total_hours(breakdown: Sequence[Tuple[str, float]]) -> float:
	return sum(value for _, value in breakdown)


def average_hours_per_active_day(history: Sequence[StudySession]) -> float:
	"""All-time hours divided by the number of distinct days with a session."""
	if not history:
		return 0.0
	dated = _dated(history)
	active_days = {day for day, _ in dated if day is not None}
	if not active_days:
		return 0.0
	hours = sum(s.duration / 60 for s in history)
	return hours / len(active_days)


def month_total_hours(days: Sequence[DayBreakdown]) -> float:
	return sum(d.total for d in days)


def leading_blank_days(month: YearMonth) -> int:
	"""Blank calendar cells before day 1 in a Sunday-first grid."""
	return (month.first_day().weekday() + 1) % 7


def selectable_months(today: Optional[dt.date] = None) -> List[YearMonth]:
	"""January through the current month of the current year."""
	today = today or local_today()
	return [YearMonth(today.year, m) for m in range(1, today.month + 1)]
