import calendar
import datetime as dt
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List

from BackEnd.core.errors import CorruptPersistedState


class TimerState(str, Enum):
	IDLE = "idle"
	RUNNING = "running"
	PAUSED = "paused"


@dataclass(frozen=True)
class StudySession:
	date: str  # ISO8601 completion instant
	duration: int  # minutes
	work_type: str = ""

	def to_json(self) -> Dict[str, Any]:
		return {"date": self.date, "duration": self.duration, "workType": self.work_type}

	@classmethod
	def from_json(cls, raw: Any) -> "StudySession":
		if not isinstance(raw, dict):
			raise CorruptPersistedState("studyHistory", f"session entry is not an object: {raw!r}")
		date = raw.get("date")
		duration = raw.get("duration")
		work_type = raw.get("workType", "")
		if not isinstance(date, str):
			raise CorruptPersistedState("studyHistory", f"session date must be a string: {date!r}")
		# bool is an int subclass; reject it explicitly
		if isinstance(duration, bool) or not isinstance(duration, (int, float)):
			raise CorruptPersistedState("studyHistory", f"session duration must be a number: {duration!r}")
		# json.loads accepts NaN and Infinity
		if not math.isfinite(duration) or duration < 0 or duration != int(duration):
			raise CorruptPersistedState("studyHistory", f"session duration must be a whole number of minutes: {duration!r}")
		if not isinstance(work_type, str):
			raise CorruptPersistedState("studyHistory", f"session workType must be a string: {work_type!r}")
		duration = int(duration)
		return cls(date=date, duration=duration, work_type=work_type)


@dataclass(frozen=True, order=True)
class YearMonth:
	year: int
	month: int

	def __post_init__(self):
		if not 1 <= self.month <= 12:
			raise ValueError(f"month out of range: {self.month}")

	@classmethod
	def parse(cls, text: str) -> "YearMonth":
		"""Parse a 'YYYY-MM' string."""
		year, _, month = text.strip().partition("-")
		return cls(int(year), int(month))

	@classmethod
	def of(cls, day: dt.date) -> "YearMonth":
		return cls(day.year, day.month)

	def __str__(self):
		return f"{self.year:04}-{self.month:02}"

	def label(self) -> str:
		return f"{calendar.month_name[self.month]} {self.year}"

	def num_days(self) -> int:
		return calendar.monthrange(self.year, self.month)[1]

	def first_day(self) -> dt.date:
		return dt.date(self.year, self.month, 1)

	def days(self) -> List[dt.date]:
		return [dt.date(self.year, self.month, i + 1) for i in range(self.num_days())]

	def contains(self, day: dt.date) -> bool:
		return day.year == self.year and day.month == self.month

	def previous(self) -> "YearMonth":
		if self.month == 1:
			return YearMonth(self.year - 1, 12)
		return YearMonth(self.year, self.month - 1)

	def next(self) -> "YearMonth":
		if self.month == 12:
			return YearMonth(self.year + 1, 1)
		return YearMonth(self.year, self.month + 1)
