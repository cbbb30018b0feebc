import datetime as dt
from datetime import datetime, timezone


def utc_now_iso():
	"""Return current UTC time as ISO8601 string (no microseconds)."""
	return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def local_today():
	"""Return today's local date."""
	return datetime.now().date()


def local_date_of(stamp):
	"""Local calendar date of an ISO8601 timestamp or YYYY-MM-DD string.

	Aware timestamps are converted to local time; naive ones are taken as-is.
	Returns None when the value cannot be parsed.
	"""
	if not isinstance(stamp, str) or not stamp:
		return None
	text = stamp.strip()
	# fromisoformat only learned the "Z" suffix in 3.11
	if text.endswith("Z"):
		text = text[:-1] + "+00:00"
	try:
		parsed = datetime.fromisoformat(text)
	except ValueError:
		try:
			return dt.date.fromisoformat(text[:10])
		except ValueError:
			return None
	if parsed.tzinfo is not None:
		parsed = parsed.astimezone()
	return parsed.date()


def fmt_mmss(seconds: int) -> str:
	"""Format seconds as MM:SS (minutes may exceed 59)."""
	seconds = max(0, int(seconds))
	return f"{seconds // 60:02}:{seconds % 60:02}"
