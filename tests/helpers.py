import datetime as dt

TODAY = dt.date(2024, 3, 15)
FIXED_NOW = "2024-03-15T10:00:00"


def run_ticks(service, n):
	for _ in range(n):
		service.advance()
