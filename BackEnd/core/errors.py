"""Error types raised inside the backend and absorbed at the service layer."""

from typing import Any, Optional


class FlowError(Exception):
	def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
		super().__init__(message)
		self.code = code
		self.details = details


class InvalidConfiguration(FlowError):
	def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
		super().__init__("invalid_configuration", message, details)


class CorruptPersistedState(FlowError):
	def __init__(self, key: str, message: str):
		super().__init__("corrupt_persisted_state", message, {"key": key})
		self.key = key
