from typing import Any


UPSTREAM_ERROR_MESSAGE = "Error querying IP Query API"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class RelayError(Exception):
	"""Base class for errors rendered as a JSON envelope."""

	status_code = 500

	def __init__(self, message: str, status_code: int | None = None) -> None:
		super().__init__(message)
		self.message = message
		if status_code is not None:
			self.status_code = status_code

	def to_dict(self) -> dict[str, Any]:
		return {"error": self.message}


class ValidationError(RelayError):
	"""Malformed format or IP input, raised before any upstream call."""

	status_code = 400

	def __init__(self, message: str, **extra: Any) -> None:
		super().__init__(message)
		self.extra = extra

	def to_dict(self) -> dict[str, Any]:
		return {"error": self.message, **self.extra}


class AuthError(RelayError):
	"""Missing or mismatched access token."""

	status_code = 401

	def __init__(self) -> None:
		super().__init__("NOT TOKEN PROVIDED")

	def to_dict(self) -> dict[str, Any]:
		return {"message": self.message, "alert": "User-Tracked"}


class UpstreamError(RelayError):
	"""Transport failure or non-2xx answer from the upstream API."""

	def __init__(self, details: str, status_code: int = 500) -> None:
		super().__init__(UPSTREAM_ERROR_MESSAGE, status_code)
		self.details = details

	def to_dict(self) -> dict[str, Any]:
		return {"error": self.message, "details": self.details}
