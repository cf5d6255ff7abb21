from functools import wraps

from flask import request

from ipquery_relay.errors import AuthError

TOKEN_HEADER = "token"


def check_token(supplied: str | None, expected: str) -> None:
	"""Raise AuthError unless supplied exactly equals the shared secret."""
	if supplied is None or supplied != expected:
		raise AuthError()


def token_required(expected: str):
	"""Decorator gating a view behind the static shared token.

	A single secret for every caller; there is no per-client identity.
	"""

	def decorator(view):
		@wraps(view)
		def wrapper(*args, **kwargs):
			check_token(request.headers.get(TOKEN_HEADER), expected)
			return view(*args, **kwargs)

		return wrapper

	return decorator
