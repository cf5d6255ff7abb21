"""Best-effort resolution of the originating client address.

Signals are tried in a fixed order and the first non-empty one wins:

1. ``X-Forwarded-For`` (first entry of the proxy chain)
2. ``X-Real-IP``
3. the connection's remote address
4. the peer name of the underlying socket, when the server exposes it
5. Flask's ``access_route``

Both headers are client supplied and trivially spoofable unless a trusted
proxy in front of the service rewrites them.
"""

from typing import Callable

from flask import Request

UNKNOWN_IP = "unknown"


def _from_forwarded_for(request: Request) -> str | None:
	value = request.headers.get("X-Forwarded-For", "")
	return value.split(",")[0].strip() or None


def _from_real_ip(request: Request) -> str | None:
	return request.headers.get("X-Real-IP", "").strip() or None


def _from_remote_addr(request: Request) -> str | None:
	return request.remote_addr or None


def _from_socket(request: Request) -> str | None:
	sock = request.environ.get("werkzeug.socket")
	if sock is None:
		return None
	try:
		peer = sock.getpeername()
	except OSError:
		return None
	if isinstance(peer, tuple) and peer:
		return str(peer[0]) or None
	return None


def _from_access_route(request: Request) -> str | None:
	route = request.access_route
	return route[-1] if route else None


IP_EXTRACTORS: list[Callable[[Request], str | None]] = [
	_from_forwarded_for,
	_from_real_ip,
	_from_remote_addr,
	_from_socket,
	_from_access_route,
]


def get_client_ip(request: Request) -> str:
	"""Return the first client address signal found on the request."""
	for extractor in IP_EXTRACTORS:
		ip = extractor(request)
		if ip:
			return ip
	return UNKNOWN_IP
