import logging
from dataclasses import dataclass

import requests

from ipquery_relay.config import Settings
from ipquery_relay.validators import OutputFormat

logger = logging.getLogger(__name__)

SELF_TARGET = "self"


@dataclass
class LookupResult:
	"""Uniform outcome of one upstream call."""

	success: bool
	data: bytes | None = None
	format: OutputFormat | None = None
	error: str | None = None
	status: int | None = None


class IPQueryClient:
	"""Thin client for the IP Query REST API.

	Targets are "self", a single IP or a comma-joined list of IPs; bulk
	lists are forwarded as one path segment and the single answer is
	relayed as-is.
	"""

	def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
		self.base_url = settings.upstream_base_url.rstrip("/")
		self.timeout = settings.upstream_timeout_seconds
		self.session = session or requests.Session()

	def build_url(self, target: str) -> str:
		if target == SELF_TARGET:
			return f"{self.base_url}/"
		return f"{self.base_url}/{target}"

	def query(self, target: str, fmt: OutputFormat = OutputFormat.JSON) -> LookupResult:
		"""Perform a single GET against the upstream API."""
		url = self.build_url(target)
		# json is the upstream default, so it is never sent explicitly
		params = {"format": fmt.value} if fmt != OutputFormat.JSON else {}

		try:
			resp = self.session.get(url, params=params, timeout=self.timeout)
			resp.raise_for_status()
		except requests.HTTPError as e:
			status = e.response.status_code if e.response is not None else 500
			logger.warning("upstream_error url=%s status=%s error=%s", url, status, e)
			return LookupResult(success=False, error=str(e), status=status)
		except requests.RequestException as e:
			logger.warning("upstream_unreachable url=%s error=%s", url, e)
			return LookupResult(success=False, error=str(e), status=500)

		# raise_for_status lets a final 1xx/3xx through
		if not 200 <= resp.status_code < 300:
			error = f"{resp.status_code} Unexpected upstream status for url: {resp.url}"
			logger.warning("upstream_error url=%s status=%s", url, resp.status_code)
			return LookupResult(success=False, error=error, status=resp.status_code)

		logger.debug("upstream_ok url=%s status=%s", url, resp.status_code)
		return LookupResult(success=True, data=resp.content, format=fmt)
