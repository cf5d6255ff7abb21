# config.py

import os
from dataclasses import dataclass

from dotenv import load_dotenv


# Pick up a local .env before any setting is read
load_dotenv()

DEFAULT_SECRET_TOKEN = "010101Aa"


def _env_bool(name: str, default: bool = False) -> bool:
	"""Read a boolean value from environment variables."""
	raw = os.getenv(name)
	if raw is None:
		return default
	return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
	"""Read an integer value from environment variables."""
	raw = os.getenv(name)
	if raw is None:
		return default
	try:
		return int(raw)
	except ValueError:
		return default


def _env_float(name: str, default: float | None = None) -> float | None:
	"""Read an optional float value from environment variables."""
	raw = os.getenv(name)
	if raw is None or not raw.strip():
		return default
	try:
		return float(raw)
	except ValueError:
		return default


@dataclass(frozen=True)
class Settings:
	"""Central application settings.

	Built once at startup and handed to the app factory; request handling
	never reads the environment itself.
	"""

	port: int = 3000
	secret_token: str = DEFAULT_SECRET_TOKEN
	debug: bool = False
	log_level: str = "INFO"

	# Upstream IP Query API
	upstream_base_url: str = "https://api.ipquery.io"
	# None keeps the HTTP client's own behaviour
	upstream_timeout_seconds: float | None = None

	@property
	def uses_default_token(self) -> bool:
		return self.secret_token == DEFAULT_SECRET_TOKEN

	@classmethod
	def from_env(cls) -> "Settings":
		"""Load settings from the process environment."""
		return cls(
			port=_env_int("PORT", 3000),
			secret_token=os.getenv("SUPER_TOKEN_ACCESS_USER", DEFAULT_SECRET_TOKEN),
			debug=_env_bool("IPQUERY_DEBUG", False),
			log_level=os.getenv("IPQUERY_LOG_LEVEL", "INFO"),
			upstream_base_url=os.getenv("IPQUERY_BASE_URL", "https://api.ipquery.io"),
			upstream_timeout_seconds=_env_float("IPQUERY_TIMEOUT_SECONDS"),
		)


settings = Settings.from_env()
