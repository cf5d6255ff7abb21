import logging
import sys

from ipquery_relay.config import Settings


def setup_logging(settings: Settings) -> None:
	"""Configure root logger for the application."""
	level = getattr(logging, settings.log_level.upper(), logging.INFO)

	# Basic configuration for root logger
	logging.basicConfig(
		level=level,
		format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
		stream=sys.stdout,
	)

	# Upstream calls go through requests; keep its chatter out of the log
	logging.getLogger("urllib3").setLevel(logging.WARNING)
	logging.getLogger("requests").setLevel(logging.WARNING)
