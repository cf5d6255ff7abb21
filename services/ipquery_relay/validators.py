import re
from enum import Enum


# Dotted-decimal IPv4, each group 0-255 (leading zeros tolerated)
IPV4_PATTERN = re.compile(
	r"(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}"
	r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
)
# Full 8-group IPv6 only; "::" shorthand is not accepted
IPV6_PATTERN = re.compile(r"(?:[0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}")


class OutputFormat(str, Enum):
	JSON = "json"
	XML = "xml"
	YAML = "yaml"
	TEXT = "text"


SUPPORTED_FORMATS = [f.value for f in OutputFormat]

CONTENT_TYPES = {
	OutputFormat.JSON: "application/json",
	OutputFormat.XML: "application/xml",
	OutputFormat.YAML: "application/x-yaml",
	OutputFormat.TEXT: "text/plain",
}

DEFAULT_CONTENT_TYPE = CONTENT_TYPES[OutputFormat.JSON]


def is_valid_ip(value: str) -> bool:
	"""Return True if value is a complete IPv4 or full-form IPv6 literal."""
	if not isinstance(value, str):
		return False
	return bool(IPV4_PATTERN.fullmatch(value) or IPV6_PATTERN.fullmatch(value))


def parse_format(value: str | None) -> OutputFormat | None:
	"""Match a requested format case-insensitively, or None if unsupported."""
	if not value:
		return None
	try:
		return OutputFormat(value.lower())
	except ValueError:
		return None


def is_valid_format(value: str | None) -> bool:
	return parse_format(value) is not None


def content_type_for(value: OutputFormat | str | None) -> str:
	"""Map a format to its response content-type.

	Anything unrecognised falls back to application/json.
	"""
	fmt = value if isinstance(value, OutputFormat) else parse_format(value)
	if fmt is None:
		return DEFAULT_CONTENT_TYPE
	return CONTENT_TYPES[fmt]
