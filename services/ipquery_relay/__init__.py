"""Token-gated relay in front of the IP Query geolocation API."""

__version__ = "1.0.0"
