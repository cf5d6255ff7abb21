import logging
import time

from flask import Flask, Response, g, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from ipquery_relay import __version__
from ipquery_relay.auth import token_required
from ipquery_relay.client_ip import get_client_ip
from ipquery_relay.config import Settings, settings
from ipquery_relay.errors import INTERNAL_ERROR_MESSAGE, RelayError, UpstreamError, ValidationError
from ipquery_relay.ipquery_client import SELF_TARGET, IPQueryClient, LookupResult
from ipquery_relay.logging_config import setup_logging
from ipquery_relay.validators import (
	SUPPORTED_FORMATS,
	OutputFormat,
	content_type_for,
	is_valid_ip,
	parse_format,
)


# Configure logging before creating the app
setup_logging(settings)
logger = logging.getLogger(__name__)

VERSION = __version__
MAX_BULK_IPS = 10_000

INVALID_FORMAT_MESSAGE = "Invalid format. Supported formats: " + ", ".join(SUPPORTED_FORMATS)

ROUTES = [
	("/", "Caller's own IP (default format: text)"),
	("/ip/:ip", "Lookup for a specific IP (default format: json)"),
	("/bulk/:ips", "Bulk lookup of comma-separated IPs (default format: json)"),
	("/info", "API information"),
]
AVAILABLE_ENDPOINTS = [pattern for pattern, _ in ROUTES]

INFO_DOCUMENT = {
	"name": "IP Query Relay API",
	"version": VERSION,
	"endpoints": dict(ROUTES),
	"formats": SUPPORTED_FORMATS,
	"usage": {
		"format_parameter": "?format=" + "|".join(SUPPORTED_FORMATS),
		"examples": [
			"GET /",
			"GET /?format=json",
			"GET /ip/1.1.1.1",
			"GET /ip/8.8.8.8?format=xml",
			"GET /bulk/1.1.1.1,8.8.8.8?format=yaml",
		],
	},
}


def _requested_format(default: OutputFormat) -> OutputFormat:
	"""Read ?format=, falling back to the route's default when absent."""
	fmt = parse_format(request.args.get("format") or default.value)
	if fmt is None:
		raise ValidationError(INVALID_FORMAT_MESSAGE)
	return fmt


def _relay(result: LookupResult) -> Response:
	"""Turn an upstream result into the outgoing response."""
	if not result.success:
		raise UpstreamError(result.error or "", result.status or 500)
	return Response(result.data, status=200, content_type=content_type_for(result.format))


def create_app(app_settings: Settings, client: IPQueryClient | None = None) -> Flask:
	"""Build the Flask application around one settings object."""
	app = Flask(__name__)
	CORS(app, origins="*", send_wildcard=True)

	client = client or IPQueryClient(app_settings)
	require_token = token_required(app_settings.secret_token)

	@app.before_request
	def before_request():
		"""Store request start time for latency measurement."""
		g.request_start_time = time.perf_counter()

	@app.after_request
	def after_request(response):
		"""Log request details after each response."""
		start = getattr(g, "request_start_time", None)
		duration_ms = (time.perf_counter() - start) * 1000.0 if start is not None else 0.0

		logger.info(
			"request_completed method=%s path=%s status=%s duration_ms=%.2f client_ip=%s",
			request.method,
			request.path,
			response.status_code,
			duration_ms,
			get_client_ip(request),
		)
		return response

	@app.errorhandler(RelayError)
	def handle_relay_error(e: RelayError):
		return jsonify(e.to_dict()), e.status_code

	@app.errorhandler(404)
	@app.errorhandler(405)
	def handle_not_found(e):
		return jsonify({
			"error": "Endpoint not found",
			"available_endpoints": AVAILABLE_ENDPOINTS,
		}), 404

	@app.errorhandler(Exception)
	def handle_unexpected(e: Exception):
		if isinstance(e, HTTPException):
			return e
		logger.exception("Unhandled error on %s", request.path)
		return jsonify({"error": INTERNAL_ERROR_MESSAGE, "details": str(e)}), 500

	@app.route("/")
	def own_ip():
		"""Return the caller's IP, or a full lookup when a non-text format is asked for."""
		client_ip = get_client_ip(request)
		fmt = _requested_format(OutputFormat.TEXT)

		if fmt == OutputFormat.TEXT:
			return Response(client_ip, status=200, content_type=content_type_for(fmt))

		return _relay(client.query(SELF_TARGET, fmt))

	@app.route("/ip/<ip>")
	@require_token
	def ip_lookup(ip):
		"""Look up a single IP on the upstream API."""
		if not is_valid_ip(ip):
			raise ValidationError("Invalid IP address", ip=ip)
		fmt = _requested_format(OutputFormat.JSON)

		return _relay(client.query(ip, fmt))

	@app.route("/bulk/<ips>")
	@require_token
	def bulk_lookup(ips):
		"""Look up a comma-separated list of IPs in one upstream call."""
		ip_list = [ip.strip() for ip in ips.split(",")]

		if len(ip_list) > MAX_BULK_IPS:
			raise ValidationError("Maximum 10,000 IPs allowed in bulk query")

		invalid_ips = [ip for ip in ip_list if not is_valid_ip(ip)]
		if invalid_ips:
			raise ValidationError("Invalid IPs found", invalid_ips=invalid_ips)

		fmt = _requested_format(OutputFormat.JSON)

		# The upstream understands comma lists natively; forward unsplit
		return _relay(client.query(ips, fmt))

	@app.route("/info")
	@require_token
	def info():
		"""Static description of the API."""
		return jsonify(INFO_DOCUMENT)

	return app


app = create_app(settings)


def main() -> None:
	"""Run the development server with the process settings."""
	if settings.uses_default_token:
		logger.warning("SUPER_TOKEN_ACCESS_USER is not set; the built-in default token is active")

	logger.info("Server running on port %s", settings.port)
	logger.info("Available endpoints:")
	for pattern, description in ROUTES:
		logger.info("  GET %-12s - %s", pattern, description)
	logger.info("Supported formats: %s", ", ".join(SUPPORTED_FORMATS))

	app.run(
		host="0.0.0.0",
		port=settings.port,
		debug=settings.debug,
	)


if __name__ == "__main__":
	main()
