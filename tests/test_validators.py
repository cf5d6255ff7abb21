"""Tests for IP and format validation."""

import pytest

from ipquery_relay.validators import (
	OutputFormat,
	content_type_for,
	is_valid_format,
	is_valid_ip,
	parse_format,
)


class TestIsValidIP:
	"""Tests for is_valid_ip()."""

	@pytest.mark.parametrize("ip", [
		"0.0.0.0",
		"1.1.1.1",
		"8.8.8.8",
		"192.168.0.1",
		"255.255.255.255",
		"010.001.000.009",
	])
	def test_accepts_ipv4(self, ip):
		assert is_valid_ip(ip)

	@pytest.mark.parametrize("ip", [
		"256.1.1.1",
		"1.1.1.300",
		"1.1.1",
		"1.1.1.1.1",
		"1..1.1",
		"a.b.c.d",
		"",
	])
	def test_rejects_bad_ipv4(self, ip):
		assert not is_valid_ip(ip)

	@pytest.mark.parametrize("ip", [
		"2001:0db8:85a3:0000:0000:8a2e:0370:7334",
		"2001:db8:0:0:0:0:2:1",
		"FFFF:ffff:0:0:0:0:0:1",
	])
	def test_accepts_full_ipv6(self, ip):
		assert is_valid_ip(ip)

	@pytest.mark.parametrize("ip", [
		"::1",
		"2001:db8::1",
		"fe80::",
		"2001:db8:0:0:0:0:2",
		"2001:db8:0:0:0:0:2:1:3",
		"2001:db8:0:0:0:0:2:gggg",
		"2001:db8:0:0:0:0:2:12345",
	])
	def test_rejects_shorthand_and_malformed_ipv6(self, ip):
		assert not is_valid_ip(ip)

	@pytest.mark.parametrize("ip", [" 1.1.1.1", "1.1.1.1 ", "1.1.1.1\n", "x1.1.1.1"])
	def test_rejects_partial_and_padded_matches(self, ip):
		assert not is_valid_ip(ip)

	def test_rejects_non_strings(self):
		assert not is_valid_ip(None)


class TestFormatNegotiation:
	"""Tests for parse_format() and content_type_for()."""

	@pytest.mark.parametrize("raw, expected", [
		("json", OutputFormat.JSON),
		("XML", OutputFormat.XML),
		("Yaml", OutputFormat.YAML),
		("tExT", OutputFormat.TEXT),
	])
	def test_case_insensitive(self, raw, expected):
		assert parse_format(raw) is expected
		assert is_valid_format(raw)

	@pytest.mark.parametrize("raw", [None, "", "csv", "jsonp", " json"])
	def test_rejects_unknown(self, raw):
		assert parse_format(raw) is None
		assert not is_valid_format(raw)

	def test_every_format_has_a_content_type(self):
		assert content_type_for(OutputFormat.JSON) == "application/json"
		assert content_type_for(OutputFormat.XML) == "application/xml"
		assert content_type_for(OutputFormat.YAML) == "application/x-yaml"
		assert content_type_for(OutputFormat.TEXT) == "text/plain"

	def test_content_type_accepts_raw_strings(self):
		assert content_type_for("YAML") == "application/x-yaml"

	@pytest.mark.parametrize("raw", [None, "", "csv"])
	def test_content_type_defaults_to_json(self, raw):
		assert content_type_for(raw) == "application/json"
