from unittest.mock import MagicMock

import pytest

from ipquery_relay.app import create_app
from ipquery_relay.config import Settings
from ipquery_relay.ipquery_client import IPQueryClient

TEST_TOKEN = "test-token"


@pytest.fixture
def settings():
	return Settings(secret_token=TEST_TOKEN, upstream_base_url="https://upstream.test")


@pytest.fixture
def upstream():
	"""Stand-in for the IP Query client so no test reaches the network."""
	return MagicMock(spec=IPQueryClient)


@pytest.fixture
def client(settings, upstream):
	flask_app = create_app(settings, client=upstream)
	with flask_app.test_client() as test_client:
		yield test_client


@pytest.fixture
def auth_headers():
	return {"token": TEST_TOKEN}
