"""
Shared fixtures for the SalesManago client tests.

No test here talks to the network: the client gets a FakeTransport that
records every call and answers with a canned body.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from salesmanago_client import Client  # noqa: E402


class FakeResponse:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code


class FakeTransport:
    def __init__(self, text='{"success": true}', status_code=200):
        self.text = text
        self.status_code = status_code
        self.calls = []

    def request(self, method, url, options):
        self.calls.append({"method": method, "url": url, "options": options})
        return FakeResponse(self.text, self.status_code)

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    return Client(transport, "client-1", "https://api.test", "secret", "key")
