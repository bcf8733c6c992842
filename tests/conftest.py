"""
Shared fixtures: a fake requests transport so no test touches the network
"""

import json

import pytest
import requests
from requests.adapters import BaseAdapter

from pananames.api.client import PananamesClient
from pananames.utils.config import reset_settings


BASE_URL = "https://api.test"
API_ROOT = BASE_URL + "/merchant/v2/"
TOKEN = "secret-signature"


def make_response(status_code=200, body=None, raw=None, request=None):
    """Build a requests.Response with a JSON (body) or raw text/bytes (raw) payload."""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    if raw is not None:
        response._content = raw.encode("utf-8") if isinstance(raw, str) else raw
    elif body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = b""
    response._content_consumed = True
    if request is not None:
        response.request = request
        response.url = request.url
    return response


class FakeAdapter(BaseAdapter):
    """
    Transport adapter that records every prepared request and replays
    queued responses (or raises queued exceptions) in order.
    """

    def __init__(self):
        super().__init__()
        self.requests = []
        self.send_kwargs = []
        self._queue = []

    def queue(self, status_code=200, body=None, raw=None):
        self._queue.append((status_code, body, raw))

    def queue_error(self, exc):
        self._queue.append(exc)

    def send(self, request, **kwargs):
        self.requests.append(request)
        self.send_kwargs.append(kwargs)
        if not self._queue:
            raise AssertionError(f"unexpected request: {request.method} {request.url}")

        item = self._queue.pop(0)
        if isinstance(item, Exception):
            raise item

        status_code, body, raw = item
        return make_response(status_code, body=body, raw=raw, request=request)

    def close(self):
        pass

    @property
    def last(self):
        return self.requests[-1]

    @property
    def last_json(self):
        return json.loads(self.last.body) if self.last.body else None


@pytest.fixture
def adapter():
    return FakeAdapter()


@pytest.fixture
def session(adapter):
    s = requests.Session()
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    return s


@pytest.fixture
def client(session):
    return PananamesClient(TOKEN, base_url=BASE_URL, session=session)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep tests independent from the developer's environment and .env"""
    for var in (
        "PANANAMES_TOKEN",
        "PANANAMES_BASE_URL",
        "PANANAMES_USER_AGENT",
        "PANANAMES_TIMEOUT",
        "LOG_LEVEL",
        "LOG_FILE",
    ):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()
