import json

import httpx
import pytest

from directus_commons.model.config_model import ClientConfig
from directus_commons.model.context import Context
from directus_commons.services.http_service import HttpService


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request and answers from a queue of (status, body) pairs."""

    def __init__(self):
        self.requests = []
        self.responses = []
        super().__init__(self._handle)

    def reply(self, status: int = 200, body=None):
        self.responses.append((status, body))
        return self

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.responses.pop(0) if self.responses else (200, {"data": None})
        if body is None:
            return httpx.Response(status)
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def context():
    return Context(ClientConfig(base_url="https://cms.test", token="secret"))


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def http(transport):
    return HttpService(timeout=5, transport=transport)
