"""Shared fixtures: an httpx client whose transport answers from a canned handler."""

import json

import httpx
import pytest

from geonorge_adresse import adresse


class FakeService:
    """Records every request and answers with the configured response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = json.dumps({"sokStatus": {"ok": True}, "totaltAntallTreff": 0})
        self.error = None
        self.error_message = ""

    def reply(self, payload, status_code: int = 200):
        self.body = payload if isinstance(payload, (str, bytes)) else json.dumps(payload)
        self.status_code = status_code

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(self.error_message, request=request)
        return httpx.Response(self.status_code, content=self.body)

    def fail_with(self, error, message: str):
        self.error = error
        self.error_message = message

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.requests[-1].url.params)


@pytest.fixture
def service():
    return FakeService()


@pytest.fixture
def client(service):
    """httpx client pointed at the real base URL but served by FakeService"""
    with httpx.Client(
        base_url=adresse.BASE_URL, transport=httpx.MockTransport(service.handler)
    ) as client:
        yield client
