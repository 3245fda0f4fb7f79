"""Shared fixtures: a stand-in for requests.Session so tests never hit the network."""

import pytest

from sword_reader.client import SwordClient


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, invalid_json: bool = False):
        self.payload = payload if payload is not None else {}
        self.status_code = status_code
        self.invalid_json = invalid_json

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self.invalid_json:
            raise ValueError("No JSON object could be decoded")
        return self.payload


class FakeSession:
    """Replays queued responses (or raises queued exceptions) and records each GET."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def make_client():
    """make_client(*responses) -> (SwordClient, FakeSession)"""

    def factory(*responses):
        session = FakeSession(responses)
        client = SwordClient(base_url="https://api.example.org/api/", session=session, timeout=5)
        return client, session

    return factory


@pytest.fixture
def response():
    return FakeResponse
