"""Shared test fixtures for SDK tests."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from arango_sdk.http import HTTPClient


class RecordingTransport(httpx.BaseTransport):
    """Records every request and answers from a queue of canned responses.

    Queue entries may be ``httpx.Response`` objects or exceptions to raise.
    Once the queue is empty, ``response`` is returned.
    """

    def __init__(self, calls: list[dict[str, Any]]) -> None:
        self.calls = calls
        self.response = httpx.Response(200, json={})
        self.queue: list[httpx.Response | Exception] = []

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        body = None
        if request.content:
            try:
                body = json.loads(request.content)
            except ValueError:
                body = request.content
        self.calls.append({
            "method": request.method,
            "url": str(request.url),
            "path": request.url.path,
            "headers": dict(request.headers),
            "body": body,
        })
        if self.queue:
            item = self.queue.pop(0)
            if isinstance(item, Exception):
                raise item
            return item
        return self.response


@pytest.fixture
def mock_transport():
    """Returns an httpx mock transport that records requests."""
    calls: list[dict[str, Any]] = []
    transport = RecordingTransport(calls)
    return transport, calls


@pytest.fixture
def http_client(mock_transport):
    """HTTPClient with a mock transport."""
    transport, calls = mock_transport
    client = HTTPClient("http://arango.test", token="test-token")
    # Replace the inner httpx client with one using our mock transport
    client._client = httpx.Client(
        base_url="http://arango.test",
        transport=transport,
    )
    yield client, transport, calls
    client.close()


@pytest.fixture
def no_sleep(monkeypatch):
    """Make retry backoff instant and record the requested delays."""
    delays: list[float] = []
    monkeypatch.setattr("arango_sdk.http.time.sleep", delays.append)
    return delays
