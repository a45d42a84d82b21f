"""Unit tests for the cursor API group: URLs, methods, payloads, and return types."""

from __future__ import annotations

import httpx
import pytest

from arango_sdk.api.cursor import CursorAPI
from arango_sdk.cursor import Cursor
from arango_sdk.errors import ArangoHTTPError, ArangoResponseError
from arango_sdk.models.cursor import CursorBatch


class TestCursorAPI:
    def test_create_minimal(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(201, json={"hasMore": False, "result": [{"a": 1}]})
        api = CursorAPI(client)
        cursor = api.create("RETURN {a: 1}")
        assert calls[0]["method"] == "POST"
        assert calls[0]["path"] == "/_api/cursor"
        assert calls[0]["body"] == {"query": "RETURN {a: 1}", "count": False}
        assert isinstance(cursor, Cursor)
        assert cursor.get_count() == 1

    def test_create_full_payload(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(
            201, json={"id": "44", "hasMore": True, "result": [], "count": 3}
        )
        api = CursorAPI(client)
        cursor = api.create(
            "FOR d IN @@c RETURN d",
            bind_vars={"@c": "things"},
            batch_size=2,
            count=True,
            sanitize=True,
        )
        body = calls[0]["body"]
        assert body["bindVars"] == {"@c": "things"}
        assert body["batchSize"] == 2
        assert body["count"] is True
        assert cursor.id == "44"
        assert cursor.count == 3
        assert cursor.options.sanitize is True

    def test_create_query_error(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(
            400,
            json={"error": True, "code": 400, "errorNum": 1501, "errorMessage": "syntax error"},
        )
        with pytest.raises(ArangoHTTPError) as exc_info:
            CursorAPI(client).create("RETRUN 1")
        assert exc_info.value.error_num == 1501

    def test_read_next(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json={"hasMore": False, "result": [1]})
        batch = CursorAPI(client).read_next("44")
        assert calls[0]["method"] == "PUT"
        assert calls[0]["path"] == "/_api/cursor/44"
        assert isinstance(batch, CursorBatch)
        assert batch.result == [1]

    def test_delete(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(202, json={"id": "44", "error": False})
        CursorAPI(client).delete("44")
        assert calls[0]["method"] == "DELETE"
        assert calls[0]["path"] == "/_api/cursor/44"

    def test_create_non_json_response(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(201, text="oops")
        with pytest.raises(ArangoResponseError):
            CursorAPI(client).create("RETURN 1")

    def test_create_missing_has_more(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(201, json={"result": []})
        with pytest.raises(ArangoResponseError):
            CursorAPI(client).create("RETURN 1")

    def test_read_next_missing_has_more(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json={"result": [1]})
        with pytest.raises(ArangoResponseError):
            CursorAPI(client).read_next("44")

    def test_read_next_non_json_response(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, text="<html>")
        with pytest.raises(ArangoResponseError):
            CursorAPI(client).read_next("44")
