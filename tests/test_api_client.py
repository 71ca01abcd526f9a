"""Tests for the REST client, with HTTP stubbed by httpx.MockTransport"""
import json

import httpx
import pytest

from edulog.models.learning_item import LearningStatus
from edulog.services.api_client import LearningApiClient, LearningApiError, get_api_url


ITEM = {
    "_id": "abc123",
    "title": "React",
    "type": "Course",
    "status": "Started",
    "link": "",
    "notes": "",
    "updatedAt": "2026-10-19T08:30:00Z",
}


def make_client(handler, **kwargs):
    return LearningApiClient(
        base_url="http://api.test", transport=httpx.MockTransport(handler), **kwargs
    )


class TestConfig:

    def test_default_origin(self, monkeypatch):
        monkeypatch.delenv("EDULOG_API_URL", raising=False)
        assert get_api_url() == "http://localhost:5000"

    def test_origin_from_env(self, monkeypatch):
        monkeypatch.setenv("EDULOG_API_URL", "https://edulog.example.com/")
        monkeypatch.delenv("EDULOG_API_TOKEN", raising=False)
        client = LearningApiClient()
        assert client.base_url == "https://edulog.example.com"
        client.close()

    def test_bearer_token(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json=[])

        with make_client(handler, token="secret") as client:
            client.list_items()
        assert seen["auth"] == "Bearer secret"


class TestRequests:

    def test_list_items(self):
        def handler(request):
            assert request.method == "GET"
            assert request.url.path == "/api/learning"
            return httpx.Response(200, json=[ITEM])

        with make_client(handler, token="") as client:
            items = client.list_items()
        assert [i.id for i in items] == ["abc123"]

    def test_create_item(self):
        def handler(request):
            assert request.method == "POST"
            assert request.url.path == "/api/learning"
            body = json.loads(request.content)
            assert body["title"] == "React"
            return httpx.Response(201, json=ITEM)

        with make_client(handler, token="") as client:
            item = client.create_item({"title": "React", "type": "Course", "link": "",
                                       "status": "Started", "notes": ""})
        assert item.id == "abc123"

    def test_partial_update(self):
        def handler(request):
            assert request.method == "PUT"
            assert request.url.path == "/api/learning/abc123"
            assert json.loads(request.content) == {"status": "Completed"}
            return httpx.Response(200, json={**ITEM, "status": "Completed"})

        with make_client(handler, token="") as client:
            item = client.update_item("abc123", {"status": "Completed"})
        assert item.status == LearningStatus.COMPLETED

    def test_delete_item(self):
        calls = []

        def handler(request):
            calls.append((request.method, request.url.path))
            return httpx.Response(200, json={"message": "deleted"})

        with make_client(handler, token="") as client:
            assert client.delete_item("abc123") is None
        assert calls == [("DELETE", "/api/learning/abc123")]


class TestErrors:

    def test_server_error(self):
        with make_client(lambda request: httpx.Response(500), token="") as client:
            with pytest.raises(LearningApiError) as exc_info:
                client.list_items()
        assert exc_info.value.status_code == 500

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with make_client(handler, token="") as client:
            with pytest.raises(LearningApiError) as exc_info:
                client.delete_item("abc123")
        assert exc_info.value.status_code is None

    def test_malformed_item(self):
        with make_client(lambda request: httpx.Response(200, json={"oops": True}), token="") as client:
            with pytest.raises(LearningApiError):
                client.create_item({"title": "x"})

    def test_list_must_be_array(self):
        with make_client(lambda request: httpx.Response(200, json={"items": []}), token="") as client:
            with pytest.raises(LearningApiError):
                client.list_items()

    def test_non_json_body(self):
        with make_client(lambda request: httpx.Response(200, text="<html>"), token="") as client:
            with pytest.raises(LearningApiError):
                client.list_items()
