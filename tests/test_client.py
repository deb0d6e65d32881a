"""Tests for response decoding in the API client."""

import json
from datetime import datetime, timezone

import httpx
import pytest

from postboard.client import DecodeError, PostsClient, TransportError

from conftest import post_json


def client_for(handler):
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test")
    return PostsClient(http)


@pytest.mark.asyncio
async def test_list_posts_normalizes_missing_likes():
    def handler(request):
        assert request.url.path == "/api/posts"
        return httpx.Response(200, json={"success": True, "data": [
            post_json("p1", "u1", "2024-01-02T08:30:00Z"),
            post_json("p2", "u1", "2024-01-01", likes=None, likes_count=None),
        ]})

    async with client_for(handler) as client:
        result = await client.list_posts()

    assert result.success is True
    first, second = result.data
    assert first.likes == [] and first.likes_count == 0
    assert first.created_at == datetime(2024, 1, 2, 8, 30, tzinfo=timezone.utc)
    assert second.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_likes_count_is_not_derived_from_likes():
    def handler(request):
        post = post_json("p1", "u1", "2024-01-02", likes=["u2", "u3"])
        return httpx.Response(200, json={"success": True, "data": [post]})

    async with client_for(handler) as client:
        result = await client.list_posts()

    assert result.data[0].likes == ["u2", "u3"]
    assert result.data[0].likes_count == 0


@pytest.mark.asyncio
async def test_toggle_like_sends_user_id():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        post = post_json("p1", "u2", "2024-01-02", likes=["u1"], likes_count=1)
        return httpx.Response(200, json={"success": True, "data": post, "message": "Post liked"})

    async with client_for(handler) as client:
        result = await client.toggle_like("p1", "u1")

    assert seen == {"method": "PUT", "path": "/api/posts/p1/like", "body": {"userId": "u1"}}
    assert result.data.likes == ["u1"]
    assert result.message == "Post liked"


@pytest.mark.asyncio
async def test_delete_scopes_to_user_and_keeps_rejections():
    def handler(request):
        assert request.method == "DELETE"
        assert request.url.path == "/api/posts/p1"
        assert request.url.params["userId"] == "u1"
        return httpx.Response(403, json={"success": False, "message": "You can only delete your own posts"})

    async with client_for(handler) as client:
        result = await client.delete_post("p1", "u1")

    assert result.success is False
    assert result.message == "You can only delete your own posts"


@pytest.mark.asyncio
async def test_non_json_body_raises_decode_error():
    def handler(request):
        return httpx.Response(502, text="<html>Bad Gateway</html>")

    async with client_for(handler) as client:
        with pytest.raises(DecodeError) as excinfo:
            await client.list_posts()

    assert "Bad Gateway" in excinfo.value.body


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    [],
    {"data": []},
    {"success": True, "data": [{"_id": "p1"}]},
    {"success": True, "data": [post_json("p1", "u1", "not a date")]},
    {"success": True},
])
async def test_unexpected_list_shape_raises_decode_error(payload):
    async with client_for(lambda request: httpx.Response(200, json=payload)) as client:
        with pytest.raises(DecodeError):
            await client.list_posts()


@pytest.mark.asyncio
async def test_successful_like_without_data_raises_decode_error():
    async with client_for(lambda request: httpx.Response(200, json={"success": True})) as client:
        with pytest.raises(DecodeError):
            await client.toggle_like("p1", "u1")


@pytest.mark.asyncio
async def test_connection_failure_raises_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with client_for(handler) as client:
        with pytest.raises(TransportError):
            await client.list_posts()


def test_from_settings_uses_configured_base_url():
    client = PostsClient.from_settings()
    assert str(client.http.base_url).startswith("http://localhost:8000")
    assert client.api_prefix == "/api"
