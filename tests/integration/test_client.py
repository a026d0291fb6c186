r"""Integration tests running DecNetClient over an in-process httpx
server."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING
from urllib.parse import unquote

import httpx
import pytest

from decnet import DecNetClient
from decnet.core.config import ClientConfig
from decnet.exceptions import NetworkError, NotFoundError, UnauthorizedError
from decnet.request import ContentType, HttpMethod, MultipartPart, Request
from decnet.retry import RetryPolicy
from decnet.transport import HttpxTransport
from tests.helpers import BASE_URL, User

if TYPE_CHECKING:
    from collections.abc import Callable
    from unittest.mock import Mock


def echo(request: httpx.Request) -> httpx.Response:
    """Answer with a JSON description of the received request, like
    httpbin."""
    payload = {
        "method": request.method,
        "path": request.url.path,
        "query": request.url.query.decode(),
        "headers": {key.lower(): value for key, value in request.headers.items()},
        "body": request.content.decode("latin-1"),
    }
    return httpx.Response(200, content=json.dumps(payload).encode())


def create_client(
    handler: Callable[[httpx.Request], httpx.Response], **kwargs: object
) -> DecNetClient:
    transport = HttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    return DecNetClient(BASE_URL, transport=transport, **kwargs)


##########################################
#     Tests for requests on the wire     #
##########################################


@pytest.mark.asyncio
async def test_get_decodes_typed_response() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/users/1"
        return httpx.Response(200, content=b'{"id": 1, "name": "A", "email": "a@x.com"}')

    async with create_client(handler) as client:
        user = await client.request(Request(path="/users/1", decode_target=User))
    assert user == User(id=1, name="A", email="a@x.com")


@pytest.mark.asyncio
async def test_get_encodes_query_params() -> None:
    async with create_client(echo) as client:
        data = await client.request(
            Request(
                path="/search",
                query_params={"q": "a b&c=d", "page": 2, "exact": True},
                decode_target=dict,
            )
        )
    assert data["method"] == "GET"
    assert data["query"] == "q=a%20b%26c%3Dd&page=2&exact=true"


@pytest.mark.asyncio
async def test_post_json_body() -> None:
    async with create_client(echo) as client:
        data = await client.request(
            Request(
                path="/users",
                method=HttpMethod.POST,
                body={"name": "A", "tags": ["x", "y"]},
                headers={"Authorization": "Bearer token"},
                decode_target=dict,
            )
        )
    assert data["method"] == "POST"
    assert json.loads(data["body"]) == {"name": "A", "tags": ["x", "y"]}
    assert data["headers"]["authorization"] == "Bearer token"
    assert data["headers"]["content-type"].startswith("application/json; boundary=")


@pytest.mark.asyncio
async def test_put_url_encoded_body() -> None:
    async with create_client(echo) as client:
        data = await client.request(
            Request(
                path="/profile",
                method=HttpMethod.PUT,
                content_type=ContentType.URL_ENCODED,
                body={"user": {"name": "A B"}, "roles": ["admin", "dev"]},
                decode_target=dict,
            )
        )
    assert data["method"] == "PUT"
    assert [unquote(pair) for pair in data["body"].split("&")] == [
        "user[name]=A B",
        "roles[]=admin",
        "roles[]=dev",
    ]


@pytest.mark.asyncio
async def test_post_multipart_body() -> None:
    async with create_client(echo) as client:
        data = await client.request(
            Request(
                path="/photos",
                method=HttpMethod.POST,
                content_type=ContentType.MULTIPART,
                body={"title": "holiday"},
                multipart_parts=[MultipartPart("photo", b"\x89PNG", "a.png", "image/png")],
                decode_target=dict,
            )
        )
    boundary = data["headers"]["content-type"].split("boundary=")[1]
    assert data["body"] == (
        f"--{boundary}\r\n"
        'Content-Disposition: form-data; name="title"\r\n\r\n'
        "holiday\r\n"
        f"--{boundary}\r\n"
        'Content-Disposition: form-data; name="photo"; filename="a.png"\r\n'
        "Content-Type: image/png\r\n\r\n"
        "\x89PNG\r\n"
        f"--{boundary}--\r\n"
    )


@pytest.mark.asyncio
async def test_delete_without_decode_target() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "DELETE"
        return httpx.Response(204)

    async with create_client(handler) as client:
        assert await client.request(Request(path="/users/1", method=HttpMethod.DELETE)) is None


#################################
#     Tests for error paths     #
#################################


@pytest.mark.asyncio
async def test_retries_service_unavailable_then_succeeds(mock_asleep: Mock) -> None:
    statuses = [503, 503, 200]
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(statuses[len(calls) - 1], content=b'{"ok": true}')

    async with create_client(handler) as client:
        assert await client.request(Request(path="/health", decode_target=dict)) == {"ok": True}
    assert len(calls) == 3
    assert [c.args[0] for c in mock_asleep.call_args_list] == [1.0, 2.0]


@pytest.mark.asyncio
async def test_unauthorized_is_not_retried(mock_asleep: Mock) -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(401, content=b'{"error": "token expired"}')

    async with create_client(handler) as client:
        with pytest.raises(UnauthorizedError) as exc_info:
            await client.request(Request(path="/me", decode_target=dict))
    assert exc_info.value.body == b'{"error": "token expired"}'
    assert len(calls) == 1
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_not_found_carries_status_code() -> None:
    async with create_client(lambda request: httpx.Response(404)) as client:
        with pytest.raises(NotFoundError) as exc_info:
            await client.request(Request(path="/missing"))
    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_connection_error_becomes_network_error(mock_asleep: Mock) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        msg = "connection refused"
        raise httpx.ConnectError(msg, request=request)

    config = ClientConfig(retry_policy=RetryPolicy(max_retries=2))
    async with create_client(handler, config=config) as client:
        with pytest.raises(NetworkError) as exc_info:
            await client.request(Request(path="/users"))
    assert isinstance(exc_info.value.cause, httpx.ConnectError)
    assert mock_asleep.await_count == 2
