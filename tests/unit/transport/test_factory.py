"""Tests for httpx client construction and request execution."""

import json
import ssl

import httpx
import pytest

from apiclient.transport.factory import build_http_client, parse_response_body, send_request
from apiclient.transport.options import RequestOptions


def recording_transport(response: httpx.Response) -> tuple[httpx.MockTransport, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return response

    return httpx.MockTransport(handler), seen


class TestBuildHttpClient:

    @pytest.mark.unit
    async def test_applies_base_url(self):
        async with build_http_client(RequestOptions(base_url="https://api.example.com")) as client:
            assert client.base_url.host == "api.example.com"

    @pytest.mark.unit
    async def test_accepts_ssl_context(self):
        options = RequestOptions(ssl_context=ssl.create_default_context())
        async with build_http_client(options) as client:
            assert isinstance(client, httpx.AsyncClient)


class TestSendRequest:

    @pytest.mark.unit
    async def test_defaults_to_get(self):
        transport, seen = recording_transport(httpx.Response(200, json={}))

        async with build_http_client(RequestOptions(), transport=transport) as client:
            await send_request(client, RequestOptions(url="https://api.example.com/test"))

        assert seen[0].method == "GET"

    @pytest.mark.unit
    async def test_json_body(self):
        transport, seen = recording_transport(httpx.Response(200, json={}))
        options = RequestOptions(method="POST", url="https://api.example.com/test", body={"data": "test"})

        async with build_http_client(options, transport=transport) as client:
            await send_request(client, options)

        assert json.loads(seen[0].content) == {"data": "test"}
        assert seen[0].headers["content-type"] == "application/json"

    @pytest.mark.unit
    async def test_raw_body(self):
        transport, seen = recording_transport(httpx.Response(200))
        options = RequestOptions(method="POST", url="https://api.example.com/test", body="test ")

        async with build_http_client(options, transport=transport) as client:
            await send_request(client, options)

        assert seen[0].content == b"test "

    @pytest.mark.unit
    async def test_headers_and_params(self):
        transport, seen = recording_transport(httpx.Response(200))
        options = RequestOptions(url="https://api.example.com/test", headers={"A": "1"}, params={"q": "x"})

        async with build_http_client(options, transport=transport) as client:
            await send_request(client, options)

        assert seen[0].headers["A"] == "1"
        assert seen[0].url.params["q"] == "x"

    @pytest.mark.unit
    async def test_raises_for_error_status(self):
        transport, _ = recording_transport(httpx.Response(500))
        options = RequestOptions(url="https://api.example.com/test")

        async with build_http_client(options, transport=transport) as client:
            with pytest.raises(httpx.HTTPStatusError):
                await send_request(client, options)


class TestParseResponseBody:

    def test_json(self):
        response = httpx.Response(200, json={"users": [{"id": 1, "name": "John Smith"}]})
        assert parse_response_body(response) == {"users": [{"id": 1, "name": "John Smith"}]}

    def test_text(self):
        response = httpx.Response(200, text="plain")
        assert parse_response_body(response) == "plain"

    def test_json_without_json_content_type(self):
        response = httpx.Response(200, headers={"content-type": "text/plain"}, content=b'{"a": 1}')
        assert parse_response_body(response) == {"a": 1}

    def test_empty_body(self):
        response = httpx.Response(204)
        assert parse_response_body(response) == ""

    def test_invalid_json_falls_back_to_text(self):
        response = httpx.Response(200, headers={"content-type": "application/json"}, content=b"{oops")
        assert parse_response_body(response) == "{oops"
