import asyncio
import gzip
import json
from typing import Any
from unittest import mock

import httpx
import pytest

from client import CancelToken, get_http_client, init_http_client
from constants import (
    ACCESS_KEY_HEADER,
    ERROR_CODE_CANCEL,
    ERROR_CODE_CONNECTION_ERROR,
    ERROR_CODE_INTERNAL,
    ERROR_CODE_TIMEOUT,
)
from enums import HttpMethod
from tests.base import envelope


def _json_handler(body: Any, seen: list[httpx.Request] | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(200, json=body)

    return handler


@pytest.mark.asyncio
async def test_get_maps_single_object(make_client) -> None:
    client = make_client(_json_handler(envelope(data={"name": "btc"})))

    result = await client.get("/item", lambda item: item["name"].upper())

    assert result.succeeded is True
    assert result.data == "BTC"


@pytest.mark.asyncio
async def test_get_list_maps_each_element(make_client) -> None:
    client = make_client(_json_handler(envelope(data=[{"v": 1}, {"v": 2}])))

    result = await client.get_list("/items", lambda item: item["v"])

    assert result.succeeded is True
    assert result.data == [1, 2]


@pytest.mark.asyncio
async def test_get_list_null_data_is_empty_list(make_client) -> None:
    client = make_client(_json_handler(envelope(data=None)))

    result = await client.get_list("/items", lambda item: item)

    assert result.succeeded is True
    assert result.data == []


@pytest.mark.asyncio
async def test_get_list_non_list_data_is_internal_error(make_client) -> None:
    client = make_client(_json_handler(envelope(data={"v": 1})))

    result = await client.get_list("/items", lambda item: item)

    assert result.code == ERROR_CODE_INTERNAL
    assert result.data is None


@pytest.mark.asyncio
async def test_server_error_preserved(make_client) -> None:
    body = envelope(code="50011", msg="Rate limit reached")
    client = make_client(_json_handler(body))

    result = await client.get_list("/items", lambda item: item)

    assert result.succeeded is False
    assert result.code == "50011"
    assert result.message == "Rate limit reached"
    assert result.data is None


@pytest.mark.asyncio
async def test_post_sends_json_body(make_client) -> None:
    seen: list[httpx.Request] = []
    client = make_client(_json_handler(envelope(data={"ordId": "1"}), seen))

    result = await client.post(
        "/order", lambda item: item["ordId"], data={"instId": "BTC-USDT"}
    )

    assert result.data == "1"
    assert seen[0].method == "POST"
    assert seen[0].headers["Content-Type"] == "application/json"
    assert json.loads(seen[0].content) == {"instId": "BTC-USDT"}


@pytest.mark.asyncio
async def test_post_list_maps_each_element(make_client) -> None:
    seen: list[httpx.Request] = []
    client = make_client(_json_handler(envelope(data=[{"v": "a"}]), seen))

    result = await client.post_list("/orders", lambda item: item["v"])

    assert result.data == ["a"]
    assert seen[0].method == "POST"


@pytest.mark.asyncio
async def test_request_uses_given_method(make_client) -> None:
    seen: list[httpx.Request] = []
    client = make_client(_json_handler(envelope(data=None), seen))

    result = await client.request("/item", lambda data: data, method=HttpMethod.DELETE)

    assert result.succeeded is True
    assert seen[0].method == "DELETE"


@pytest.mark.asyncio
async def test_query_drops_none_values(make_client) -> None:
    seen: list[httpx.Request] = []
    client = make_client(_json_handler(envelope(data=[]), seen))

    await client.get_list(
        "/items",
        lambda item: item,
        query_parameters={"instType": "SPOT", "instId": None},
    )

    assert dict(seen[0].url.params) == {"instType": "SPOT"}


@pytest.mark.asyncio
async def test_access_key_header(make_client) -> None:
    seen: list[httpx.Request] = []
    client = make_client(_json_handler(envelope(), seen), access_key="key-1")

    await client.get("/item", lambda item: item)

    assert seen[0].headers[ACCESS_KEY_HEADER] == "key-1"


@pytest.mark.asyncio
async def test_no_access_key_header_when_unset(make_client) -> None:
    seen: list[httpx.Request] = []
    client = make_client(_json_handler(envelope(), seen))

    await client.get("/item", lambda item: item)

    assert ACCESS_KEY_HEADER not in seen[0].headers


@pytest.mark.asyncio
async def test_add_and_remove_header(make_client) -> None:
    seen: list[httpx.Request] = []
    client = make_client(_json_handler(envelope(), seen))

    client.add_header("x-simulated-trading", "1")
    await client.get("/item", lambda item: item)
    client.remove_header("x-simulated-trading")
    await client.get("/item", lambda item: item)

    assert seen[0].headers["x-simulated-trading"] == "1"
    assert "x-simulated-trading" not in seen[1].headers
    assert client.headers == {}


@pytest.mark.asyncio
async def test_per_call_header_overrides_shared(make_client) -> None:
    seen: list[httpx.Request] = []
    client = make_client(_json_handler(envelope(), seen))

    client.add_header("x-simulated-trading", "1")
    await client.get("/item", lambda item: item, headers={"x-simulated-trading": "0"})

    assert seen[0].headers["x-simulated-trading"] == "0"


@pytest.mark.asyncio
async def test_receive_timeout(make_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = make_client(handler)

    get_result = await client.get("/a", lambda item: item)
    post_result = await client.post_list("/b", lambda item: item)

    assert get_result.code == ERROR_CODE_TIMEOUT
    assert post_result.code == ERROR_CODE_TIMEOUT
    assert get_result.message == "responseTimeout"


@pytest.mark.asyncio
async def test_connection_error(make_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)

    result = await client.get("/a", lambda item: item)

    assert result.code == ERROR_CODE_CONNECTION_ERROR
    assert result.data is None


@pytest.mark.asyncio
async def test_not_found_status(make_client) -> None:
    client = make_client(lambda request: httpx.Response(404))

    result = await client.get("/missing", lambda item: item)

    assert result.code == "404"
    assert result.message == "cannotReachServer"
    assert result.succeeded is False


@pytest.mark.asyncio
async def test_unmapped_status(make_client) -> None:
    client = make_client(lambda request: httpx.Response(599))

    result = await client.get("/a", lambda item: item)

    assert result.code == ERROR_CODE_INTERNAL
    assert result.message == "unknownError"


@pytest.mark.asyncio
async def test_malformed_body_is_internal_error(make_client) -> None:
    client = make_client(lambda request: httpx.Response(200, text="<html>"))

    result = await client.get("/a", lambda item: item)

    assert result.code == ERROR_CODE_INTERNAL
    assert result.data is None
    assert result.message


@pytest.mark.asyncio
async def test_converter_fault_is_internal_error(make_client) -> None:
    def mapper(item: dict[str, Any]) -> Any:
        raise ValueError("unexpected payload")

    client = make_client(_json_handler(envelope(data={})))

    result = await client.get("/a", mapper)

    assert result.code == ERROR_CODE_INTERNAL
    assert result.message == "unexpected payload"


@pytest.mark.asyncio
async def test_cancel_mid_flight(make_client) -> None:
    started = asyncio.Event()

    async def handler(request: httpx.Request) -> httpx.Response:
        started.set()
        await asyncio.sleep(10)
        return httpx.Response(200, json=envelope(data={}))

    client = make_client(handler)
    token = CancelToken()

    task = asyncio.create_task(
        client.get("/slow", lambda item: item, cancel_token=token)
    )
    await started.wait()
    token.cancel("user left")
    result = await task

    assert result.code == ERROR_CODE_CANCEL
    assert result.message == "canceled"
    assert result.data is None


@pytest.mark.asyncio
async def test_already_cancelled_token_skips_transport(make_client) -> None:
    handler = mock.Mock(side_effect=lambda request: httpx.Response(200))
    client = make_client(handler)
    token = CancelToken()
    token.cancel()

    result = await client.get("/a", lambda item: item, cancel_token=token)

    assert result.code == ERROR_CODE_CANCEL
    handler.assert_not_called()


@pytest.mark.asyncio
async def test_uncancelled_token_returns_response(make_client) -> None:
    client = make_client(_json_handler(envelope(data={"v": 1})))

    result = await client.get(
        "/a", lambda item: item["v"], cancel_token=CancelToken()
    )

    assert result.succeeded is True
    assert result.data == 1


@pytest.mark.asyncio
async def test_concurrent_requests_cancel_independently(make_client) -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/slow":
            await asyncio.sleep(10)
        return httpx.Response(200, json=envelope(data={"path": request.url.path}))

    client = make_client(handler)
    token = CancelToken()

    slow = asyncio.create_task(
        client.get("/slow", lambda item: item, cancel_token=token)
    )
    fast = await client.get("/fast", lambda item: item["path"])
    token.cancel()

    assert fast.data == "/fast"
    assert (await slow).code == ERROR_CODE_CANCEL


@pytest.mark.asyncio
async def test_receive_progress(make_client) -> None:
    body = envelope(data=[{"v": index} for index in range(50)])
    client = make_client(_json_handler(body))
    progress: list[tuple[int, int]] = []

    await client.get_list(
        "/items",
        lambda item: item,
        on_receive_progress=lambda count, total: progress.append((count, total)),
    )

    expected = len(httpx.Response(200, json=body).content)
    assert progress
    assert progress[-1] == (expected, expected)
    assert [count for count, _ in progress] == sorted(count for count, _ in progress)


@pytest.mark.asyncio
async def test_receive_progress_counts_compressed_bytes(make_client) -> None:
    body = envelope(data=[{"instId": "BTC-USDT", "last": "67321.5"}] * 100)
    compressed = gzip.compress(json.dumps(body).encode())

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, content=compressed, headers={"Content-Encoding": "gzip"}
        )

    client = make_client(handler)
    progress: list[tuple[int, int]] = []

    result = await client.get_list(
        "/items",
        lambda item: item["instId"],
        on_receive_progress=lambda count, total: progress.append((count, total)),
    )

    assert result.succeeded is True
    assert len(result.data) == 100
    assert progress
    assert all(count <= total for count, total in progress)
    assert progress[-1] == (len(compressed), len(compressed))


@pytest.mark.asyncio
async def test_send_progress(make_client) -> None:
    seen: list[httpx.Request] = []
    client = make_client(_json_handler(envelope(data={}), seen))
    payload = {"memo": "x" * 200_000}
    progress: list[tuple[int, int]] = []

    await client.post(
        "/upload",
        lambda item: item,
        data=payload,
        on_send_progress=lambda count, total: progress.append((count, total)),
    )

    total = len(json.dumps(payload).encode())
    assert len(progress) > 1
    assert progress[-1] == (total, total)
    assert json.loads(seen[0].content) == payload


@pytest.mark.asyncio
async def test_failure_is_logged(make_client) -> None:
    client = make_client(lambda request: httpx.Response(503))

    with mock.patch("client.http_client.logfire.warn") as warn:
        result = await client.get("/a", lambda item: item)

    assert result.message == "serverDown"
    warn.assert_called_once()
    assert warn.call_args.kwargs["code"] == "503"


@pytest.mark.asyncio
async def test_init_http_client_sets_global() -> None:
    client = await init_http_client(base_url="https://okx.test", access_key="key-2")
    try:
        assert get_http_client() is client
    finally:
        await client.aclose()


@pytest.mark.asyncio
async def test_init_http_client_closes_replaced_client() -> None:
    first = await init_http_client(base_url="https://okx.test")
    second = await init_http_client(base_url="https://okx.test")
    try:
        assert first.is_closed is True
        assert second.is_closed is False
        assert get_http_client() is second
    finally:
        await second.aclose()
