from typing import Any, AsyncGenerator, Callable

import httpx
import logfire
import pytest
import pytest_asyncio

from client import HttpClient

Handler = Callable[[httpx.Request], Any]

logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def ticker_payload() -> dict[str, str]:
    return {
        "instType": "SPOT",
        "instId": "BTC-USDT",
        "last": "67321.5",
        "lastSz": "0.0012",
        "askPx": "67321.6",
        "askSz": "1.25",
        "bidPx": "67321.5",
        "bidSz": "0.87",
        "open24h": "66010.1",
        "high24h": "67800",
        "low24h": "65890.2",
        "volCcy24h": "512345678.9",
        "vol24h": "7654.321",
        "sodUtc0": "66500",
        "sodUtc8": "66210.4",
        "ts": "1718000000000",
    }


@pytest_asyncio.fixture(scope="function")
async def make_client() -> AsyncGenerator[Callable[..., HttpClient], None]:
    clients: list[HttpClient] = []

    def factory(handler: Handler, access_key: str | None = None) -> HttpClient:
        client = HttpClient(
            base_url="https://okx.test",
            access_key=access_key,
            transport=httpx.MockTransport(handler),
        )
        clients.append(client)
        return client

    yield factory

    for client in clients:
        await client.aclose()
