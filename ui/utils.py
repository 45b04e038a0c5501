import json
from collections.abc import MutableMapping
from typing import Any

from client import ApiResult
from schemas import MarketTicker


def apply_ticker_result(
    state: MutableMapping[str, Any], result: ApiResult[MarketTicker]
) -> None:
    """Store a ticker result in UI state.

    Args:
        state: Session state mapping.
        result: Result of the ticker call.

    """
    if result.succeeded:
        state["market_ticker"] = result.data
    else:
        state["error_msg"] = result.message


def error_text(error_msg: str | None) -> str:
    return error_msg or "no error"


def ticker_text(ticker: MarketTicker | None) -> str:
    if ticker is None:
        return "noData"
    return json.dumps(ticker.to_json(), indent=2)
