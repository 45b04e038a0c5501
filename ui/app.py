import asyncio

import logfire
import streamlit as st

from client import ApiResult, HttpClient
from constants import DEFAULT_INST_ID
from schemas import MarketTicker
from settings import okx_settings
from ui.state import init_state
from ui.utils import apply_ticker_result, error_text, ticker_text
from usecases import MarketUsecase

logfire.configure(send_to_logfire="if-token-present")


async def fetch_market_ticker(inst_id: str) -> ApiResult[MarketTicker]:
    async with HttpClient(
        base_url=okx_settings.base_url, access_key=okx_settings.access_key
    ) as client:
        return await MarketUsecase(client).get_market_ticker(inst_id)


def load_market_ticker() -> None:
    result = asyncio.run(fetch_market_ticker(DEFAULT_INST_ID))
    apply_ticker_result(st.session_state, result)
    st.session_state["ticker_loaded"] = True


def main() -> None:
    st.set_page_config(page_title="OKX Market")
    st.title("OKX Market")
    init_state()

    if st.button("Increment"):
        st.session_state["counter"] += 1
        load_market_ticker()
    elif not st.session_state["ticker_loaded"]:
        load_market_ticker()

    st.write("You have pushed the button this many times:")
    st.header(str(st.session_state["counter"]))
    st.error(error_text(st.session_state["error_msg"]))
    st.code(ticker_text(st.session_state["market_ticker"]), language="json")


if __name__ == "__main__":
    main()
