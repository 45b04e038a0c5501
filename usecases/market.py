from client import ApiResult, CancelToken, HttpClient
from constants import INSTRUMENTS_PATH, MARKET_TICKER_PATH, MARKET_TICKERS_PATH
from enums import InstrumentType
from schemas import Instrument, MarketTicker


class MarketUsecase:
    def __init__(self, client: HttpClient):
        self.client = client

    async def get_instrument_list(
        self,
        inst_type: InstrumentType = InstrumentType.SPOT,
        inst_id: str | None = None,
        cancel_token: CancelToken | None = None,
    ) -> ApiResult[list[Instrument]]:
        """Get basic information about tradable instruments.

        Args:
            inst_type: Instrument type.
            inst_id: Optional instrument ID filter.
            cancel_token: Token aborting the request.

        Returns:
            The instruments.

        """
        return await self.client.get_list(
            INSTRUMENTS_PATH,
            Instrument.from_json,
            query_parameters={"instType": inst_type, "instId": inst_id},
            cancel_token=cancel_token,
        )

    async def get_market_ticker_list(
        self,
        inst_type: InstrumentType = InstrumentType.SPOT,
        cancel_token: CancelToken | None = None,
    ) -> ApiResult[list[MarketTicker]]:
        """Get the latest tickers of all instruments of a type."""
        return await self.client.get_list(
            MARKET_TICKERS_PATH,
            MarketTicker.from_json,
            query_parameters={"instType": inst_type},
            cancel_token=cancel_token,
        )

    async def get_market_ticker(
        self, inst_id: str, cancel_token: CancelToken | None = None
    ) -> ApiResult[MarketTicker]:
        """Get the latest ticker of a single instrument.

        Args:
            inst_id: Instrument ID, e.g. BTC-USDT.
            cancel_token: Token aborting the request.

        Returns:
            The first ticker of the list, or no data when the list is empty.

        """
        result = await self.client.get_list(
            MARKET_TICKER_PATH,
            MarketTicker.from_json,
            query_parameters={"instId": inst_id},
            cancel_token=cancel_token,
        )
        return ApiResult(
            code=result.code,
            message=result.message,
            data=result.data[0] if result.data else None,
            succeeded=result.succeeded,
        )
