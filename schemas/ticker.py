from pydantic import Field

from schemas.base import OkxModel


class MarketTicker(OkxModel):
    inst_type: str = Field(default="", alias="instType", description="Instrument type")
    inst_id: str = Field(default="", alias="instId", description="Instrument ID")
    last: str = Field(default="", description="Last traded price")
    last_sz: str = Field(default="", alias="lastSz", description="Last traded size")
    ask_px: str = Field(default="", alias="askPx", description="Best ask price")
    ask_sz: str = Field(default="", alias="askSz", description="Best ask size")
    bid_px: str = Field(default="", alias="bidPx", description="Best bid price")
    bid_sz: str = Field(default="", alias="bidSz", description="Best bid size")
    open_24h: str = Field(default="", alias="open24h", description="24h open price")
    high_24h: str = Field(default="", alias="high24h", description="24h high price")
    low_24h: str = Field(default="", alias="low24h", description="24h low price")
    vol_ccy_24h: str = Field(
        default="", alias="volCcy24h", description="24h volume in currency"
    )
    vol_24h: str = Field(default="", alias="vol24h", description="24h volume")
    sod_utc0: str = Field(default="", alias="sodUtc0", description="Open at UTC 0")
    sod_utc8: str = Field(default="", alias="sodUtc8", description="Open at UTC 8")
    ts: str = Field(default="", description="Ticker timestamp, ms")
