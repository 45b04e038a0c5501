from pydantic import Field

from schemas.base import OkxModel


class Instrument(OkxModel):
    inst_type: str = Field(default="", alias="instType", description="Instrument type")
    inst_id: str = Field(default="", alias="instId", description="Instrument ID")
    uly: str = Field(default="", description="Underlying")
    inst_family: str = Field(
        default="", alias="instFamily", description="Instrument family"
    )
    base_ccy: str = Field(default="", alias="baseCcy", description="Base currency")
    quote_ccy: str = Field(default="", alias="quoteCcy", description="Quote currency")
    settle_ccy: str = Field(
        default="", alias="settleCcy", description="Settlement currency"
    )
    ct_val: str = Field(default="", alias="ctVal", description="Contract value")
    ct_mult: str = Field(default="", alias="ctMult", description="Contract multiplier")
    ct_val_ccy: str = Field(
        default="", alias="ctValCcy", description="Contract value currency"
    )
    opt_type: str = Field(default="", alias="optType", description="Option type")
    stk: str = Field(default="", description="Strike price")
    list_time: str = Field(default="", alias="listTime", description="Listing time")
    exp_time: str = Field(default="", alias="expTime", description="Expiry time")
    lever: str = Field(default="", description="Max leverage")
    tick_sz: str = Field(default="", alias="tickSz", description="Tick size")
    lot_sz: str = Field(default="", alias="lotSz", description="Lot size")
    min_sz: str = Field(default="", alias="minSz", description="Minimum order size")
    ct_type: str = Field(default="", alias="ctType", description="Contract type")
    alias: str = Field(default="", description="Alias")
    state: str = Field(default="", description="Instrument status")
    max_lmt_sz: str = Field(
        default="", alias="maxLmtSz", description="Max limit order size"
    )
    max_mkt_sz: str = Field(
        default="", alias="maxMktSz", description="Max market order size"
    )
