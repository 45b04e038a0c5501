from schemas.base import OkxModel
from schemas.instrument import Instrument
from schemas.ticker import MarketTicker

__all__ = ["OkxModel", "Instrument", "MarketTicker"]
