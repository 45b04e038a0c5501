DEFAULT_BASE_URL = "https://aws.okx.com"
DEFAULT_INST_ID = "BTC-USDT"

INSTRUMENTS_PATH = "/api/v5/public/instruments"
MARKET_TICKERS_PATH = "/api/v5/market/tickers"
MARKET_TICKER_PATH = "/api/v5/market/ticker"
