from constants.http import (
    ACCESS_KEY_HEADER,
    DEFAULT_TIMEOUT,
    ERROR_CODE_BAD_CERTIFICATE,
    ERROR_CODE_CANCEL,
    ERROR_CODE_CONNECTION_ERROR,
    ERROR_CODE_INTERNAL,
    ERROR_CODE_TIMEOUT,
    ERROR_CODE_UNKNOWN,
    STATUS_MESSAGES,
    SUCCEED_CODE,
    UNKNOWN_ERROR_MESSAGE,
    UPLOAD_CHUNK_SIZE,
)
from constants.okx import (
    DEFAULT_BASE_URL,
    DEFAULT_INST_ID,
    INSTRUMENTS_PATH,
    MARKET_TICKER_PATH,
    MARKET_TICKERS_PATH,
)

__all__ = [
    "ACCESS_KEY_HEADER",
    "DEFAULT_TIMEOUT",
    "ERROR_CODE_BAD_CERTIFICATE",
    "ERROR_CODE_CANCEL",
    "ERROR_CODE_CONNECTION_ERROR",
    "ERROR_CODE_INTERNAL",
    "ERROR_CODE_TIMEOUT",
    "ERROR_CODE_UNKNOWN",
    "STATUS_MESSAGES",
    "SUCCEED_CODE",
    "UNKNOWN_ERROR_MESSAGE",
    "UPLOAD_CHUNK_SIZE",
    "DEFAULT_BASE_URL",
    "DEFAULT_INST_ID",
    "INSTRUMENTS_PATH",
    "MARKET_TICKER_PATH",
    "MARKET_TICKERS_PATH",
]
