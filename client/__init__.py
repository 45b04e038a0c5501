from client.cancel import CancelToken
from client.failure import TransportFailure, handle_exception, handle_failure
from client.http_client import (
    HttpClient,
    ModelMapper,
    ProgressCallback,
    get_http_client,
    init_http_client,
)
from client.response import DataConvert, ResponseEnvelope, handle_response
from client.result import ApiResult

__all__ = [
    "ApiResult",
    "CancelToken",
    "DataConvert",
    "HttpClient",
    "ModelMapper",
    "ProgressCallback",
    "ResponseEnvelope",
    "TransportFailure",
    "get_http_client",
    "handle_exception",
    "handle_failure",
    "handle_response",
    "init_http_client",
]
