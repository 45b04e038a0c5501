from enum import StrEnum


class HttpMethod(StrEnum):
    CONNECT = "CONNECT"
    HEAD = "HEAD"
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"


class FailureKind(StrEnum):
    CONNECTION_TIMEOUT = "connection_timeout"
    SEND_TIMEOUT = "send_timeout"
    RECEIVE_TIMEOUT = "receive_timeout"
    CANCEL = "cancel"
    BAD_RESPONSE = "bad_response"
    BAD_CERTIFICATE = "bad_certificate"
    CONNECTION_ERROR = "connection_error"
    UNKNOWN = "unknown"
