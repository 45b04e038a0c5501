import ssl
from dataclasses import dataclass
from typing import Any, Self

import httpx

from client.result import ApiResult
from constants import (
    ERROR_CODE_BAD_CERTIFICATE,
    ERROR_CODE_CANCEL,
    ERROR_CODE_CONNECTION_ERROR,
    ERROR_CODE_INTERNAL,
    ERROR_CODE_TIMEOUT,
    ERROR_CODE_UNKNOWN,
    STATUS_MESSAGES,
    UNKNOWN_ERROR_MESSAGE,
)
from enums import FailureKind
from exceptions import RequestCancelledError

_TIMEOUT_MESSAGES: dict[FailureKind, str] = {
    FailureKind.CONNECTION_TIMEOUT: "connectionTimeout",
    FailureKind.SEND_TIMEOUT: "sendTimeout",
    FailureKind.RECEIVE_TIMEOUT: "responseTimeout",
}


def _is_certificate_error(exc: BaseException) -> bool:
    current: BaseException | None = exc
    seen: set[int] = set()
    while current is not None and id(current) not in seen:
        if isinstance(current, ssl.SSLCertVerificationError):
            return True
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return False


@dataclass
class TransportFailure:
    """Tagged description of a transport-level failure."""

    kind: FailureKind
    status_code: int | None = None
    status_message: str | None = None
    response: httpx.Response | None = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> Self | None:
        """Classify an exception raised while sending a request.

        Args:
            exc: The raised exception.

        Returns:
            The failure description, or None when `exc` is not a transport failure.

        """
        if isinstance(exc, RequestCancelledError):
            return cls(kind=FailureKind.CANCEL)
        if isinstance(exc, (httpx.ConnectTimeout, httpx.PoolTimeout)):
            return cls(kind=FailureKind.CONNECTION_TIMEOUT)
        if isinstance(exc, httpx.WriteTimeout):
            return cls(kind=FailureKind.SEND_TIMEOUT)
        if isinstance(exc, httpx.ReadTimeout):
            return cls(kind=FailureKind.RECEIVE_TIMEOUT)
        if isinstance(exc, httpx.HTTPStatusError):
            return cls(
                kind=FailureKind.BAD_RESPONSE,
                status_code=exc.response.status_code,
                status_message=exc.response.reason_phrase or None,
                response=exc.response,
            )
        if isinstance(exc, httpx.ConnectError) and _is_certificate_error(exc):
            return cls(kind=FailureKind.BAD_CERTIFICATE)
        if isinstance(exc, (httpx.NetworkError, httpx.ProtocolError)):
            return cls(kind=FailureKind.CONNECTION_ERROR)
        if isinstance(exc, httpx.HTTPError):
            return cls(kind=FailureKind.UNKNOWN)
        return None


def handle_failure(failure: TransportFailure) -> ApiResult[Any]:
    """Map a transport failure to a failed `ApiResult`."""
    code: str | None = None
    message: str | None = None

    match failure.kind:
        case (
            FailureKind.CONNECTION_TIMEOUT
            | FailureKind.SEND_TIMEOUT
            | FailureKind.RECEIVE_TIMEOUT
        ):
            code = ERROR_CODE_TIMEOUT
            message = _TIMEOUT_MESSAGES[failure.kind]
        case FailureKind.CANCEL:
            code = ERROR_CODE_CANCEL
            message = "canceled"
        case FailureKind.BAD_RESPONSE:
            if failure.status_code is not None:
                message = STATUS_MESSAGES.get(failure.status_code)
                if message is not None:
                    code = str(failure.status_code)
            code = code or ERROR_CODE_INTERNAL
            message = message or failure.status_message or UNKNOWN_ERROR_MESSAGE
        case FailureKind.BAD_CERTIFICATE:
            code = ERROR_CODE_BAD_CERTIFICATE
            message = "badCertificate"
        case FailureKind.CONNECTION_ERROR:
            code = ERROR_CODE_CONNECTION_ERROR
            message = "connectionError"
        case FailureKind.UNKNOWN:
            pass

    return ApiResult(
        code=code or ERROR_CODE_UNKNOWN,
        message=message or UNKNOWN_ERROR_MESSAGE,
        data=None,
    )


def handle_exception(exc: BaseException) -> ApiResult[Any]:
    """Map any exception raised during a request to a failed `ApiResult`."""
    failure = TransportFailure.from_exception(exc)
    if failure is not None:
        return handle_failure(failure)

    return ApiResult(
        code=ERROR_CODE_INTERNAL,
        message=str(exc) or type(exc).__name__,
        data=None,
    )
