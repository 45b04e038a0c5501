import asyncio
import contextlib
import json
from typing import Any, AsyncIterator, Awaitable, Callable, Self, TypeVar

import httpx
import logfire

from client.cancel import CancelToken
from client.failure import handle_exception
from client.response import DataConvert, handle_response
from client.result import ApiResult
from constants import ACCESS_KEY_HEADER, DEFAULT_TIMEOUT, UPLOAD_CHUNK_SIZE
from enums import HttpMethod
from exceptions import RequestCancelledError
from settings import okx_settings

T = TypeVar("T")

ModelMapper = Callable[[dict[str, Any]], T]
ProgressCallback = Callable[[int, int], None]


def _single(mapper: ModelMapper[T]) -> DataConvert[T]:
    def convert(data: Any) -> T | None:
        return mapper(data)

    return convert


def _many(mapper: ModelMapper[T]) -> DataConvert[list[T]]:
    def convert(data: Any) -> list[T]:
        if data is None:
            return []
        if not isinstance(data, list):
            raise TypeError(f"Expected a list payload, got {type(data).__name__}")
        return [mapper(item) for item in data]

    return convert


async def _iter_upload(
    content: bytes, on_send_progress: ProgressCallback
) -> AsyncIterator[bytes]:
    total = len(content)
    sent = 0
    for start in range(0, total, UPLOAD_CHUNK_SIZE):
        chunk = content[start : start + UPLOAD_CHUNK_SIZE]
        sent += len(chunk)
        on_send_progress(sent, total)
        yield chunk


class HttpClient:
    def __init__(
        self,
        base_url: str,
        access_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize client with base URL, optional access key and transport.

        Args:
            base_url: REST API base URL.
            access_key: Access key sent with every request when set.
            transport: Custom httpx transport, the default network one when None.

        """
        default_headers = {ACCESS_KEY_HEADER: access_key} if access_key else {}
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=default_headers,
            timeout=httpx.Timeout(DEFAULT_TIMEOUT),
            transport=transport,
        )
        self._req_headers: dict[str, str] = {}

    @property
    def headers(self) -> dict[str, str]:
        """Copy of the extra headers applied to every request."""
        return dict(self._req_headers)

    def add_header(self, key: str, value: str) -> None:
        self._req_headers[key] = value

    def remove_header(self, key: str) -> None:
        self._req_headers.pop(key, None)

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def _build_request(
        self,
        path: str,
        method: HttpMethod,
        data: Any,
        query_parameters: dict[str, Any] | None,
        headers: dict[str, str] | None,
        on_send_progress: ProgressCallback | None,
    ) -> httpx.Request:
        request_headers = {**self._req_headers, **(headers or {})}
        params = {
            key: value
            for key, value in (query_parameters or {}).items()
            if value is not None
        }

        content: bytes | None = None
        if isinstance(data, bytes):
            content = data
        elif isinstance(data, str):
            content = data.encode()
        elif data is not None:
            content = json.dumps(data).encode()
            request_headers.setdefault("Content-Type", "application/json")

        if content is not None and on_send_progress is not None:
            request_headers["Content-Length"] = str(len(content))
            return self._client.build_request(
                method=method.value,
                url=path,
                params=params,
                headers=request_headers,
                content=_iter_upload(content, on_send_progress),
            )

        return self._client.build_request(
            method=method.value,
            url=path,
            params=params,
            headers=request_headers,
            content=content,
        )

    async def _send(
        self,
        request: httpx.Request,
        on_receive_progress: ProgressCallback | None,
    ) -> Any:
        response = await self._client.send(request, stream=True)
        try:
            response.raise_for_status()
            total = int(response.headers.get("Content-Length", -1))
            chunks: list[bytes] = []
            async for chunk in response.aiter_bytes():
                chunks.append(chunk)
                if on_receive_progress is not None:
                    on_receive_progress(response.num_bytes_downloaded, total)
        finally:
            await response.aclose()
        return json.loads(b"".join(chunks))

    @staticmethod
    async def _run_cancellable(
        operation: Awaitable[Any], cancel_token: CancelToken
    ) -> Any:
        send_task = asyncio.ensure_future(operation)
        cancel_task = asyncio.ensure_future(cancel_token.wait())
        try:
            await asyncio.wait(
                {send_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            cancel_task.cancel()
            if not send_task.done():
                send_task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await send_task

        if send_task.cancelled():
            raise RequestCancelledError(cancel_token.reason or "Request cancelled")
        return send_task.result()

    async def request(
        self,
        path: str,
        convert: DataConvert[T],
        *,
        method: HttpMethod,
        data: Any = None,
        query_parameters: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        cancel_token: CancelToken | None = None,
        on_send_progress: ProgressCallback | None = None,
        on_receive_progress: ProgressCallback | None = None,
    ) -> ApiResult[T]:
        """Send a request and normalize its outcome.

        Args:
            path: Endpoint path relative to the base URL.
            convert: Converter applied to the `data` node of a successful envelope.
            method: HTTP method.
            data: Request body; bytes and str are sent as-is, anything else as JSON.
            query_parameters: Query parameters, None values are dropped.
            headers: Per-call headers, overriding the shared ones on conflict.
            cancel_token: Token aborting the request when cancelled.
            on_send_progress: Called with (sent, total) while uploading the body.
            on_receive_progress: Called with (received, total) while reading
                the response. Both count wire bytes, total is -1 when unknown.

        Returns:
            The normalized result. Failures are returned, never raised.

        """
        with logfire.span("{method} {path}", method=method.value, path=path):
            try:
                if cancel_token is not None and cancel_token.is_cancelled:
                    raise RequestCancelledError(
                        cancel_token.reason or "Request cancelled"
                    )

                request = self._build_request(
                    path=path,
                    method=method,
                    data=data,
                    query_parameters=query_parameters,
                    headers=headers,
                    on_send_progress=on_send_progress,
                )
                operation = self._send(
                    request=request, on_receive_progress=on_receive_progress
                )
                if cancel_token is None:
                    body = await operation
                else:
                    body = await self._run_cancellable(operation, cancel_token)

                result = handle_response(body, convert)
            except Exception as exc:
                result = handle_exception(exc)

            if not result.succeeded:
                logfire.warn(
                    "Request {method} {path} failed: {code} {message}",
                    method=method.value,
                    path=path,
                    code=result.code,
                    message=result.message,
                )
            return result

    async def get(
        self,
        path: str,
        mapper: ModelMapper[T],
        *,
        query_parameters: dict[str, Any] | None = None,
        data: Any = None,
        headers: dict[str, str] | None = None,
        cancel_token: CancelToken | None = None,
        on_receive_progress: ProgressCallback | None = None,
    ) -> ApiResult[T]:
        """GET a single object mapped with `mapper`."""
        return await self.request(
            path,
            _single(mapper),
            method=HttpMethod.GET,
            data=data,
            query_parameters=query_parameters,
            headers=headers,
            cancel_token=cancel_token,
            on_receive_progress=on_receive_progress,
        )

    async def get_list(
        self,
        path: str,
        mapper: ModelMapper[T],
        *,
        query_parameters: dict[str, Any] | None = None,
        data: Any = None,
        headers: dict[str, str] | None = None,
        cancel_token: CancelToken | None = None,
        on_receive_progress: ProgressCallback | None = None,
    ) -> ApiResult[list[T]]:
        """GET a list, mapping each element with `mapper`."""
        return await self.request(
            path,
            _many(mapper),
            method=HttpMethod.GET,
            data=data,
            query_parameters=query_parameters,
            headers=headers,
            cancel_token=cancel_token,
            on_receive_progress=on_receive_progress,
        )

    async def post(
        self,
        path: str,
        mapper: ModelMapper[T],
        *,
        data: Any = None,
        query_parameters: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        cancel_token: CancelToken | None = None,
        on_send_progress: ProgressCallback | None = None,
        on_receive_progress: ProgressCallback | None = None,
    ) -> ApiResult[T]:
        return await self.request(
            path,
            _single(mapper),
            method=HttpMethod.POST,
            data=data,
            query_parameters=query_parameters,
            headers=headers,
            cancel_token=cancel_token,
            on_send_progress=on_send_progress,
            on_receive_progress=on_receive_progress,
        )

    async def post_list(
        self,
        path: str,
        mapper: ModelMapper[T],
        *,
        data: Any = None,
        query_parameters: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        cancel_token: CancelToken | None = None,
        on_send_progress: ProgressCallback | None = None,
        on_receive_progress: ProgressCallback | None = None,
    ) -> ApiResult[list[T]]:
        return await self.request(
            path,
            _many(mapper),
            method=HttpMethod.POST,
            data=data,
            query_parameters=query_parameters,
            headers=headers,
            cancel_token=cancel_token,
            on_send_progress=on_send_progress,
            on_receive_progress=on_receive_progress,
        )


_http_client: HttpClient | None = None


async def init_http_client(
    base_url: str = okx_settings.base_url,
    access_key: str | None = okx_settings.access_key,
) -> HttpClient:
    """Create the process-wide client, closing the one it replaces.

    Library entry point for hosts that keep one event loop for the process
    lifetime. Per-call hosts such as the Streamlit screen own their client.

    Args:
        base_url: REST API base URL.
        access_key: Optional access key.

    Returns:
        The new client.

    """
    global _http_client
    if _http_client is not None:
        await _http_client.aclose()
    _http_client = HttpClient(base_url=base_url, access_key=access_key)
    return _http_client


def get_http_client() -> HttpClient:
    """Return the process-wide client.

    Raises:
        RuntimeError: If `init_http_client` has not been called.

    """
    if _http_client is None:
        raise RuntimeError("HTTP client is not initialized")
    return _http_client
