from typing import Any, Callable, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from client.result import ApiResult
from constants import ERROR_CODE_INTERNAL, SUCCEED_CODE

T = TypeVar("T")

DataConvert = Callable[[Any], T | None]


class ResponseEnvelope(BaseModel):
    """Uniform `code`/`msg`/`data`/`success` wrapper around every payload."""

    model_config = ConfigDict(extra="ignore")

    code: str = Field(default=ERROR_CODE_INTERNAL, description="Outcome code")
    msg: str = Field(default="", description="Message")
    data: Any = Field(default=None, description="Payload")
    success: bool | None = Field(default=None, description="Explicit success flag")

    @field_validator("code", mode="before")
    @classmethod
    def _coerce_code(cls, value: Any) -> str:
        if value is None:
            return ERROR_CODE_INTERNAL
        return str(value)

    @field_validator("msg", mode="before")
    @classmethod
    def _coerce_msg(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)


def handle_response(body: Any, convert: DataConvert[T]) -> ApiResult[T]:
    """Map a decoded response body to `ApiResult`.

    Args:
        body: Decoded JSON body.
        convert: Converter applied to the `data` node on success.

    Returns:
        The result carrying converted data when the server signals success.

    Raises:
        pydantic.ValidationError: If the body is not a JSON object.

    """
    envelope = ResponseEnvelope.model_validate(body)
    if envelope.code == SUCCEED_CODE and envelope.success is not False:
        return ApiResult(
            code=envelope.code,
            message=envelope.msg,
            data=convert(envelope.data),
            succeeded=envelope.success,
        )

    return ApiResult(
        code=envelope.code,
        message=envelope.msg,
        data=None,
        succeeded=envelope.success,
    )
