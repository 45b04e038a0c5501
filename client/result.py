from dataclasses import dataclass
from typing import Generic, TypeVar

from constants import SUCCEED_CODE

T = TypeVar("T")


@dataclass
class ApiResult(Generic[T]):
    """Uniform outcome of an API call.

    `succeeded` defaults to comparing `code` with the success code. A failed
    result never carries data.
    """

    code: str
    message: str
    data: T | None = None
    succeeded: bool | None = None

    def __post_init__(self) -> None:
        if self.succeeded is None:
            self.succeeded = self.code == SUCCEED_CODE
        if not self.succeeded:
            self.data = None
