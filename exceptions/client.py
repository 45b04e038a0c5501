from exceptions.base import BaseError


class RequestCancelledError(BaseError):
    def __init__(self, message: str = "Request cancelled"):
        super().__init__(message=message)
