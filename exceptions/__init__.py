from exceptions.base import BaseError
from exceptions.client import RequestCancelledError

__all__ = ["BaseError", "RequestCancelledError"]
