from enums.http import FailureKind, HttpMethod
from enums.market import InstrumentType

__all__ = ["FailureKind", "HttpMethod", "InstrumentType"]
