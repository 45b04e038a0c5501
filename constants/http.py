SUCCEED_CODE = "0"
ERROR_CODE_CANCEL = "700"
ERROR_CODE_INTERNAL = "701"
ERROR_CODE_UNKNOWN = "600"
ERROR_CODE_TIMEOUT = "601"
ERROR_CODE_BAD_CERTIFICATE = "602"
ERROR_CODE_CONNECTION_ERROR = "603"

DEFAULT_TIMEOUT = 15.0
ACCESS_KEY_HEADER = "OK-ACCESS-KEY"
UPLOAD_CHUNK_SIZE = 64 * 1024

STATUS_MESSAGES: dict[int, str] = {
    400: "syntaxError",
    401: "permissionDenied",
    403: "serverRefused",
    404: "cannotReachServer",
    405: "reqMethodForbidden",
    500: "serverInternalError",
    502: "invalidReq",
    503: "serverDown",
    505: "unsupportedProtocol",
}
UNKNOWN_ERROR_MESSAGE = "unknownError"
