from enum import Enum

class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

class StepStage(str, Enum):
    START = "START"
    VALIDATE = "VALIDATE"
    RESOLVE_CREDENTIALS = "RESOLVE_CREDENTIALS"
    RESOLVE_IDENTIFIERS = "RESOLVE_IDENTIFIERS"
    BUILD_REQUEST = "BUILD_REQUEST"
    EXECUTE = "EXECUTE"
    CLASSIFY = "CLASSIFY"
    DONE = "DONE"

class ErrorCode(str, Enum):
    INVALID_INPUT_COMBINATION = "INVALID_INPUT_COMBINATION"
    MISSING_INPUT = "MISSING_INPUT"
    MISSING_CREDENTIALS = "MISSING_CREDENTIALS"
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    PARSE_ERROR = "PARSE_ERROR"
    UNKNOWN_RESOURCE = "UNKNOWN_RESOURCE"
    TRANSPORT_TIMEOUT = "TRANSPORT_TIMEOUT"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    API_ERROR = "API_ERROR"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"

class SlotKind(str, Enum):
    FILE_REFERENCE = "FILE_REFERENCE"
    PROJECT_NAME = "PROJECT_NAME"

class LogLevel(str, Enum):
    INFO = "info"
    ERROR = "error"
