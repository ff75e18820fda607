from typing import Optional
from skytap_builder.models.enums import ErrorCode

class StepError(RuntimeError):
    code = ErrorCode.API_ERROR

    def __init__(self, message: str, code: Optional[ErrorCode] = None, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.details = details

class InvalidInputCombination(StepError):
    code = ErrorCode.INVALID_INPUT_COMBINATION

class MissingInput(StepError):
    code = ErrorCode.MISSING_INPUT

class MissingCredentials(StepError):
    code = ErrorCode.MISSING_CREDENTIALS

class ReferenceFileNotFound(StepError):
    code = ErrorCode.FILE_NOT_FOUND

class ReferenceParseError(StepError):
    code = ErrorCode.PARSE_ERROR

class UnknownResource(StepError):
    code = ErrorCode.UNKNOWN_RESOURCE

class TransportError(StepError):
    """The request could not complete."""
    code = ErrorCode.TRANSPORT_ERROR

class ApiError(StepError):
    """The request completed but Skytap rejected the operation."""
    code = ErrorCode.API_ERROR
