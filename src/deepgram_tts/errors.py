"""
Error taxonomy for the Deepgram TTS MCP server.

Every failure a tool call can hit maps to one exception class and one
ErrorKind. The adapter catches them at the tool boundary and turns them
into an error result; only MissingApiKeyError is allowed to stop the process.
"""

from enum import Enum


class ErrorKind(str, Enum):
    MISSING_API_KEY = "missing_api_key"
    INVALID_REQUEST = "invalid_request"
    API_ERROR = "api_error"
    NETWORK_ERROR = "network_error"
    FILE_SYSTEM_ERROR = "file_system_error"


class DeepgramTTSError(Exception):
    """Base class for all errors raised by this package."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingApiKeyError(DeepgramTTSError):
    kind = ErrorKind.MISSING_API_KEY


class InvalidRequestError(DeepgramTTSError):
    kind = ErrorKind.INVALID_REQUEST


class ApiError(DeepgramTTSError):
    """Deepgram answered with a non-success HTTP status."""

    kind = ErrorKind.API_ERROR

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Deepgram API error ({status_code}): {body}")
        self.status_code = status_code
        self.body = body


class NetworkError(DeepgramTTSError):
    kind = ErrorKind.NETWORK_ERROR


class FileSystemError(DeepgramTTSError):
    kind = ErrorKind.FILE_SYSTEM_ERROR
