"""
Domain errors for the encode pipeline.

Every failure an invocation can report is one of two kinds. Adapters translate
library exceptions into these, and the application service turns them into
failure responses.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Error type tags reported back to the invocation runtime."""

    INVALID_JSON = "InvalidJSON"
    DOWNLOAD_FAILURE = "DownloadFailure"


class EncoderError(Exception):
    """Base class for errors that terminate an invocation with a failure response."""

    error_kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequestError(EncoderError):
    """The payload is malformed or lacks s3bucket/s3key."""

    error_kind = ErrorKind.INVALID_JSON


class DownloadError(EncoderError):
    """Retrieving or reading the object failed."""

    error_kind = ErrorKind.DOWNLOAD_FAILURE

    def __init__(self, message: str, error_code: str | None = None) -> None:
        super().__init__(message)
        self.error_code = error_code
