"""Response DTO handed back to the invocation runtime."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ...domain.errors import EncoderError, ErrorKind

BASE64_CONTENT_TYPE = "application/base64"


class InvocationResponseDTO(BaseModel):
    """DTO for the terminal state of one invocation.

    Either carries the encoded payload, or an error message with its kind.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    success: bool
    payload: str | None = None
    content_type: str | None = Field(default=None, alias="contentType")
    error_type: ErrorKind | None = Field(default=None, alias="errorType")
    error_message: str | None = Field(default=None, alias="errorMessage")

    @classmethod
    def encoded(cls, payload: str) -> "InvocationResponseDTO":
        return cls(success=True, payload=payload, content_type=BASE64_CONTENT_TYPE)

    @classmethod
    def failed(cls, message: str, error_type: ErrorKind) -> "InvocationResponseDTO":
        return cls(success=False, error_type=error_type, error_message=message)

    @classmethod
    def from_error(cls, error: EncoderError) -> "InvocationResponseDTO":
        return cls.failed(error.message, error.error_kind)

    def to_invocation_result(self) -> dict[str, Any]:
        """Render the camelCase dict returned from the Lambda handler."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
