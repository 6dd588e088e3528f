"""Request DTO for the encode use case."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from ...domain.errors import InvalidRequestError


class EncodeRequestDTO(BaseModel):
    """DTO naming the object to download and encode."""

    model_config = ConfigDict(frozen=True)

    bucket: StrictStr = Field(..., alias="s3bucket")
    key: StrictStr = Field(..., alias="s3key")

    @property
    def uri(self) -> str:
        return f"s3://{self.bucket}/{self.key}"


def parse_request(payload: Any) -> EncodeRequestDTO:
    """
    Validate an invocation payload.

    The Lambda runtime normally passes an already decoded JSON value, but raw
    text or bytes are decoded here as well.

    Args:
        payload: Decoded event or raw JSON text

    Returns:
        EncodeRequestDTO with bucket and key

    Raises:
        InvalidRequestError: If the payload is not JSON or lacks string
            s3bucket/s3key fields
    """
    try:
        if isinstance(payload, (str, bytes, bytearray)):
            return EncodeRequestDTO.model_validate_json(payload)
        return EncodeRequestDTO.model_validate(payload)
    except ValidationError as e:
        if any(err["type"] == "json_invalid" for err in e.errors()):
            raise InvalidRequestError("Failed to parse input JSON") from e
        raise InvalidRequestError("Missing input value s3bucket or s3key") from e
