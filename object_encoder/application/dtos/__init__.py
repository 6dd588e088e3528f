from .encode_request_dto import EncodeRequestDTO, parse_request
from .invocation_response_dto import BASE64_CONTENT_TYPE, InvocationResponseDTO

__all__ = [
    "BASE64_CONTENT_TYPE",
    "EncodeRequestDTO",
    "InvocationResponseDTO",
    "parse_request",
]
