from .encode_object_service import EncodeObjectService, encode_stream

__all__ = [
    "EncodeObjectService",
    "encode_stream",
]
