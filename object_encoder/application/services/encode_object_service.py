"""
Application service for the encode use case.

Runs the pipeline parse -> fetch -> encode and maps the outcome onto an
InvocationResponseDTO. It depends on the ObjectStorage port, not on S3.
"""

import base64
from typing import Any, BinaryIO

import structlog
from botocore.exceptions import BotoCoreError

from ...domain.errors import DownloadError, EncoderError
from ...domain.ports import ObjectStorage
from ..dtos import InvocationResponseDTO, parse_request

logger = structlog.get_logger()

DEFAULT_CHUNK_SIZE = 4 * 1024


def encode_stream(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """
    Drain a byte stream and return its base64 encoding.

    The stream is rewound first when it supports seeking, and is closed
    afterwards.

    Args:
        stream: Readable byte stream
        chunk_size: Bytes per read call

    Returns:
        Standard base64 text (empty for an empty stream)

    Raises:
        DownloadError: If reading the stream fails
    """
    buffer = bytearray()
    try:
        if stream.seekable() and stream.tell() != 0:
            stream.seek(0)

        while True:
            chunk = stream.read(chunk_size)
            if not chunk:
                break
            buffer.extend(chunk)

    except (OSError, BotoCoreError) as e:
        logger.error("Failed to read object body", error=str(e))
        raise DownloadError(str(e)) from e

    finally:
        stream.close()

    return base64.b64encode(buffer).decode("ascii")


class EncodeObjectService:
    """
    Application service that downloads and encodes one object.

    The first failure short-circuits the pipeline; nothing is retried.
    """

    def __init__(self, storage: ObjectStorage, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        """
        Initialize with a storage implementation.

        Args:
            storage: Implementation of the ObjectStorage port
            chunk_size: Bytes per read when draining the object body
        """
        self._storage = storage
        self._chunk_size = chunk_size

    def execute(self, payload: Any) -> InvocationResponseDTO:
        """Handle one invocation payload."""
        try:
            request = parse_request(payload)
            stream = self._storage.open_object(request.bucket, request.key)
            encoded = encode_stream(stream, self._chunk_size)

        except EncoderError as e:
            logger.warning(
                "Invocation failed",
                error_type=e.error_kind.value,
                error=e.message,
            )
            return InvocationResponseDTO.from_error(e)

        logger.info("Object encoded", uri=request.uri, encoded_length=len(encoded))
        return InvocationResponseDTO.encoded(encoded)
