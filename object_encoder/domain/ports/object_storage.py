"""
Outbound port for object retrieval.

The application layer reads objects through this interface.
Infrastructure adapters implement it for a concrete storage service.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO


class ObjectStorage(ABC):
    """
    Outbound port for reading objects by bucket and key.

    Implementations make a single attempt and raise DownloadError on any
    failure; they never retry.
    """

    @abstractmethod
    def open_object(self, bucket: str, key: str) -> BinaryIO:
        """
        Open an object for reading.

        Args:
            bucket: Bucket name
            key: Object key

        Returns:
            Readable byte stream positioned at the start of the object

        Raises:
            DownloadError: If the object cannot be retrieved
        """
        ...
