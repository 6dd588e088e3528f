from .s3_object_storage import S3ObjectStorage, StorageClientConfig

__all__ = [
    "S3ObjectStorage",
    "StorageClientConfig",
]
