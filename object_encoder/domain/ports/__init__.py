from .object_storage import ObjectStorage

__all__ = [
    "ObjectStorage",
]
