"""Download an S3 object and return it base64 encoded."""

__version__ = "0.1.0"
