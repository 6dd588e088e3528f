from .errors import DownloadError, EncoderError, ErrorKind, InvalidRequestError

__all__ = [
    "DownloadError",
    "EncoderError",
    "ErrorKind",
    "InvalidRequestError",
]
