"""
S3 adapter for the ObjectStorage port.

Security: Credentials come from the process environment only and are never
logged. Transport is always HTTPS, validated against a fixed CA bundle.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, BinaryIO

import boto3
import structlog
from botocore.config import Config
from botocore.credentials import EnvProvider
from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError

from ...domain.errors import DownloadError
from ...domain.ports import ObjectStorage
from ..logging import Timer

logger = structlog.get_logger()


@dataclass(frozen=True)
class StorageClientConfig:
    """Fixed S3 client configuration, built once per process."""

    region: str
    ca_bundle_path: str
    endpoint_url: str | None = None  # For LocalStack, HTTPS only

    def __post_init__(self) -> None:
        # botocore ignores use_ssl when the endpoint carries its own scheme
        if self.endpoint_url is not None and not self.endpoint_url.lower().startswith("https://"):
            raise ValueError(f"S3 endpoint must use https://: {self.endpoint_url}")

    @classmethod
    def from_settings(cls, settings: Any) -> "StorageClientConfig":
        return cls(
            region=settings.aws_region,
            ca_bundle_path=settings.ca_bundle_path,
            endpoint_url=settings.aws_endpoint_url,
        )

    @property
    def client_config(self) -> Config:
        # One attempt per request, no SDK-level retries
        return Config(
            region_name=self.region,
            retries={"total_max_attempts": 1, "mode": "standard"},
        )


def create_s3_client(config: StorageClientConfig) -> Any:
    """
    Create an S3 client from environment credentials.

    Args:
        config: Fixed client configuration

    Returns:
        boto3 S3 client

    Raises:
        NoCredentialsError: If the environment holds no AWS credentials
    """
    credentials = EnvProvider().load()
    if credentials is None:
        raise NoCredentialsError()
    frozen = credentials.get_frozen_credentials()

    session = boto3.session.Session(
        aws_access_key_id=frozen.access_key,
        aws_secret_access_key=frozen.secret_key,
        aws_session_token=frozen.token,
        region_name=config.region,
    )
    return session.client(
        "s3",
        use_ssl=True,
        verify=config.ca_bundle_path,
        endpoint_url=config.endpoint_url,
        config=config.client_config,
    )


class S3ObjectStorage(ObjectStorage):
    """
    ObjectStorage implementation backed by S3 GetObject.

    The client is created per call so credentials are resolved from the
    environment at call time; the configuration itself never changes.
    """

    def __init__(
        self,
        config: StorageClientConfig,
        client_factory: Callable[[StorageClientConfig], Any] = create_s3_client,
    ) -> None:
        """
        Initialize with fixed configuration.

        Args:
            config: Immutable client configuration
            client_factory: Builds an S3 client from the configuration
        """
        self._config = config
        self._client_factory = client_factory

    @property
    def config(self) -> StorageClientConfig:
        return self._config

    def open_object(self, bucket: str, key: str) -> BinaryIO:
        """Fetch an object and return its body stream."""
        uri = f"s3://{bucket}/{key}"
        logger.info("Attempting to download file", uri=uri)

        try:
            with Timer() as t:
                client = self._client_factory(self._config)
                response = client.get_object(Bucket=bucket, Key=key)

        except ClientError as e:
            error = e.response.get("Error", {})
            error_code = error.get("Code", "")
            message = error.get("Message") or str(e)
            logger.error(
                "Failed with error",
                uri=uri,
                error_code=error_code,
                error=message,
            )
            raise DownloadError(message, error_code=error_code) from e

        except BotoCoreError as e:
            logger.error("Failed with error", uri=uri, error=str(e))
            raise DownloadError(str(e)) from e

        logger.info(
            "Download completed",
            uri=uri,
            content_length=response.get("ContentLength"),
            duration_ms=t.duration_ms,
        )
        return response["Body"]
