import io
from typing import BinaryIO

import boto3
import pytest
from botocore.stub import Stubber

from object_encoder.domain.errors import DownloadError
from object_encoder.domain.ports import ObjectStorage
from object_encoder.infrastructure.adapters import StorageClientConfig


class InMemoryObjectStorage(ObjectStorage):
    """ObjectStorage double serving objects from a dict and recording calls."""

    def __init__(self, objects: dict[tuple[str, str], bytes] | None = None) -> None:
        self.objects = objects or {}
        self.calls: list[tuple[str, str]] = []

    def open_object(self, bucket: str, key: str) -> BinaryIO:
        self.calls.append((bucket, key))
        if (bucket, key) not in self.objects:
            raise DownloadError("The specified key does not exist.", error_code="NoSuchKey")
        return io.BytesIO(self.objects[(bucket, key)])


@pytest.fixture
def storage() -> InMemoryObjectStorage:
    return InMemoryObjectStorage(
        {
            ("b1", "k1"): b"hi",
            ("b1", "empty"): b"",
        }
    )


@pytest.fixture
def aws_credentials(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")


@pytest.fixture
def no_aws_credentials(monkeypatch):
    for name in (
        "AWS_ACCESS_KEY_ID",
        "AWS_SECRET_ACCESS_KEY",
        "AWS_SESSION_TOKEN",
        "AWS_SECURITY_TOKEN",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def client_config() -> StorageClientConfig:
    return StorageClientConfig(
        region="us-west-2",
        ca_bundle_path="/etc/pki/tls/certs/ca-bundle.crt",
    )


@pytest.fixture
def s3_client():
    return boto3.client(
        "s3",
        region_name="us-west-2",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def s3_stubber(s3_client):
    with Stubber(s3_client) as stubber:
        yield stubber
        stubber.assert_no_pending_responses()
