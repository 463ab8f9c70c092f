"""
Adapter: S3 Storage

IStoragePresigner and IDatasetSource on top of boto3.

Any S3-compatible endpoint works (AWS S3, MinIO): pass `endpoint_url`.
"""

import logging
from pathlib import Path

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from src.core.errors import SigningFailure, UpstreamDegraded
from src.core.interfaces.dataset_source import IDatasetSource
from src.core.interfaces.storage_presigner import IStoragePresigner

logger = logging.getLogger(__name__)


def make_s3_client(region: str, endpoint_url: str | None = None):
    """Create the boto3 S3 client (credentials come from the usual AWS chain)."""
    return boto3.client("s3", region_name=region or None, endpoint_url=endpoint_url or None)


class S3StoragePresigner(IStoragePresigner):
    """
    Presigned GET URLs for private objects.

    Presigning is local to boto3 (no request to S3); the object may not exist.
    """

    def __init__(self, client):
        self._s3 = client

    def presign_get(self, bucket: str, key: str, expires_in: int) -> str:
        try:
            return self._s3.generate_presigned_url(
                ClientMethod="get_object",
                Params={"Bucket": bucket, "Key": key},
                ExpiresIn=expires_in,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error generating S3 presigned URL for {bucket}/{key}: {type(e).__name__}")
            raise SigningFailure("Failed to generate signed URL.") from e


class S3DatasetSource(IDatasetSource):
    """Reads the reference dataset object from S3."""

    def __init__(self, client, bucket: str, key: str):
        self._s3 = client
        self._bucket = bucket
        self._key = key

    def fetch(self) -> bytes:
        try:
            response = self._s3.get_object(Bucket=self._bucket, Key=self._key)
            return response["Body"].read()
        except (BotoCoreError, ClientError) as e:
            raise UpstreamDegraded(f"S3 read failed for {self.describe()}: {e}") from e

    def describe(self) -> str:
        return f"s3://{self._bucket}/{self._key}"


class LocalFileDatasetSource(IDatasetSource):
    """Reads the reference dataset from disk (local dev, bundled data)."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def fetch(self) -> bytes:
        try:
            return self._path.read_bytes()
        except OSError as e:
            raise UpstreamDegraded(f"Could not read {self._path}: {e.strerror}") from e

    def describe(self) -> str:
        return str(self._path)
