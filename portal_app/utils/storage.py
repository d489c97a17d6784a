import logging
import boto3
import streamlit as st
from botocore.exceptions import ClientError
from config import (
    STORAGE_ENDPOINT_URL,
    STORAGE_REGION,
    STORAGE_ACCESS_KEY_ID,
    STORAGE_SECRET_ACCESS_KEY,
    STORAGE_BUCKET,
    STORAGE_PUBLIC_URL,
)


logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    pass


class ObjectStorage:
    """
    Attachment bucket on the backend's S3-compatible object storage.

    Objects are written public-read; ``public_url`` builds the address the
    gallery renders from.
    """

    def __init__(self, client, bucket: str, public_base_url: str):
        self.client = client
        self.bucket = bucket
        self.public_base_url = public_base_url.rstrip("/")

    def upload(self, path: str, data: bytes, content_type: str | None = None) -> str:
        extra = {"ContentType": content_type} if content_type else {}
        try:
            self.client.put_object(Bucket=self.bucket, Key=path, Body=data, **extra)
        except ClientError as e:
            logger.error(f"Upload failed for {self.bucket}/{path}: {e}")
            raise StorageError(f"Failed to upload {path}") from e
        logger.info(f"Uploaded {self.bucket}/{path} ({len(data)} bytes)")
        return path

    def remove(self, path: str) -> None:
        try:
            self.client.delete_object(Bucket=self.bucket, Key=path)
        except ClientError as e:
            logger.error(f"Delete failed for {self.bucket}/{path}: {e}")
            raise StorageError(f"Failed to delete {path}") from e
        logger.info(f"Removed {self.bucket}/{path}")

    def public_url(self, path: str) -> str:
        return f"{self.public_base_url}/{self.bucket}/{path}"


@st.cache_resource
def get_storage() -> ObjectStorage:
    """Process-wide storage client (lazy)."""
    client = boto3.client(
        "s3",
        endpoint_url=STORAGE_ENDPOINT_URL,
        aws_access_key_id=STORAGE_ACCESS_KEY_ID,
        aws_secret_access_key=STORAGE_SECRET_ACCESS_KEY,
        region_name=STORAGE_REGION,
    )
    return ObjectStorage(client, STORAGE_BUCKET, STORAGE_PUBLIC_URL)
