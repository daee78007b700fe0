"""S3 storage for the candidate-files bucket."""

import aioboto3
from typing import Optional, BinaryIO
import logging

from core.config import settings

logger = logging.getLogger(__name__)


def _get_credentials() -> dict:
    """Build session kwargs lazily so importing this module never needs AWS config."""
    credentials = {"region_name": settings.aws_region}
    # Fall back to the default boto credential chain (instance role, env, profile)
    if settings.aws_access_key_id and settings.aws_secret_access_key:
        credentials["aws_access_key_id"] = settings.aws_access_key_id
        credentials["aws_secret_access_key"] = settings.aws_secret_access_key
    return credentials


class S3Storage:
    """S3 storage handler for async operations."""

    def __init__(self, bucket_name: Optional[str] = None):
        """
        Initialize S3 storage.

        Args:
            bucket_name: S3 bucket name (uses AWS_S3_BUCKET if not provided)
        """
        self.bucket_name = bucket_name or settings.aws_s3_bucket
        if not self.bucket_name:
            raise ValueError("S3 bucket name not provided and AWS_S3_BUCKET not set")

        self.credentials = _get_credentials()

    async def upload(
        self,
        file_data: bytes | BinaryIO,
        key: str,
        content_type: Optional[str] = None,
        metadata: Optional[dict] = None,
    ) -> str:
        """
        Upload file to S3.

        Args:
            file_data: File data (bytes or file-like object)
            key: S3 object key (path)
            content_type: MIME type of the file
            metadata: Optional metadata dictionary

        Returns:
            S3 object key
        """
        session = aioboto3.Session(**self.credentials)
        async with session.client("s3") as client:
            upload_args = {
                "Bucket": self.bucket_name,
                "Key": key,
            }

            if content_type:
                upload_args["ContentType"] = content_type

            if metadata:
                upload_args["Metadata"] = metadata

            if isinstance(file_data, bytes):
                upload_args["Body"] = file_data
            else:
                upload_args["Body"] = file_data.read()

            await client.put_object(**upload_args)

            logger.info(f"Uploaded file to S3: {self.bucket_name}/{key}")
            return key
