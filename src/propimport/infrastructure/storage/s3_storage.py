"""S3-compatible object storage for temporary uploads."""

import asyncio
from urllib.parse import quote

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from propimport.domain.exceptions import UploadError


class S3ObjectStorage:
    """Stores uploads in one bucket; URLs are public or presigned."""

    def __init__(
        self,
        bucket: str,
        region: str | None = None,
        endpoint_url: str | None = None,
        public_base_url: str | None = None,
        url_expiry: int = 3600,
        client=None,
    ) -> None:
        self._bucket = bucket
        self._public_base_url = public_base_url.rstrip("/") if public_base_url else None
        self._url_expiry = url_expiry
        self._s3 = client or boto3.client(
            "s3", region_name=region, endpoint_url=endpoint_url
        )

    async def upload(
        self, path: str, data: bytes, content_type: str, upsert: bool = True
    ) -> None:
        """Put object at path. An existing object is replaced unless upsert is False."""
        try:
            if not upsert and await asyncio.to_thread(self._exists, path):
                raise UploadError(f"Upload failed: object already exists: {path}")
            await asyncio.to_thread(
                self._s3.put_object,
                Bucket=self._bucket,
                Key=path,
                Body=data,
                ContentType=content_type,
                CacheControl="max-age=3600",
            )
        except (BotoCoreError, ClientError) as e:
            raise UploadError(f"Upload failed: {e}") from e

    async def get_url(self, path: str) -> str:
        """Fetchable URL for the object."""
        if self._public_base_url:
            return f"{self._public_base_url}/{quote(path)}"
        try:
            return await asyncio.to_thread(
                self._s3.generate_presigned_url,
                "get_object",
                Params={"Bucket": self._bucket, "Key": path},
                ExpiresIn=self._url_expiry,
            )
        except (BotoCoreError, ClientError) as e:
            raise UploadError(f"Upload failed: could not resolve URL: {e}") from e

    def _exists(self, path: str) -> bool:
        try:
            self._s3.head_object(Bucket=self._bucket, Key=path)
            return True
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "")
            if code in ("404", "NoSuchKey", "NotFound"):
                return False
            raise
