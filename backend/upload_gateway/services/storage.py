import asyncio
import logging
from typing import Final

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from upload_gateway.core.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE: Final[str] = "application/octet-stream"


class StorageError(Exception):
    """Raised when the object store rejects a signing or transfer request."""


def _error_message(exc: Exception) -> str:
    if isinstance(exc, ClientError):
        error = exc.response.get("Error", {})
        return error.get("Message") or error.get("Code") or str(exc)
    return str(exc) or exc.__class__.__name__


class StorageService:
    """S3-compatible object store client (Cloudflare R2 by default)."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        session = boto3.session.Session()
        self.client = session.client(
            "s3",
            endpoint_url=settings.store_endpoint or None,
            aws_access_key_id=settings.access_key_id,
            aws_secret_access_key=settings.secret_access_key,
            region_name=settings.region,
            config=Config(
                signature_version="s3v4",
                s3={"addressing_style": "path"},
                retries={"max_attempts": 1, "mode": "standard"},
            ),
        )
        self.bucket = settings.bucket

    def create_presigned_put(self, key: str, content_type: str, expires_in: int = 3600) -> str:
        try:
            return self.client.generate_presigned_url(
                "put_object",
                Params={
                    "Bucket": self.bucket,
                    "Key": key,
                    "ContentType": content_type,
                },
                ExpiresIn=expires_in,
            )
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(_error_message(exc)) from exc

    def create_presigned_get(self, key: str, expires_in: int = 3600) -> str:
        try:
            return self.client.generate_presigned_url(
                "get_object",
                Params={"Bucket": self.bucket, "Key": key},
                ExpiresIn=expires_in,
            )
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(_error_message(exc)) from exc

    async def put_object(self, key: str, data: bytes, content_type: str) -> None:
        def _upload() -> None:
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
            )

        try:
            await asyncio.to_thread(_upload)
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(_error_message(exc)) from exc
        logger.info("Stored %s (%d bytes) in bucket %s", key, len(data), self.bucket)
