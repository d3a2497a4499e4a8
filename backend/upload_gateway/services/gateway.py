import asyncio
from pathlib import Path
from typing import Final
from urllib.parse import quote

from upload_gateway.core.config import Settings
from upload_gateway.core.errors import BackendError, ClientInputError
from upload_gateway.schemas import (
    DownloadURLResponse,
    HealthResponse,
    LegacyUploadResponse,
    UploadURLResponse,
)
from upload_gateway.services.staging import staged_file
from upload_gateway.services.storage import DEFAULT_CONTENT_TYPE, StorageError, StorageService

# Characters left untouched by JavaScript's encodeURIComponent besides alphanumerics.
URI_COMPONENT_SAFE: Final[str] = "-_.!~*'()"


def encode_object_key(key: str) -> str:
    return quote(key, safe=URI_COMPONENT_SAFE)


def build_public_url(base_url: str, key: str) -> str:
    return f"{base_url}/{encode_object_key(key)}"


class UploadGateway:
    def __init__(self, settings: Settings, storage: StorageService) -> None:
        self.settings = settings
        self.storage = storage

    @property
    def public_base_url(self) -> str:
        return self.settings.effective_public_base_url

    def public_url(self, key: str) -> str:
        return build_public_url(self.public_base_url, key)

    def health(self) -> HealthResponse:
        return HealthResponse(status="ok", message="Upload gateway is running")

    def generate_upload_url(
        self, filename: str | None, content_type: str | None = None
    ) -> UploadURLResponse:
        if not filename:
            raise ClientInputError("Filename is required")
        try:
            presigned_url = self.storage.create_presigned_put(
                filename,
                content_type or DEFAULT_CONTENT_TYPE,
                expires_in=self.settings.presigned_ttl,
            )
        except StorageError as exc:
            raise BackendError(str(exc) or "Failed to generate presigned URL") from exc

        return UploadURLResponse(
            presigned_url=presigned_url,
            public_url=self.public_url(filename),
            filename=filename,
            message="Presigned URL generated successfully",
        )

    def generate_download_url(self, filename: str | None) -> DownloadURLResponse:
        if not filename:
            raise ClientInputError("Filename is required")
        try:
            presigned_url = self.storage.create_presigned_get(
                filename, expires_in=self.settings.presigned_ttl
            )
        except StorageError as exc:
            raise BackendError(str(exc) or "Failed to generate download URL") from exc

        return DownloadURLResponse(
            presigned_url=presigned_url,
            filename=filename,
            message="Download URL generated successfully",
        )

    async def legacy_upload(
        self,
        staged_path: Path,
        original_filename: str,
        mime_type: str | None,
    ) -> LegacyUploadResponse:
        """Push a staged payload to the store in one request.

        The staged file is removed before returning, whether or not the
        store accepted the write. A failed removal is logged and does not
        replace the error being reported.
        """
        with staged_file(staged_path) as path:
            try:
                if not path.exists():
                    raise BackendError("Uploaded file not found on disk")
                data = await asyncio.to_thread(path.read_bytes)
                await self.storage.put_object(
                    original_filename, data, mime_type or DEFAULT_CONTENT_TYPE
                )
            except (StorageError, OSError) as exc:
                raise BackendError(str(exc) or "Upload failed") from exc

        return LegacyUploadResponse(
            video_url=self.public_url(original_filename),
            message="Video uploaded successfully",
        )
