from fastapi import APIRouter, Depends, File, UploadFile

from upload_gateway.api.deps import get_app_settings, get_gateway
from upload_gateway.core.config import Settings
from upload_gateway.core.errors import BackendError, ClientInputError
from upload_gateway.schemas import (
    DownloadURLRequest,
    DownloadURLResponse,
    ErrorResponse,
    LegacyUploadResponse,
    UploadURLRequest,
    UploadURLResponse,
)
from upload_gateway.services.gateway import UploadGateway
from upload_gateway.services.staging import stage_upload

router = APIRouter(
    tags=["files"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.post("/generate-upload-url", response_model=UploadURLResponse)
async def generate_upload_url(
    payload: UploadURLRequest,
    gateway: UploadGateway = Depends(get_gateway),
) -> UploadURLResponse:
    return gateway.generate_upload_url(payload.filename, payload.content_type)


@router.post("/generate-download-url", response_model=DownloadURLResponse)
async def generate_download_url(
    payload: DownloadURLRequest,
    gateway: UploadGateway = Depends(get_gateway),
) -> DownloadURLResponse:
    return gateway.generate_download_url(payload.filename)


@router.post("/upload", response_model=LegacyUploadResponse)
async def legacy_upload(
    file: UploadFile | None = File(default=None),
    gateway: UploadGateway = Depends(get_gateway),
    settings: Settings = Depends(get_app_settings),
) -> LegacyUploadResponse:
    if file is None or not file.filename:
        raise ClientInputError("No file uploaded")

    try:
        staged_path = await stage_upload(file, settings.upload_dir)
    except OSError as exc:
        raise BackendError(f"Could not stage upload: {exc}") from exc
    finally:
        await file.close()

    return await gateway.legacy_upload(staged_path, file.filename, file.content_type)
