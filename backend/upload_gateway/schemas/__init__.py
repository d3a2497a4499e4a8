from upload_gateway.schemas.upload import (
    DownloadURLRequest,
    DownloadURLResponse,
    ErrorResponse,
    HealthResponse,
    LegacyUploadResponse,
    UploadURLRequest,
    UploadURLResponse,
)

__all__ = [
    "UploadURLRequest",
    "UploadURLResponse",
    "DownloadURLRequest",
    "DownloadURLResponse",
    "LegacyUploadResponse",
    "HealthResponse",
    "ErrorResponse",
]
