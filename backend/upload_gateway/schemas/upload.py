from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from upload_gateway.services.storage import DEFAULT_CONTENT_TYPE


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UploadURLRequest(CamelModel):
    filename: str = Field(..., min_length=1)
    content_type: str = Field(default=DEFAULT_CONTENT_TYPE)

    @field_validator("content_type", mode="before")
    @classmethod
    def default_content_type(cls, value: object) -> object:
        return value or DEFAULT_CONTENT_TYPE


class DownloadURLRequest(CamelModel):
    filename: str = Field(..., min_length=1)


class UploadURLResponse(CamelModel):
    success: bool = True
    presigned_url: str
    public_url: str
    filename: str
    message: str


class DownloadURLResponse(CamelModel):
    success: bool = True
    presigned_url: str
    filename: str
    message: str


class LegacyUploadResponse(BaseModel):
    success: bool = True
    video_url: str
    thumbnail_url: str = ""
    duration: str = ""
    message: str


class HealthResponse(BaseModel):
    status: str
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
