from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PUBLIC_BASE_URL = "https://cdn.atulyaayurveda.shop"
DEFAULT_CORS_ORIGINS = ",".join(
    [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "https://edtechh-dashboard-main-e76s.vercel.app",
        "https://edtechh-dashboard-main-qf79.vercel.app",
    ]
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    port: int = Field(default=3000, alias="PORT")

    store_endpoint: str | None = Field(default=None, alias="R2_ENDPOINT")
    access_key_id: str | None = Field(default=None, alias="AWS_ACCESS_KEY_ID")
    secret_access_key: str | None = Field(default=None, alias="AWS_SECRET_ACCESS_KEY")
    region: str = Field(default="auto", alias="R2_REGION")
    bucket: str = Field(default="uploads", alias="R2_BUCKET")
    public_base_url: str | None = Field(default=None, alias="R2_PUBLIC_URL")
    presigned_ttl: int = Field(default=3600, alias="PRESIGNED_URL_TTL")

    upload_dir: Path = Field(default=Path("uploads"), alias="UPLOAD_DIR")
    cors_origins: str = Field(default=DEFAULT_CORS_ORIGINS, alias="CORS_ORIGINS")

    @property
    def cors_origins_list(self) -> list[str]:
        if self.cors_origins.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def effective_public_base_url(self) -> str:
        base = self.public_base_url or DEFAULT_PUBLIC_BASE_URL
        return base.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    return Settings()
