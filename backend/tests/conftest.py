import sys
from pathlib import Path
from urllib.parse import quote
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from upload_gateway.core.config import Settings
from upload_gateway.main import create_app
from upload_gateway.services import storage as storage_service
from upload_gateway.services.gateway import UploadGateway

PUBLIC_BASE_URL = "https://cdn.example.com"


class DummyStorage(storage_service.StorageService):
    def __init__(self, settings: Settings) -> None:  # type: ignore[super-init-not-called]
        self.settings = settings
        self.bucket = settings.bucket
        self.objects: dict[str, tuple[bytes, str]] = {}
        self.signed: list[tuple[str, str, str | None, int]] = []
        self.fail_with: Exception | None = None

    def _signed_url(self, key: str, expires_in: int) -> str:
        return (
            f"https://store.example.com/{self.bucket}/{quote(key)}"
            f"?X-Amz-Expires={expires_in}&X-Amz-Signature={uuid4().hex}"
        )

    def create_presigned_put(self, key: str, content_type: str, expires_in: int = 3600) -> str:  # type: ignore[override]
        if self.fail_with:
            raise self.fail_with
        self.signed.append(("PUT", key, content_type, expires_in))
        return self._signed_url(key, expires_in)

    def create_presigned_get(self, key: str, expires_in: int = 3600) -> str:  # type: ignore[override]
        if self.fail_with:
            raise self.fail_with
        self.signed.append(("GET", key, None, expires_in))
        return self._signed_url(key, expires_in)

    async def put_object(self, key: str, data: bytes, content_type: str) -> None:  # type: ignore[override]
        if self.fail_with:
            raise self.fail_with
        self.objects[key] = (data, content_type)


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def settings(upload_dir: Path) -> Settings:
    return Settings(
        _env_file=None,
        store_endpoint="https://acct.r2.cloudflarestorage.com",
        access_key_id="test",
        secret_access_key="test",
        bucket="test-bucket",
        public_base_url=PUBLIC_BASE_URL,
        upload_dir=upload_dir,
        cors_origins="http://localhost:5173,http://localhost:3000",
    )


@pytest.fixture
def storage(settings: Settings) -> DummyStorage:
    return DummyStorage(settings)


@pytest.fixture
def gateway(settings: Settings, storage: DummyStorage) -> UploadGateway:
    return UploadGateway(settings, storage)


@pytest.fixture
def app_instance(settings: Settings, storage: DummyStorage):
    return create_app(settings=settings, storage=storage)


@pytest_asyncio.fixture
async def client(app_instance):
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest_asyncio.fixture
async def server_client(app_instance):
    # Starlette re-raises unhandled errors after responding; keep the response instead.
    transport = ASGITransport(app=app_instance, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
