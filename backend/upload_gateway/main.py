from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from upload_gateway.api.routers import files as files_router
from upload_gateway.api.routers import health as health_router
from upload_gateway.api.routers import widget as widget_router
from upload_gateway.core.config import Settings, get_settings
from upload_gateway.core.errors import register_error_handlers
from upload_gateway.core.logging_config import configure_logging, log_configuration
from upload_gateway.services.gateway import UploadGateway
from upload_gateway.services.storage import StorageService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    settings.upload_dir.mkdir(parents=True, exist_ok=True)
    log_configuration(settings)
    yield


def create_app(
    settings: Settings | None = None,
    storage: StorageService | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        debug=settings.debug,
        title="Upload Gateway",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.gateway = UploadGateway(settings, storage or StorageService(settings))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(health_router.router)
    app.include_router(files_router.router)
    app.include_router(widget_router.router)

    return app


app = create_app()
