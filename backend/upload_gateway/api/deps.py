from fastapi import Request

from upload_gateway.core.config import Settings
from upload_gateway.services.gateway import UploadGateway


def get_gateway(request: Request) -> UploadGateway:
    return request.app.state.gateway


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
