from fastapi import APIRouter, Depends

from upload_gateway.api.deps import get_gateway
from upload_gateway.schemas import HealthResponse
from upload_gateway.services.gateway import UploadGateway

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health(gateway: UploadGateway = Depends(get_gateway)) -> HealthResponse:
    return gateway.health()
