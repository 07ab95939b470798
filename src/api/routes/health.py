"""Health check route"""

from enum import IntEnum
from fastapi import APIRouter, status
from pydantic import BaseModel

router = APIRouter(tags=["Health"])


class ServiceStatus(IntEnum):
    IDLE = 0
    BUSY = 1
    ERROR = 2
    NOT_RUNNING = 3


class HealthCheckResponse(BaseModel):
    status: ServiceStatus


@router.get("/health-check", response_model=HealthCheckResponse, status_code=status.HTTP_200_OK)
async def health_check():
    return HealthCheckResponse(status=ServiceStatus.IDLE)
