"""GET /health - Check local storage and key configuration."""

import logging
from datetime import UTC, datetime

from fastapi import Depends
from pydantic import BaseModel, Field

from config import get_settings
from dependencies import get_credential_store, get_storage
from services import CredentialStore
from storage import KeyValueStorage, StorageError

logger = logging.getLogger(__name__)

HEALTH_PROBE_KEY = "health_probe"

# --- Response Schemas ---


class ServiceStatus(BaseModel):
    """Status of an individual component."""

    name: str
    status: str = Field(..., description="healthy, degraded, or unhealthy")
    error: str | None = Field(None, description="Error message if not healthy")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status: healthy, degraded, unhealthy")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Environment name")
    services: list[ServiceStatus] = Field(
        ..., description="Individual component statuses"
    )
    timestamp: datetime


# --- Helpers ---


def _check_storage(storage: KeyValueStorage) -> ServiceStatus:
    try:
        storage.set_item(HEALTH_PROBE_KEY, datetime.now(UTC).isoformat())
        storage.remove_item(HEALTH_PROBE_KEY)
    except StorageError as e:
        logger.error("Storage health check failed: %s", e)
        return ServiceStatus(name="storage", status="unhealthy", error=str(e))
    return ServiceStatus(name="storage", status="healthy")


def _check_api_key(credentials: CredentialStore) -> ServiceStatus:
    if credentials.is_set:
        return ServiceStatus(name="api_key", status="healthy")
    return ServiceStatus(name="api_key", status="degraded", error="No API key saved")


# --- Handler ---


async def check_health(
    storage: KeyValueStorage = Depends(get_storage),
    credentials: CredentialStore = Depends(get_credential_store),
) -> HealthResponse:
    """Check health of storage and credentials."""
    settings = get_settings()
    services = [_check_storage(storage), _check_api_key(credentials)]

    statuses = [s.status for s in services]
    if all(s == "healthy" for s in statuses):
        overall = "healthy"
    elif any(s == "unhealthy" for s in statuses):
        overall = "unhealthy"
    else:
        overall = "degraded"

    return HealthResponse(
        status=overall,
        version="0.1.0",
        environment=settings.environment,
        services=services,
        timestamp=datetime.now(UTC),
    )
