import os
from datetime import datetime
from pathlib import Path

from fastapi import APIRouter, Depends

from ..core.logging_config import get_logger
from ..core.settings import Settings
from ..dependencies import get_app_settings
from ..models.health import HealthResponse, StorageStatus

router = APIRouter(tags=['health'])
logger = get_logger(__name__)


def _probe_storage(storage_dir: str) -> StorageStatus:
    storage_path = Path(storage_dir)
    exists = storage_path.is_dir()
    entries = sum(1 for _ in storage_path.iterdir()) if exists else None
    return StorageStatus(
        path=storage_dir,
        exists=exists,
        writable=exists and os.access(storage_path, os.W_OK),
        entries=entries,
    )


@router.get('/health', response_model=HealthResponse)
async def get_health(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    logger.info('🚦 health_check starting...')
    storage = _probe_storage(settings.storage_dir)
    response = HealthResponse(
        # storage root is created by the first upload, so a missing one is not an outage
        status='ok' if storage.writable or not storage.exists else 'degraded',
        version=settings.api_version,
        environment=settings.environment,
        timestamp=datetime.utcnow(),
        auth_enabled=settings.enable_auth,
        storage=storage,
    )
    logger.info('✅ 🚦 health_check done.')
    return response
