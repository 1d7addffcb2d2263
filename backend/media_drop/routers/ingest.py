from typing import List

from fastapi import APIRouter, Depends, UploadFile

from ..core.logging_config import get_logger
from ..core.settings import Settings
from ..dependencies import get_app_settings, require_credentials
from ..models.files import ErrorResponse
from ..storage import store_uploads

router = APIRouter(prefix='/api', tags=['ingest'], dependencies=[Depends(require_credentials)])
logger = get_logger(__name__)


@router.post('/upload', response_model=List[str], responses={500: {'model': ErrorResponse}})
async def upload(
    files: List[UploadFile],
    settings: Settings = Depends(get_app_settings),
) -> List[str]:
    logger.info('📤 upload_request starting files=%s', len(files))
    stored_paths = await store_uploads(files, settings.storage_dir)
    logger.info('✅ 📤 upload_request done.')
    return stored_paths
