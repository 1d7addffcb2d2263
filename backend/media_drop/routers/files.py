from typing import List

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from ..core.logging_config import get_logger
from ..core.settings import Settings
from ..dependencies import get_app_settings, require_credentials
from ..models.files import ErrorResponse, ListingEntry
from ..storage import list_entries

router = APIRouter(prefix='/api', tags=['files'], dependencies=[Depends(require_credentials)])
logger = get_logger(__name__)


@router.get('/list', response_model=List[ListingEntry], responses={500: {'model': ErrorResponse}})
async def list_files(settings: Settings = Depends(get_app_settings)) -> List[ListingEntry]:
    logger.info('🗂️ file_listing starting...')
    entries = await run_in_threadpool(list_entries, settings.storage_dir)
    logger.info('✅ 🗂️ file_listing done count=%s', len(entries))
    return entries
