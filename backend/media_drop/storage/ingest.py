"""Persist uploaded parts under generated identifiers."""

from __future__ import annotations

import uuid
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, Iterable, List

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from ..core.logging_config import get_logger
from .metadata import build_metadata, write_metadata

logger = get_logger(__name__)

CHUNK_SIZE = 1024 * 1024


def new_identifier() -> str:
    return str(uuid.uuid4())


async def _copy_upload(upload_file: UploadFile, dest_file: BinaryIO) -> int:
    written = 0
    while True:
        chunk = await upload_file.read(CHUNK_SIZE)
        if not chunk:
            break
        await run_in_threadpool(dest_file.write, chunk)
        written += len(chunk)
    return written


async def store_upload(upload_file: UploadFile, storage_root: Path) -> Path:
    """Copy one uploaded part into ``storage_root`` and write its sidecar record.

    The storage root is created on demand. The content file and its sidecar
    are two independent writes; if the sidecar write fails the content file
    stays on disk.
    """
    logger.info('📥 store_upload starting filename=%s', upload_file.filename)
    identifier = new_identifier()
    created_at = datetime.now()
    await run_in_threadpool(storage_root.mkdir, parents=True, exist_ok=True)
    destination = storage_root / identifier
    try:
        with destination.open('wb') as dest_file:
            written = await _copy_upload(upload_file, dest_file)
    finally:
        await upload_file.close()
    record = build_metadata(upload_file.filename or '', written, created_at)
    await run_in_threadpool(write_metadata, destination, record)
    logger.debug('🧾 store_upload identifier=%s size=%s', identifier, written)
    logger.info('✅ 📥 store_upload done filename=%s', upload_file.filename)
    return destination


async def store_uploads(upload_files: Iterable[UploadFile], storage_dir: str) -> List[str]:
    """Store every part in order and return ``<storage_dir>/<identifier>`` for each.

    Parts are handled one at a time. A failure aborts the batch and propagates;
    parts stored before it are left in place.
    """
    logger.info('🗄️ store_uploads starting...')
    storage_root = Path(storage_dir)
    stored_paths: List[str] = []
    for upload_file in upload_files:
        destination = await store_upload(upload_file, storage_root)
        stored_paths.append(f'{storage_dir}/{destination.name}')
    logger.info('✅ 🗄️ store_uploads done count=%s', len(stored_paths))
    return stored_paths
