"""Directory listing of the storage root ordered by modification time."""

from __future__ import annotations

import os
from datetime import datetime
from operator import itemgetter
from typing import List, Tuple

from ..core.logging_config import get_logger
from ..models.files import ListingEntry

logger = get_logger(__name__)


def _snapshot(dir_entry: os.DirEntry) -> Tuple[int, ListingEntry]:
    stat_result = dir_entry.stat(follow_symlinks=False)
    entry = ListingEntry(
        name=dir_entry.name,
        created=datetime.fromtimestamp(stat_result.st_mtime).astimezone(),
        size=stat_result.st_size,
        is_directory=dir_entry.is_dir(follow_symlinks=False),
    )
    return stat_result.st_mtime_ns, entry


def list_entries(storage_dir: str) -> List[ListingEntry]:
    """Return every entry directly inside ``storage_dir``, oldest first.

    Subdirectories are reported as single entries. Raises ``OSError`` when the
    directory is missing or unreadable.
    """
    logger.info('🗂️ list_entries starting...')
    with os.scandir(storage_dir) as iterator:
        snapshots = [_snapshot(dir_entry) for dir_entry in iterator]
    snapshots.sort(key=itemgetter(0))
    entries = [entry for _, entry in snapshots]
    logger.debug('📚 list_entries count=%s', len(entries))
    logger.info('✅ 🗂️ list_entries done.')
    return entries
