"""Sidecar metadata records kept next to each stored upload."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from ..core.logging_config import get_logger
from ..models.files import MetadataRecord

logger = get_logger(__name__)

METADATA_SUFFIX = '.json'
CREATE_DATE_FORMAT = '%Y/%m/%d %H:%M:%S'


def sidecar_path(content_path: Path) -> Path:
    return content_path.with_name(content_path.name + METADATA_SUFFIX)


def build_metadata(file_name: str, file_size: int, created_at: datetime | None = None) -> MetadataRecord:
    created_at = created_at or datetime.now()
    return MetadataRecord(
        file_name=file_name,
        create_date=created_at.strftime(CREATE_DATE_FORMAT),
        file_size=file_size,
    )


def write_metadata(content_path: Path, record: MetadataRecord) -> Path:
    """Write ``record`` as indented JSON beside ``content_path``, replacing any previous one."""
    logger.info('📘 write_metadata starting...')
    metadata_path = sidecar_path(content_path)
    metadata_path.write_text(record.model_dump_json(indent=1), encoding='utf-8')
    logger.debug('📄 write_metadata path=%s', metadata_path)
    logger.info('✅ 📘 write_metadata done.')
    return metadata_path
