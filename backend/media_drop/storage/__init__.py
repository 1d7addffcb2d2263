"""Filesystem storage for uploads and their sidecar metadata."""

from .ingest import store_upload, store_uploads
from .listing import list_entries
from .metadata import build_metadata, sidecar_path, write_metadata

__all__ = [
    'store_upload',
    'store_uploads',
    'list_entries',
    'build_metadata',
    'sidecar_path',
    'write_metadata',
]
