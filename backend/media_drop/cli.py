"""Command line entry point for serving the upload API."""

from __future__ import annotations

import argparse
from typing import Any, Dict, List, Optional

import uvicorn

from .core.logging_config import get_logger
from .core.settings import Settings
from .main import create_app
from .utils.address import parse_listen_address

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Serve the file upload and listing API.')
    parser.add_argument('--address', default=None, help='Listen address, e.g. :9090 or 127.0.0.1:8000.')
    parser.add_argument('--storage', default=None, help='Where to store uploaded files.')
    parser.add_argument('--public', default=None, help='Directory with the static web UI.')
    parser.add_argument('--max-file-size', default=None, help='Max upload size, e.g. 50M.')
    parser.add_argument('--username', default=None, help='Basic auth user protecting /api.')
    parser.add_argument('--password', default=None, help='Basic auth password protecting /api.')
    parser.add_argument('--enable-auth', action='store_true', default=None, help='Protect /api with basic auth.')
    parser.add_argument('--disable-csrf', action='store_true', help='Skip the CSRF token check.')
    return parser


def build_settings(argv: Optional[List[str]] = None) -> Settings:
    """Parse ``argv`` and overlay the supplied flags on environment settings."""
    args = build_parser().parse_args(argv)
    candidates: Dict[str, Any] = {
        'address': args.address,
        'storage_dir': args.storage,
        'public_dir': args.public,
        'max_file_size': args.max_file_size,
        'username': args.username,
        'password': args.password,
        'enable_auth': args.enable_auth,
    }
    overrides = {key: value for key, value in candidates.items() if value is not None}
    if args.disable_csrf:
        overrides['enable_csrf'] = False
    return Settings(**overrides)


def main(argv: Optional[List[str]] = None) -> int:
    settings = build_settings(argv)
    host, port = parse_listen_address(settings.address)
    logger.info('🌐 serve starting host=%s port=%s storage=%s', host, port, settings.storage_dir)
    uvicorn.run(
        create_app(settings),
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
        access_log=False,
    )
    return 0
