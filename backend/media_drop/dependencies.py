"""Shared FastAPI dependencies for routers."""

from __future__ import annotations

import secrets

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from .core.logging_config import get_logger
from .core.settings import Settings

logger = get_logger(__name__)

basic_auth = HTTPBasic(realm='Restricted', auto_error=False)


def get_app_settings(request: Request) -> Settings:
    settings: Settings | None = getattr(request.app.state, 'settings', None)
    if not settings:
        raise HTTPException(status_code=503, detail='Settings not initialized.')
    return settings


def _matches(supplied: str, expected: str) -> bool:
    return secrets.compare_digest(supplied.encode('utf-8'), expected.encode('utf-8'))


def require_credentials(
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
    settings: Settings = Depends(get_app_settings),
) -> None:
    """Guard a router with basic auth when ``enable_auth`` is set."""
    if not settings.enable_auth:
        return
    if credentials is not None:
        username_ok = _matches(credentials.username, settings.username)
        password_ok = _matches(credentials.password, settings.password)
        if username_ok and password_ok:
            return
        logger.info('⚠️ require_credentials rejected username=%s', credentials.username)
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail='Unauthorized',
        headers={'WWW-Authenticate': 'Basic realm="Restricted"'},
    )
