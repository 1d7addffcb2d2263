"""HTTP middleware: access log, secure headers, CSRF and body size limit."""

from __future__ import annotations

import secrets
from typing import Awaitable, Callable

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.middleware.gzip import GZipMiddleware
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from .logging_config import get_access_logger, get_logger
from .settings import Settings

logger = get_logger(__name__)
access_logger = get_access_logger()

CallNext = Callable[[Request], Awaitable[Response]]

CSRF_COOKIE = '_csrf'
CSRF_HEADER = 'X-CSRF-Token'
CSRF_TOKEN_LENGTH = 32
CSRF_MAX_AGE = 86400
SAFE_METHODS = frozenset({'GET', 'HEAD', 'OPTIONS', 'TRACE'})

BODY_TOO_LARGE = {'message': 'Request Entity Too Large'}

SECURE_HEADERS = {
    'X-XSS-Protection': '1; mode=block',
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'SAMEORIGIN',
}


async def access_log(request: Request, call_next: CallNext) -> Response:
    response = await call_next(request)
    uri = request.url.path
    if request.url.query:
        uri = f'{uri}?{request.url.query}'
    access_logger.info('method=%s, uri=%s, status=%s', request.method, uri, response.status_code)
    return response


async def secure_headers(request: Request, call_next: CallNext) -> Response:
    response = await call_next(request)
    for name, value in SECURE_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


def _new_csrf_token() -> str:
    return secrets.token_urlsafe(CSRF_TOKEN_LENGTH)[:CSRF_TOKEN_LENGTH]


async def csrf_protect(request: Request, call_next: CallNext) -> Response:
    """Double-submit check: unsafe methods must echo the ``_csrf`` cookie in a header."""
    token = request.cookies.get(CSRF_COOKIE) or _new_csrf_token()
    if request.method not in SAFE_METHODS:
        supplied = request.headers.get(CSRF_HEADER)
        if not supplied:
            logger.info('⚠️ csrf_protect missing_token path=%s', request.url.path)
            return JSONResponse({'message': 'missing csrf token in request header'}, status_code=400)
        if not secrets.compare_digest(supplied.encode('utf-8'), token.encode('utf-8')):
            logger.info('⚠️ csrf_protect invalid_token path=%s', request.url.path)
            return JSONResponse({'message': 'invalid csrf token'}, status_code=403)
    response = await call_next(request)
    response.set_cookie(CSRF_COOKIE, token, max_age=CSRF_MAX_AGE, path='/')
    return response


class BodyTooLarge(HTTPException):
    """Raised while reading a streamed body that outgrows the limit.

    Subclasses ``HTTPException`` so FastAPI re-raises it from form parsing
    instead of turning it into a 400.
    """

    def __init__(self) -> None:
        super().__init__(status_code=413, detail=BODY_TOO_LARGE['message'])


async def body_too_large(request: Request, exc: BodyTooLarge) -> JSONResponse:
    return JSONResponse(BODY_TOO_LARGE, status_code=413)


class BodyLimitMiddleware:
    """Reject request bodies larger than ``max_body_bytes`` with 413."""

    def __init__(self, app: ASGIApp, max_body_bytes: int) -> None:
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope['type'] != 'http':
            await self.app(scope, receive, send)
            return
        content_length = Headers(scope=scope).get('content-length', '')
        if content_length.isdigit() and int(content_length) > self.max_body_bytes:
            logger.info('⚠️ body_limit rejected content_length=%s', content_length)
            response = JSONResponse(BODY_TOO_LARGE, status_code=413)
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message['type'] == 'http.request':
                received += len(message.get('body', b''))
                if received > self.max_body_bytes:
                    logger.info('⚠️ body_limit rejected streamed=%s', received)
                    raise BodyTooLarge()
            return message

        await self.app(scope, limited_receive, send)


def install_middleware(application: FastAPI, settings: Settings) -> None:
    """Register middleware; the last one added runs first."""
    logger.info('🧩 install_middleware starting...')
    application.add_exception_handler(BodyTooLarge, body_too_large)
    application.add_middleware(BodyLimitMiddleware, max_body_bytes=settings.max_body_bytes)
    application.add_middleware(GZipMiddleware, minimum_size=1000, compresslevel=settings.gzip_level)
    if settings.enable_csrf:
        application.middleware('http')(csrf_protect)
    application.middleware('http')(secure_headers)
    application.middleware('http')(access_log)
    logger.info('✅ 🧩 install_middleware done.')
