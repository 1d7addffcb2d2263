from functools import partial
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .core.logging_config import configure_logging, get_logger
from .core.middleware import install_middleware
from .core.settings import Settings, get_settings
from .routers import files, health, ingest, request_info

configure_logging(get_settings().log_level)
logger = get_logger(__name__)


async def storage_error(request: Request, exc: OSError) -> JSONResponse:
    logger.exception('💥 storage_error on %s %s: %s', request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={'error': str(exc)})


async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception('💥 unhandled_error on %s %s: %s', request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={'detail': 'Internal Server Error'})


def log_startup(settings: Settings) -> None:
    logger.info('🚀 startup starting...')
    logger.info(
        '📦 storage_dir=%s max_file_size=%s auth=%s csrf=%s',
        settings.storage_dir,
        settings.max_file_size,
        settings.enable_auth,
        settings.enable_csrf,
    )
    logger.info('✅ 🚀 startup done.')


def create_app(settings: Settings | None = None) -> FastAPI:
    logger.info('🧱 app_factory starting...')
    settings = settings or get_settings()
    application = FastAPI(
        title=settings.app_name,
        version=settings.api_version,
        docs_url='/docs',
        redoc_url='/redoc',
    )
    application.state.settings = settings
    application.add_exception_handler(OSError, storage_error)
    application.add_exception_handler(Exception, unhandled_error)
    install_middleware(application, settings)
    application.add_event_handler('startup', partial(log_startup, settings))

    application.include_router(health.router)
    application.include_router(ingest.router)
    application.include_router(files.router)
    application.include_router(request_info.router)

    application.mount(
        '/media',
        StaticFiles(directory=settings.storage_dir, check_dir=False),
        name='media',
    )
    public_path = Path(settings.public_dir)
    if public_path.is_dir():
        application.mount('/', StaticFiles(directory=public_path, html=True), name='public')
    else:
        logger.info('⚠️ app_factory public_dir_missing path=%s', public_path)
    logger.info('✅ 🧱 app_factory done.')
    return application


app = create_app()
