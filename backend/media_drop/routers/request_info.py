from html import escape

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from ..core.logging_config import get_logger

router = APIRouter(tags=['debug'])
logger = get_logger(__name__)

REQUEST_INFO_TEMPLATE = """
<code>
Protocol: {protocol}<br>
Host: {host}<br>
Remote Address: {remote}<br>
Method: {method}<br>
Path: {path}<br>
</code>
"""


@router.get('/request', response_class=HTMLResponse)
async def request_info(request: Request) -> HTMLResponse:
    logger.info('🔎 request_info starting...')
    client = request.client
    remote = f'{client.host}:{client.port}' if client else ''
    content = REQUEST_INFO_TEMPLATE.format(
        protocol=escape(f"HTTP/{request.scope.get('http_version', '1.1')}"),
        host=escape(request.headers.get('host', '')),
        remote=escape(remote),
        method=escape(request.method),
        path=escape(request.url.path),
    )
    logger.info('✅ 🔎 request_info done.')
    return HTMLResponse(content=content)
