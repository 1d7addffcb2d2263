from typing import Tuple

from ..core.logging_config import get_logger

logger = get_logger(__name__)


def parse_listen_address(address: str, default_host: str = '0.0.0.0') -> Tuple[str, int]:
    """Split ``host:port`` (or ``:port``) into a host and an integer port."""
    host, sep, port = address.rpartition(':')
    if not sep or not port.isdigit():
        raise ValueError(f'invalid listen address: {address!r}')
    host = host.strip('[]') or default_host
    logger.debug('🧭 parse_listen_address host=%s port=%s', host, port)
    return host, int(port)
