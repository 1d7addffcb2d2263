"""Byte size parsing for human readable limits such as ``50M``."""

from __future__ import annotations

import re

SIZE_RE = re.compile(r'^\s*(\d+(?:\.\d+)?)\s*([a-z]*)\s*$', re.IGNORECASE)
MULTIPLIERS = {
    '': 1,
    'B': 1,
    'K': 1024,
    'KB': 1024,
    'M': 1024**2,
    'MB': 1024**2,
    'G': 1024**3,
    'GB': 1024**3,
    'T': 1024**4,
    'TB': 1024**4,
    'P': 1024**5,
    'PB': 1024**5,
    'E': 1024**6,
    'EB': 1024**6,
}


def parse_size(value: str) -> int:
    """Convert a size string (``512``, ``10K``, ``50M``, ``1.5GB``) into bytes.

    Units are binary multiples and case-insensitive. Raises ``ValueError`` for
    anything that does not match.
    """
    match = SIZE_RE.match(value or '')
    if not match:
        raise ValueError(f'invalid size: {value!r}')
    number, unit = match.groups()
    multiplier = MULTIPLIERS.get(unit.upper())
    if multiplier is None:
        raise ValueError(f'invalid size unit: {value!r}')
    return int(float(number) * multiplier)
