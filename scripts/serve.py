#!/usr/bin/env python3
"""Run the upload API with command line overrides."""

from __future__ import annotations

from backend.media_drop.cli import main

if __name__ == '__main__':
    raise SystemExit(main())
