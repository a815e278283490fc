"""Asynchronous data-fetch stub.

Resolves a fixed in-memory list after an artificial delay. There is no
cancellation or backpressure; callers simply await it.
"""

from __future__ import annotations

import asyncio
import logging

from kata.config.models import DataConfig

logger = logging.getLogger(__name__)


async def fetch_data(config: DataConfig | None = None) -> list[int]:
    """Return a copy of the configured records after ``fetch_delay`` seconds."""
    cfg = config or DataConfig()
    logger.debug("Fetching %d records (delay=%ss)", len(cfg.records), cfg.fetch_delay)
    await asyncio.sleep(cfg.fetch_delay)
    return list(cfg.records)
