"""Bootstrap: load config, create the counter host, build AppContext."""

from __future__ import annotations

import logging

from core.bootstrap import load_config
from core.counter import EventWindowCounter
from utils.log import setup_logging

from app.context import AppContext
from app.host import CounterHost

log = logging.getLogger("app.bootstrap")


def build_context(cfg_path: str) -> AppContext:
    """Load config, create the host, return AppContext."""
    cfg, raw, cfg_dir = load_config(cfg_path)
    setup_logging(cfg.logging.level)

    counter = EventWindowCounter.from_config(cfg.counter)
    host = CounterHost(counter, skip_when_paused=cfg.runtime.skip_advance_when_paused)

    ctx = AppContext()
    ctx.cfg = cfg
    ctx.raw = raw
    ctx.cfg_dir = cfg_dir
    ctx.host = host

    log.info(
        "Counter ready: window=%.0fms moving=%s tick=%.1fHz",
        counter.duration_millis,
        counter.is_moving,
        cfg.runtime.tick_hz,
    )
    return ctx
