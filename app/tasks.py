"""Background task loops: tick, status."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.context import AppContext

log = logging.getLogger("app.tasks")


def make_tick_loop(ctx: AppContext):
    async def tick_loop():
        interval = 1.0 / float(ctx.cfg.runtime.tick_hz)
        while True:
            await asyncio.sleep(interval)
            try:
                ctx.host.tick()
            except Exception as e:
                log.warning("Tick failed: %s", e, exc_info=True)

    return tick_loop


def make_status_loop(ctx: AppContext):
    async def status_loop():
        while True:
            snap = ctx.host.snapshot()
            nxt = snap["next_expiry_in_ms"]
            log.info(
                "[STATUS] count=%d | moving=%s | passed=%.0fms | window=%.0fms | next expiry: %s | ticks=%d",
                snap["count"],
                snap["moving"],
                snap["passed_ms"],
                snap["duration_ms"],
                f"{nxt:.0f}ms" if nxt is not None else "n/a",
                snap["ticks"],
            )
            await asyncio.sleep(float(ctx.cfg.runtime.status_interval_sec))

    return status_loop
