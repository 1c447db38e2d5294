from __future__ import annotations

import argparse
import asyncio
import logging

from api.server import create_app, start_server
from app.bootstrap import build_context
from app.tasks import make_status_loop, make_tick_loop
from utils.log import log_task_exception

log = logging.getLogger("app")


async def main(cfg_path: str) -> None:
    ctx = build_context(cfg_path)
    cfg = ctx.cfg

    runner = None
    if cfg.api.enabled:
        runner = await start_server(
            create_app(ctx.host, cors_origins=cfg.api.cors_origins),
            cfg.api.host,
            cfg.api.port,
        )

    tasks = [
        asyncio.create_task(make_tick_loop(ctx)(), name="tick"),
        asyncio.create_task(make_status_loop(ctx)(), name="status"),
    ]
    for t in tasks:
        t.add_done_callback(log_task_exception)

    log.info("Counter started. Press Ctrl+C to stop.")

    try:
        await asyncio.gather(*tasks)
    except (KeyboardInterrupt, asyncio.CancelledError):
        log.info("Stopping...")
    finally:
        for t in tasks:
            t.cancel()
        if runner is not None:
            await runner.cleanup()


if __name__ == "__main__":
    p = argparse.ArgumentParser()
    p.add_argument("-c", "--config", default="config.yaml", help="Path to config.yaml")
    args = p.parse_args()
    try:
        asyncio.run(main(args.config))
    except KeyboardInterrupt:
        pass
