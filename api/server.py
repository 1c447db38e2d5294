"""
HTTP API for observing and driving the counter host.

GET  /api/counter: snapshot (count, moving, passed_ms, ...)
POST /api/counter/advance: { "delta_ms": number }
POST /api/counter/{command}: increment | start | stop | toggle | reset | reset-all
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import math
from typing import List, Optional

from aiohttp import web

from app.host import CounterHost, UnknownCommandError

log = logging.getLogger("api")

CORS_BASE = {
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Max-Age": "86400",
    "Cache-Control": "no-store",
}


def _cors_headers(request: web.Request) -> dict:
    """Build CORS headers. origins empty = *; else echo Origin if allowed."""
    h = dict(CORS_BASE)
    origins = request.app.get("cors_origins") or []
    if not origins:
        h["Access-Control-Allow-Origin"] = "*"
    else:
        origin = request.headers.get("Origin", "")
        h["Access-Control-Allow-Origin"] = origin if origin in origins else origins[0]
    return h


@web.middleware
async def cors_middleware(request: web.Request, handler):
    """Answer CORS preflight for /api/*."""
    if request.path.startswith("/api/") and request.method == "OPTIONS":
        return web.Response(status=200, headers=_cors_headers(request))
    return await handler(request)


def create_app(host: CounterHost, cors_origins: Optional[List[str]] = None) -> web.Application:
    app = web.Application(middlewares=[cors_middleware])
    app["cors_origins"] = list(cors_origins or [])

    async def handle_root(req: web.Request) -> web.Response:
        return web.json_response({"ok": True, "api": "event-window-counter"}, headers=_cors_headers(req))

    async def handle_counter(req: web.Request) -> web.Response:
        return web.json_response(host.snapshot(), headers=_cors_headers(req))

    async def handle_advance(req: web.Request) -> web.Response:
        try:
            data = await req.json() if req.content_length else {}
        except Exception:
            return web.json_response({"error": "Invalid JSON"}, status=400, headers=_cors_headers(req))
        delta = data.get("delta_ms") if isinstance(data, dict) else None
        try:
            delta_ms = float(delta)
        except (TypeError, ValueError):
            return web.json_response(
                {"error": "Expected { delta_ms: number }"},
                status=400,
                headers=_cors_headers(req),
            )
        if not math.isfinite(delta_ms) or delta_ms < 0:
            return web.json_response(
                {"error": "delta_ms must be a finite number >= 0"},
                status=400,
                headers=_cors_headers(req),
            )
        host.advance(delta_ms)
        return web.json_response(host.snapshot(), headers=_cors_headers(req))

    async def handle_command(req: web.Request) -> web.Response:
        command = req.match_info["command"]
        try:
            host.apply(command)
        except UnknownCommandError:
            log.warning("api: unknown command %r", command)
            return web.json_response(
                {"error": f"Unknown command: {command}"},
                status=404,
                headers=_cors_headers(req),
            )
        return web.json_response(host.snapshot(), headers=_cors_headers(req))

    app.router.add_get("/", handle_root)
    app.router.add_get("/api/counter", handle_counter)
    app.router.add_post("/api/counter/advance", handle_advance)
    app.router.add_post("/api/counter/{command}", handle_command)

    return app


async def start_server(app: web.Application, host: str = "127.0.0.1", port: int = 8080) -> web.AppRunner:
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, host, port)
    await site.start()
    log.info("API server listening on %s:%d", host, port)
    return runner


if __name__ == "__main__":
    from core.counter import EventWindowCounter

    p = argparse.ArgumentParser()
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8080)
    p.add_argument("--window-ms", type=float, default=30_000)
    args = p.parse_args()

    logging.basicConfig(level=logging.INFO)

    async def _main():
        counter_host = CounterHost(EventWindowCounter.create(args.window_ms, True))
        await start_server(create_app(counter_host), args.host, args.port)
        await asyncio.Event().wait()  # run forever; no tick loop, drive via /advance

    asyncio.run(_main())
