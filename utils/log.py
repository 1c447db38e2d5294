import asyncio
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# per-request lines from aiohttp are noise next to [STATUS]
QUIET_LOGGERS = ("aiohttp.access",)


def log_task_exception(task: asyncio.Task, logger: logging.Logger | None = None) -> None:
    """Done-callback for app tasks: a loop that dies should say so."""
    if task.cancelled():
        return
    try:
        exc = task.exception()
    except asyncio.CancelledError:
        return
    if exc is not None:
        log = logger or logging.getLogger("app")
        log.error("Task %s stopped: %r", task.get_name(), exc, exc_info=exc)


def setup_logging(level: str = "INFO") -> None:
    lvl = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=lvl, format=LOG_FORMAT)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(lvl, logging.WARNING))
