"""Tests for utils.log."""

from __future__ import annotations

import asyncio
import logging

import pytest

from utils.log import log_task_exception, setup_logging


def test_setup_logging_quiets_access_log():
    setup_logging("debug")
    assert logging.getLogger("aiohttp.access").level == logging.WARNING


@pytest.mark.asyncio
async def test_log_task_exception_reports_failure(caplog):
    async def boom():
        raise RuntimeError("tick source gone")

    task = asyncio.create_task(boom(), name="tick")
    with pytest.raises(RuntimeError):
        await task
    with caplog.at_level(logging.ERROR, logger="app"):
        log_task_exception(task)
    assert any("Task tick stopped" in r.getMessage() for r in caplog.records)


@pytest.mark.asyncio
async def test_log_task_exception_ignores_cancelled(caplog):
    task = asyncio.create_task(asyncio.sleep(10))
    await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    with caplog.at_level(logging.DEBUG, logger="app"):
        log_task_exception(task)
    assert not [r for r in caplog.records if r.name == "app"]
