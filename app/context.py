"""Shared application context. Holds references to all services and config."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from core.config import AppConfig
    from app.host import CounterHost


class AppContext:
    """Holds all services and config. Built in bootstrap."""

    def __init__(self) -> None:
        self.cfg: AppConfig | None = None
        self.raw: dict[str, Any] = {}
        self.cfg_dir: Path = Path()
        self.host: CounterHost | None = None
