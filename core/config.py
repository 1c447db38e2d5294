from __future__ import annotations

from pydantic import BaseModel, Field
from typing import List


class CounterCfg(BaseModel):
    duration_ms: float = 30_000  # window length
    moving: bool = True  # start with time running


class RuntimeCfg(BaseModel):
    tick_hz: float = Field(default=30, gt=0)
    status_interval_sec: float = 5.0
    skip_advance_when_paused: bool = True  # host skips advance() while paused


class ApiCfg(BaseModel):
    enabled: bool = True
    host: str = "127.0.0.1"
    port: int = 8080
    cors_origins: List[str] = []  # empty = *


class LoggingCfg(BaseModel):
    level: str = "INFO"


class AppConfig(BaseModel):
    counter: CounterCfg = Field(default_factory=CounterCfg)
    runtime: RuntimeCfg = Field(default_factory=RuntimeCfg)
    api: ApiCfg = Field(default_factory=ApiCfg)
    logging: LoggingCfg = Field(default_factory=LoggingCfg)
