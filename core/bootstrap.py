"""
Bootstrap: config loading and env overrides.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from core.config import AppConfig

log = __import__("logging").getLogger("bootstrap")


def load_config(cfg_path: str) -> tuple[AppConfig, dict[str, Any], Path]:
    """
    Load config from YAML. Returns (AppConfig, raw_dict, cfg_dir).
    An empty file yields all defaults. LOG_LEVEL from env/.env overrides logging.level.
    """
    load_dotenv()
    cfg_path = os.path.abspath(cfg_path)
    cfg_dir = Path(os.path.dirname(cfg_path))

    with open(cfg_path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    level = os.environ.get("LOG_LEVEL")
    if level:
        raw = {**raw, "logging": {**(raw.get("logging") or {}), "level": level}}
        log.debug("logging.level overridden from env: %s", level)

    cfg = AppConfig.model_validate(raw)
    return cfg, raw, cfg_dir
