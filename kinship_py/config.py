"""Configuration loader for kinship_py.

Behavior:
- Load defaults.
- If environment variable `KINSHIP_CONFIG` is set, load that JSON file and merge.
- Environment variables override file values (variables: KINSHIP_DEFAULT_LANGUAGE,
  KINSHIP_DEFAULT_GENDER, KINSHIP_CACHE_MAX_ENTRIES, KINSHIP_LOG_LEVEL).

`cache_max_entries` left unset keeps the response cache unbounded for the
process lifetime; any positive integer turns it into an LRU of that size.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import os
import json
import logging
from typing import Any, Optional

from .models import Gender, Language


@dataclass
class Config:
    default_language: Language = Language.ZH
    default_gender: Gender = Gender.MALE
    cache_max_entries: Optional[int] = None
    log_level: str = "INFO"


def _load_json_file(path: Path) -> Optional[dict]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError):
        logging.warning("Could not read config file %s", path)
        return None


def _max_entries(value: Any) -> Optional[int]:
    if value in (None, "", 0, "0"):
        return None
    n = int(value)
    if n < 0:
        raise ValueError("cache_max_entries must not be negative")
    return n or None


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from (1) defaults, (2) JSON file, (3) env vars.

    :param config_path: optional path to a JSON config file. If not provided
                        will use environment variable `KINSHIP_CONFIG` if set.
    Invalid language or gender codes raise ValueError.
    """
    cfg = Config()

    cp = config_path or os.environ.get("KINSHIP_CONFIG")
    if cp:
        data = _load_json_file(Path(cp))
        if isinstance(data, dict):
            if data.get("default_language"):
                cfg.default_language = Language(data["default_language"])
            if data.get("default_gender"):
                cfg.default_gender = Gender(data["default_gender"])
            if "cache_max_entries" in data:
                cfg.cache_max_entries = _max_entries(data["cache_max_entries"])
            if data.get("log_level"):
                cfg.log_level = str(data["log_level"]).upper()

    # an explicit config_path is authoritative; env vars only apply otherwise
    if config_path is None:
        if os.environ.get("KINSHIP_DEFAULT_LANGUAGE"):
            cfg.default_language = Language(os.environ["KINSHIP_DEFAULT_LANGUAGE"])
        if os.environ.get("KINSHIP_DEFAULT_GENDER"):
            cfg.default_gender = Gender(os.environ["KINSHIP_DEFAULT_GENDER"])
        if os.environ.get("KINSHIP_CACHE_MAX_ENTRIES") is not None:
            cfg.cache_max_entries = _max_entries(os.environ["KINSHIP_CACHE_MAX_ENTRIES"])
        if os.environ.get("KINSHIP_LOG_LEVEL"):
            cfg.log_level = os.environ["KINSHIP_LOG_LEVEL"].upper()

    return cfg
