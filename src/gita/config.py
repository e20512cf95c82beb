"""Configuration loader for the Gita reader."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

GITHUB_BASE_URL = "https://raw.githubusercontent.com/bhavykhatri/DharmicData/main/SrimadBhagvadGita"


@dataclass(frozen=True)
class GitaConfig:
    base_url: str
    chapter_field: str
    cache_db_path: Path
    cache_namespace: str
    cache_ttl_sec: int
    request_timeout_sec: int
    log_level: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GitaConfig":
        cache_data = data.get("cache", {})
        return cls(
            base_url=str(data.get("base_url", GITHUB_BASE_URL)).rstrip("/"),
            chapter_field=data.get("chapter_field", "BhagavadGitaChapter"),
            cache_db_path=Path(
                os.path.expanduser(cache_data.get("db_path", "~/.gita/cache/storage.db"))
            ),
            cache_namespace=cache_data.get("namespace", "bhagavad_gita_"),
            cache_ttl_sec=int(cache_data.get("ttl_sec", 86400)),
            request_timeout_sec=int(data.get("request_timeout_sec", 30)),
            log_level=str(data.get("log_level", "INFO")).upper(),
        )


ENV_MAP = {
    "base_url": "GITA_BASE_URL",
    "chapter_field": "GITA_CHAPTER_FIELD",
    "request_timeout_sec": "GITA_REQUEST_TIMEOUT_SEC",
    "log_level": "GITA_LOG_LEVEL",
    "cache.db_path": "GITA_CACHE_DB_PATH",
    "cache.namespace": "GITA_CACHE_NAMESPACE",
    "cache.ttl_sec": "GITA_CACHE_TTL_SEC",
}


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def merge_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
    merged = json.loads(json.dumps(config_data))  # deep copy via json

    for dotted_key, env_name in ENV_MAP.items():
        if env_name not in os.environ:
            continue
        value: Any = os.environ[env_name]
        target = merged
        parts = dotted_key.split(".")
        for part in parts[:-1]:
            target = target.setdefault(part, {})
        last = parts[-1]
        if last in {"ttl_sec", "request_timeout_sec"}:
            value = int(value)
        target[last] = value

    return merged


def default_config() -> GitaConfig:
    """Built-in defaults with environment overrides applied."""
    return GitaConfig.from_dict(merge_env_overrides({}))


def load_config(config_path: str | Path = "config/gita.defaults.yml") -> GitaConfig:
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = load_yaml(path)
    data = merge_env_overrides(data)
    return GitaConfig.from_dict(data)
