from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir
from lardi_client.config_types import DEFAULT_BASE_URL, DEFAULT_LANGUAGE, DEFAULT_TIMEOUT_S, LANGUAGES

from . import console

APP_NAME = "lardi"
CONFIG_FILENAME = "config.toml"
ENV_API_KEY = "LARDI_API_KEY"


@dataclass
class AppConfig:
    base_url: str = DEFAULT_BASE_URL
    api_key: str = ""
    language: str = DEFAULT_LANGUAGE
    timeout_s: float = DEFAULT_TIMEOUT_S


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def normalize_base_url(raw: str | None) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    if "://" in value:
        return value
    return f"https://{value}"


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return _prune_none(
        {
            "base_url": cfg.base_url,
            "language": cfg.language,
            "timeout_s": cfg.timeout_s,
            "auth": {
                "api_key": cfg.api_key or None,
            },
        }
    )


def _prune_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _prune_none(v) for k, v in value.items() if v is not None}
    return value


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()

    base_url = normalize_base_url(str(data.get("base_url") or ""))
    if base_url:
        cfg.base_url = base_url

    language = str(data.get("language") or "").strip()
    if language in LANGUAGES:
        cfg.language = language
    elif language:
        console.warn(f"unsupported language {language!r} in config, using {DEFAULT_LANGUAGE}")

    timeout = data.get("timeout_s")
    if isinstance(timeout, (int, float)) and not isinstance(timeout, bool) and timeout > 0:
        cfg.timeout_s = float(timeout)

    auth_raw = data.get("auth") or {}
    if isinstance(auth_raw, dict):
        cfg.api_key = str(auth_raw.get("api_key") or "")
    return cfg


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def resolve_api_key(cfg: AppConfig) -> str:
    env_value = os.getenv(ENV_API_KEY, "").strip()
    if env_value:
        return env_value
    return cfg.api_key


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
