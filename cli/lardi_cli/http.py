from __future__ import annotations

import typer
from lardi_client import LardiClient
from lardi_client.config_types import ClientConfig

from . import console
from .config import AppConfig, normalize_base_url, resolve_api_key


def make_client(cfg: AppConfig, *, base_url_override: str | None = None) -> LardiClient:
    api_key = resolve_api_key(cfg)
    if not api_key:
        console.err("API key is not set. Run: lardi config set --api-key <key>")
        raise typer.Exit(code=2)
    base_url = normalize_base_url(base_url_override or cfg.base_url)
    return LardiClient(
        ClientConfig(
            api_key=api_key,
            base_url=base_url,
            timeout_s=cfg.timeout_s,
            language=cfg.language,
        )
    )
