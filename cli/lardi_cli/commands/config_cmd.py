from __future__ import annotations

import typer
from lardi_client.config_types import LANGUAGES

from .. import console
from ..config import ENV_API_KEY, load_config, normalize_base_url, resolve_api_key, save_config

app = typer.Typer(help="Show or change local client settings.")


@app.command("show")
def show_config() -> None:
    cfg = load_config()
    key_state = "(set)" if cfg.api_key else "(empty)"
    if resolve_api_key(cfg) != cfg.api_key:
        key_state = f"(from {ENV_API_KEY})"
    console.console.print(
        f"base_url={cfg.base_url} api_key={key_state} language={cfg.language} timeout_s={cfg.timeout_s:g}"
    )


@app.command("set")
def set_config(
        api_key: str | None = typer.Option(None, "--api-key", help="Lardi-Trans API key."),
        base_url: str | None = typer.Option(None, "--base-url", help="API base URL."),
        language: str | None = typer.Option(None, "--language", help="Response language: ru or uk."),
        timeout: float | None = typer.Option(None, "--timeout", help="Request timeout, seconds."),
) -> None:
    cfg = load_config()

    if api_key is not None:
        cfg.api_key = api_key.strip()
    if base_url is not None:
        normalized = normalize_base_url(base_url)
        if not normalized:
            console.err("Base URL must not be empty.")
            raise typer.Exit(code=2)
        cfg.base_url = normalized
    if language is not None:
        if language not in LANGUAGES:
            console.err(f"Unsupported language {language!r}; expected one of: {', '.join(LANGUAGES)}.")
            raise typer.Exit(code=2)
        cfg.language = language
    if timeout is not None:
        if timeout <= 0:
            console.err("Timeout must be positive.")
            raise typer.Exit(code=2)
        cfg.timeout_s = timeout

    save_config(cfg)
    console.ok("Config updated.")
