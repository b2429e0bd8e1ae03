from __future__ import annotations

import json
from pathlib import Path

import typer
from lardi_client import ApiError, CargoRequest, LardiClientError

from .. import console
from ..config import load_config
from ..http import make_client

app = typer.Typer(help="Cargo proposals.")


def _load_request(path: Path) -> CargoRequest:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        console.err(f"Cannot read {path}: {e}")
        raise typer.Exit(code=2)
    except ValueError as e:
        console.err(f"{path} is not valid JSON: {e}")
        raise typer.Exit(code=2)
    try:
        return CargoRequest.from_payload(data)
    except LardiClientError as e:
        console.err(f"{path}: {e}")
        raise typer.Exit(code=2)


@app.command("create")
def create_cargo(
        file: Path = typer.Argument(..., help="JSON file with the proposal (API field names)."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
) -> None:
    req = _load_request(file)

    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)
    try:
        resp = client.create_cargo(req)
    except ApiError as e:
        if e.status_code in (401, 403):
            console.err("Unauthorized. Check the API key: lardi config set --api-key <key>")
        else:
            console.err(str(e))
        raise typer.Exit(code=2)
    except LardiClientError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    finally:
        client.close()

    if json_out:
        console.print_json({"id": resp.id})
        return
    console.ok(f"Cargo proposal created: id={resp.id}")
