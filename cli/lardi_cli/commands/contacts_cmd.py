from __future__ import annotations

from dataclasses import asdict

import typer
from lardi_client import LardiClientError

from .. import console
from ..config import load_config
from ..http import make_client


def contacts(
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
) -> None:
    """List contacts of the current user."""
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)
    try:
        items = client.get_contacts()
    except LardiClientError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    finally:
        client.close()

    if json_out:
        console.print_json([asdict(item) for item in items])
        return
    console.print_table("Contacts", ["contact_id", "name"], ((c.contact_id, c.contact_name) for c in items))
