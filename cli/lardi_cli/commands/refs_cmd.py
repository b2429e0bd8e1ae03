from __future__ import annotations

from dataclasses import asdict

import typer
from lardi_client import LardiClient, LardiClientError, Response

from .. import console
from ..config import load_config
from ..http import make_client

# kind -> (title, list method, name lookup method)
KINDS: dict[str, tuple[str, str, str | None]] = {
    "currencies": ("Currencies", "get_currencies", "find_currency"),
    "units": ("Payment units", "get_units", None),
    "moments": ("Payment moments", "get_payment_moments", None),
    "body-types": ("Body types", "get_body_types", "find_body_type"),
    "packages": ("Package types", "get_package_types", None),
    "payment-types": ("Payment types", "get_payment_types", None),
    "load-types": ("Load types", "get_load_types", None),
    "areas": ("Areas", "get_areas", "find_area"),
}


def _fetch(client: LardiClient, kind: str, name: str | None) -> list[Response]:
    _, list_method, find_method = KINDS[kind]
    if name is None:
        return getattr(client, list_method)()
    if find_method is None:
        console.err(f"Lookup by name is not supported for {kind}.")
        raise typer.Exit(code=2)
    found = getattr(client, find_method)(name)
    return [found] if found is not None else []


def _show_refs(kind: str, name: str | None, base_url: str | None, json_out: bool) -> None:
    if kind not in KINDS:
        console.err(f"Unknown reference kind {kind!r}; expected one of: {', '.join(KINDS)}.")
        raise typer.Exit(code=2)

    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)
    try:
        items = _fetch(client, kind, name)
    except LardiClientError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    finally:
        client.close()

    if name is not None and not items:
        console.warn(f"No {kind} entry named {name!r}.")
        raise typer.Exit(code=1)

    if json_out:
        console.print_json([asdict(item) for item in items])
        return
    console.print_table(KINDS[kind][0], ["id", "name"], ((item.id, item.name) for item in items))


def refs(
        kind: str = typer.Argument(..., help=f"One of: {', '.join(KINDS)}."),
        name: str | None = typer.Option(None, "--name", help="Exact name to look up."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
) -> None:
    """List reference data or look up one entry by exact name."""
    _show_refs(kind, name, base_url, json_out)
