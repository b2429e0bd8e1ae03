from __future__ import annotations

import typer

from .commands import cargo_cmd, config_cmd, contacts_cmd, refs_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="lardi",
        help="Lardi-Trans API client",
        no_args_is_help=True,
    )

    app.add_typer(config_cmd.app, name="config")
    app.add_typer(cargo_cmd.app, name="cargo")
    app.command("refs")(refs_cmd.refs)
    app.command("contacts")(contacts_cmd.contacts)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
