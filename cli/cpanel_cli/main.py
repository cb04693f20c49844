from __future__ import annotations

import typer

from .commands import call_cmd, settings_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="cpanel",
        help="cPanel/WHM JSON API client",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.command("call")(call_cmd.call)
    app.command("query")(call_cmd.query)
    app.command("module")(call_cmd.module)
    app.command("check")(call_cmd.check)

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
