from __future__ import annotations

import typer

from .commands import auth_cmd, competitor_cmd, content_cmd, settings_cmd, strategy_cmd, trends_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="aicp",
        help="AI Content Platform CLI",
        no_args_is_help=True,
    )

    app.add_typer(content_cmd.app, name="content")
    app.add_typer(competitor_cmd.app, name="competitor")
    app.add_typer(strategy_cmd.app, name="strategy")
    app.add_typer(trends_cmd.app, name="trends")
    app.add_typer(auth_cmd.app, name="auth")
    app.add_typer(settings_cmd.app, name="settings")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
