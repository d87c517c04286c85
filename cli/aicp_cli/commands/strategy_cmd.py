from __future__ import annotations

import typer

from ..jsonargs import parse_json_arg
from ._runner import emit, run_call

app = typer.Typer(help="Industry strategy commands.")


@app.command("generate")
def generate(
        industry: str = typer.Argument(..., help="Industry name."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    emit(run_call(lambda c: c.strategy.generate_strategy(industry), base_url=base_url))


@app.command("niche")
def niche(
        industry: str = typer.Option(..., "--industry", help="Industry name."),
        niche_name: str = typer.Option(..., "--niche", help="Niche within the industry."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    emit(run_call(lambda c: c.strategy.get_niche_strategy(industry, niche_name), base_url=base_url))


@app.command("optimize")
def optimize(
        industry: str = typer.Option(..., "--industry", help="Industry name."),
        content: str = typer.Option(..., "--content", help="Content to optimize (JSON object or plain text)."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    payload = parse_json_arg(content)
    emit(run_call(lambda c: c.strategy.optimize_content(industry, payload), base_url=base_url))
