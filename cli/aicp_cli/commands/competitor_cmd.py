from __future__ import annotations

import typer

from ..jsonargs import parse_json_arg
from ._runner import emit, run_call

app = typer.Typer(help="Competitor analysis commands.")


@app.command("analyze")
def analyze(
        industry: str = typer.Option(..., "--industry", help="Industry name."),
        competitors: str = typer.Option(..., "--competitors", help='Competitors as JSON, e.g. \'["Acme", "Globex"]\'.'),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    body = parse_json_arg(competitors)
    emit(run_call(lambda c: c.competitor.analyze_competitors(industry, body), base_url=base_url))


@app.command("advantage")
def advantage(
        industry: str = typer.Argument(..., help="Industry name."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    emit(run_call(lambda c: c.competitor.get_competitive_advantage(industry), base_url=base_url))


@app.command("predict")
def predict(
        competitor: str = typer.Argument(..., help="Competitor name."),
        industry: str = typer.Option(..., "--industry", help="Industry name."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    emit(run_call(lambda c: c.competitor.predict_competitor_moves(competitor, industry), base_url=base_url))
