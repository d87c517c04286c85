from __future__ import annotations

import typer

from ._runner import emit, run_call

app = typer.Typer(help="Trend analysis commands.")


@app.command("industry")
def industry_trends(
        industry: str = typer.Argument(..., help="Industry name."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    emit(run_call(lambda c: c.trends.get_industry_trends(industry), base_url=base_url))


@app.command("region")
def regional_trends(
        region: str = typer.Argument(..., help="Region code."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    emit(run_call(lambda c: c.trends.get_regional_trends(region), base_url=base_url))


@app.command("predicted")
def predicted_trends(
        industry: str = typer.Option(..., "--industry", help="Industry name."),
        timeframe: str = typer.Option(..., "--timeframe", help="Prediction window, e.g. Q1."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    emit(run_call(lambda c: c.trends.get_predicted_trends(industry, timeframe), base_url=base_url))
