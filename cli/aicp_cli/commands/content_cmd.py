from __future__ import annotations

import typer

from ..jsonargs import parse_json_arg
from ._runner import emit, run_call

app = typer.Typer(help="Content localization commands.")


@app.command("localize")
def localize(
        content: str = typer.Option(..., "--content", help="Content to localize (JSON object or plain text)."),
        regions: list[str] = typer.Option(..., "--region", help="Target region; repeat for several."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    payload = parse_json_arg(content)
    emit(run_call(lambda c: c.content.localize_content(payload, regions), base_url=base_url))


@app.command("performance")
def performance(
        content_id: str = typer.Argument(..., help="Content ID."),
        regions: list[str] = typer.Option(..., "--region", help="Region to report on; repeat for several."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    emit(run_call(lambda c: c.content.get_regional_performance(content_id, regions), base_url=base_url))


@app.command("strategy")
def strategy(
        region: str = typer.Argument(..., help="Region code."),
        industry: str = typer.Option(..., "--industry", help="Industry name."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    emit(run_call(lambda c: c.content.get_regional_strategy(region, industry), base_url=base_url))


@app.command("engagement")
def engagement(
        region: str = typer.Argument(..., help="Region code."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    emit(run_call(lambda c: c.content.get_engagement_analytics(region), base_url=base_url))


@app.command("effectiveness")
def effectiveness(
        content_id: str = typer.Argument(..., help="Content ID."),
        region: str = typer.Option(..., "--region", help="Region code."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    emit(run_call(lambda c: c.content.get_content_effectiveness(content_id, region), base_url=base_url))


@app.command("recommendations")
def recommendations(
        content_id: str = typer.Argument(..., help="Content ID."),
        region: str = typer.Option(..., "--region", help="Region code."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    emit(run_call(lambda c: c.content.get_optimization_recommendations(content_id, region), base_url=base_url))


@app.command("monitor")
def monitor(
        content_id: str = typer.Argument(..., help="Content ID."),
        regions: list[str] = typer.Option(..., "--region", help="Region to monitor; repeat for several."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    emit(run_call(lambda c: c.content.start_realtime_monitoring(content_id, regions), base_url=base_url))


@app.command("timing")
def timing(
        content_id: str = typer.Argument(..., help="Content ID."),
        region: str = typer.Option(..., "--region", help="Region code."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    emit(run_call(lambda c: c.content.get_update_timing(content_id, region), base_url=base_url))
