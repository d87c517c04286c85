from __future__ import annotations

import os

import typer

from aicp_client import ConfigError

from .. import console
from ..config import (
    AppConfig,
    config_path,
    default_config,
    load_config,
    normalize_base_url,
    resolve_base_url,
    save_config,
)

app = typer.Typer(help="Manage local CLI settings (~/.config/aicp/config.toml).")


def _load_or_exit() -> AppConfig:
    try:
        return load_config()
    except ConfigError as e:
        console.err(str(e))
        raise typer.Exit(code=2)


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        base_url: str = typer.Option(
            ...,
            "--base-url",
            prompt="API base URL",
            help="API base URL like http://localhost:8080/api/v1",
        ),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.base_url = normalize_base_url(base_url, warn=True)
    if not cfg.base_url:
        console.err("Base URL cannot be empty.")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = _load_or_exit()
    console.print(
        f"base_url={cfg.base_url or '(unset)'} effective_base_url={resolve_base_url(cfg)} timeout_s={cfg.timeout_s}",
        markup=False,
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help="Setting key (base_url, timeout_s)."),
):
    cfg = _load_or_exit()
    k = key.strip().lower()
    if k == "base_url":
        console.print(cfg.base_url, markup=False)
        return
    if k == "timeout_s":
        console.print(str(cfg.timeout_s), markup=False)
        return
    console.err(f"Unknown setting: {key}")
    raise typer.Exit(code=2)


@app.command("set")
def set_setting(
        base_url: str | None = typer.Option(None, "--base-url", help="Set API base URL."),
        timeout_s: float | None = typer.Option(None, "--timeout", help="Set request timeout in seconds."),
):
    cfg = _load_or_exit()
    if base_url is not None:
        cfg.base_url = normalize_base_url(base_url, warn=True)
    if timeout_s is not None:
        if timeout_s <= 0:
            console.err("Timeout must be positive.")
            raise typer.Exit(code=2)
        cfg.timeout_s = timeout_s
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
