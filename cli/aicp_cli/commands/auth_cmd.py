from __future__ import annotations

import typer

from aicp_client import TokenStoreError
from aicp_client.token_store import TOKEN_KEY

from .. import console
from ..http import session_store

app = typer.Typer(help="Manage the stored API token.")


@app.command("set-token")
def set_token(
    token: str = typer.Option(..., "--token", prompt=True, hide_input=True, help="Bearer token to send with requests."),
):
    value = token.strip()
    if not value:
        console.err("Token cannot be empty.")
        raise typer.Exit(code=2)
    store = session_store()
    try:
        store.set(TOKEN_KEY, value)
    except TokenStoreError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    console.ok(f"Token saved to {store.path}.")


@app.command("logout", help="Remove the stored API token.")
def logout():
    store = session_store()
    try:
        removed = store.delete(TOKEN_KEY)
    except TokenStoreError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    if removed:
        console.ok(f"Token cleared from {store.path}.")
    else:
        console.info("No token stored.")


@app.command("status")
def status():
    store = session_store()
    try:
        token = store.get(TOKEN_KEY)
    except TokenStoreError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    state = "(set)" if token else "(empty)"
    console.print(f"token={state} path={store.path}", markup=False)
