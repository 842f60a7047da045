from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_readings


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Utilities for pushing and inspecting indoor air-quality readings.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        typer.secho("CLI state is uninitialized.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Sensor API base URL (defaults to API_BASE_URL env or http://localhost:8080).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for each HTTP request.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(base_url=base_url, timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("push")
def push_command(
    ctx: typer.Context,
    payload_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="JSON file with one reading."
    ),
) -> None:
    """Send one reading to the API."""
    state = _get_state(ctx)
    typer.echo(f"Sending {payload_file} to {state.config.base_url} ...")
    message = state.client.push_reading(payload_file)
    typer.secho(message or "Reading stored.", fg=typer.colors.GREEN)


@app.command("fetch")
def fetch_command(
    ctx: typer.Context,
    start: Optional[str] = typer.Option(None, "--start", help="Inclusive start date/time."),
    end: Optional[str] = typer.Option(None, "--end", help="Inclusive end date/time."),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Maximum readings."),
) -> None:
    """List readings in a time range, newest first."""
    state = _get_state(ctx)
    readings = state.client.fetch_readings(start_date=start, end_date=end, limit=limit)
    render_readings(readings)


@app.command("latest")
def latest_command(
    ctx: typer.Context,
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Maximum readings."),
) -> None:
    """Show the most recent readings."""
    state = _get_state(ctx)
    render_readings(state.client.latest_readings(limit=limit))
