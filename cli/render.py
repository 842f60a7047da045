from __future__ import annotations

from typing import Any, Dict, Iterable, List

import typer

_COLUMNS = (
    ("timestamp", "time"),
    ("location", "zone"),
    ("temp", "temp"),
    ("rH", "rH"),
    ("CO2", "CO2"),
    ("VOC", "VOC"),
    ("NOx", "NOx"),
    ("pmass25", "PM2.5"),
    ("pmass10", "PM10"),
    ("HCHO", "HCHO"),
)


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def _format_cell(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, float):
        return f"{value:.1f}"
    return str(value)


def _render_rows(rows: Iterable[List[str]], headers: List[str]) -> None:
    materialized = list(rows)
    widths = [len(header) for header in headers]
    for row in materialized:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row)]
    typer.echo("  ".join(header.ljust(width) for header, width in zip(headers, widths)))
    for row in materialized:
        typer.echo("  ".join(cell.ljust(width) for cell, width in zip(row, widths)))


def render_readings(readings: List[Dict[str, Any]]) -> None:
    echo_heading(f"Readings ({len(readings)})")
    if not readings:
        typer.echo("No readings returned.")
        return

    headers = [label for _, label in _COLUMNS] + ["tags"]
    rows = (
        [_format_cell(reading.get(key)) for key, _ in _COLUMNS]
        + [", ".join(reading.get("tags") or [])]
        for reading in readings
    )
    _render_rows(rows, headers)
