"""CLI command: objkit normalize -- re-emit a JSON file in canonical form."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from objkit.config import CodecConfig
from objkit.serialization import DecodeError, decode, to_json


@click.command()
@click.argument("jsonfile", type=click.Path(exists=True))
@click.option("--pretty", is_flag=True, help="Indent the output")
def normalize(jsonfile: str, pretty: bool) -> None:
    """Parse JSONFILE and print it compactly (or indented with --pretty)."""
    config = CodecConfig()
    if pretty:
        config = config.pretty()

    try:
        data = decode(Path(jsonfile).read_text(encoding="utf-8"))
    except DecodeError as exc:
        click.echo(f"Parse error: {exc} (line {exc.line}, column {exc.column})", err=True)
        sys.exit(1)

    click.echo(to_json(data, config))
