"""Frameworks command - List the frameworks dockgen can generate for."""
import json
from typing import Any, Dict, List

import typer
import yaml
from rich.table import Table

from dockgen_common import OUTPUT_FORMATS
from dockgen_sdk import list_frameworks
from .utils import console, error

app = typer.Typer()


def frameworks_as_dicts() -> List[Dict[str, Any]]:
    return [
        {
            "key": spec.key.value,
            "label": spec.label,
            "family": spec.family.value,
            "base_image": spec.base_image,
            "default_version": spec.default_version,
            "container_port": spec.container_port,
            "host_port": spec.host_port,
            "template": spec.template,
        }
        for spec in list_frameworks()
    ]


@app.command(name="frameworks")
def frameworks(
    format: str = typer.Option(
        "table",
        "--format", "-f",
        help="Output format: table, json or yaml"
    )
):
    """
    List supported frameworks with their default versions and ports.

    Examples:
        dockgen frameworks
        dockgen frameworks --format json
    """
    fmt = format.lower()
    if fmt not in OUTPUT_FORMATS:
        error(f"Invalid format '{format}'. Choose one of: {', '.join(OUTPUT_FORMATS)}")
        raise typer.Exit(1)

    rows = frameworks_as_dicts()

    if fmt == "json":
        typer.echo(json.dumps(rows, indent=2))
        return
    if fmt == "yaml":
        typer.echo(yaml.safe_dump(rows, sort_keys=False).rstrip())
        return

    table = Table(title="Supported Frameworks", show_header=True, header_style="bold cyan")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Framework")
    table.add_column("Base image", style="green")
    table.add_column("Port", justify="right")

    for row in rows:
        table.add_row(
            row["key"],
            row["label"],
            f"{row['base_image']}:{row['default_version']}",
            str(row["container_port"]),
        )

    console.print(table)
