"""Template CLI command."""

from __future__ import annotations

from pathlib import Path

import click
from rich.table import Table

from topograph.cli.main import console


def _summary(text: str) -> str:
    """First comment line of a template, if any."""
    for line in text.splitlines():
        if line.startswith("#"):
            return line.lstrip("#").strip()
    return ""


@click.command()
@click.argument("name", required=False)
@click.option(
    "--write",
    "write_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the template to this file",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def templates(name: str | None, write_path: Path | None, force: bool) -> None:
    """
    List bundled topology templates, or show one.

    Examples:

        # List templates
        topograph templates

        # Print a template
        topograph templates web-app

        # Start a new topology from a template
        topograph templates web-app --write infra.yml
    """
    from topograph.api import get_templates
    from topograph.core.topology import Topology

    available = get_templates()

    if name is None:
        if write_path is not None:
            raise click.UsageError("--write needs a template NAME")
        table = Table(title="Topology Templates")
        table.add_column("Name", style="cyan")
        table.add_column("Entities", justify="right")
        table.add_column("Connections", justify="right")
        table.add_column("Description")
        for template_name, text in available.items():
            topology = Topology.from_yaml(text)
            table.add_row(
                template_name,
                str(len(topology)),
                str(len(topology.connections)),
                _summary(text),
            )
        console.print(table)
        return

    if name not in available:
        raise click.ClickException(
            f"Unknown template: {name} (available: {', '.join(available)})"
        )

    text = available[name]
    if write_path is None:
        click.echo(text, nl=False)
        return

    if write_path.exists() and not force:
        raise click.ClickException(f"{write_path} already exists (use --force to overwrite)")
    write_path.parent.mkdir(parents=True, exist_ok=True)
    write_path.write_text(text)
    console.print(f"[green]Generated:[/green] {write_path}")
