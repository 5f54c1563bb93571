"""Validation CLI command."""

from __future__ import annotations

import click
from rich.markup import escape

from topograph.cli.main import Context, console, pass_context


@click.command()
@pass_context
def validate(ctx: Context) -> None:
    """
    Validate the topology declaration.

    Checks identifiers, required fields, duplicates and connection
    references. Every problem is listed; exits with status 1 if any.

    Examples:

        topograph -i infra.yml validate
    """
    from topograph.core.validation import validate as validate_topology

    console.print("[bold]Validating topology...[/bold]")
    topology = ctx.topology
    console.print(
        f"  [green]✓[/green] Topology loaded: {len(topology)} entities, "
        f"{len(topology.connections)} connections"
    )

    errors = validate_topology(topology)

    console.print("\n[bold]Validation Summary[/bold]")
    console.print(f"  Errors: {len(errors)}")

    if errors:
        console.print("\n[red bold]Validation failed[/red bold]")
        for err in errors:
            console.print(f"  [red]•[/red] {escape(err)}")
        raise SystemExit(1)

    console.print("\n[green bold]Validation passed[/green bold]")
