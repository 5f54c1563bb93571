"""Main CLI entry point for topograph."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from topograph import __version__
from topograph.core.errors import StyleError, TopologyError
from topograph.core.schema import StyleConfig
from topograph.core.style import default_style, load_style
from topograph.core.topology import Topology

# DOT goes to stdout; everything meant for people goes to stderr
console = Console(stderr=True, soft_wrap=True)

DEFAULT_INPUT = "infra.yml"


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.input_path: Path | None = None
        self.style_path: Path | None = None
        self.verbose: bool = False
        self._topology: Topology | None = None
        self._style: StyleConfig | None = None

    @property
    def topology(self) -> Topology:
        """Lazy-load topology."""
        if self._topology is None:
            if not (self.input_path and self.input_path.exists()):
                raise click.ClickException(f"Topology not found: {self.input_path}")
            try:
                self._topology = Topology.load(self.input_path)
            except TopologyError as e:
                raise click.ClickException(str(e)) from e
        return self._topology

    @property
    def style(self) -> StyleConfig:
        """Lazy-load style, falling back to the built-in one."""
        if self._style is None:
            if self.style_path is None:
                self._style = default_style()
            else:
                try:
                    self._style = load_style(self.style_path)
                except StyleError as e:
                    raise click.ClickException(str(e)) from e
        return self._style


pass_context = click.make_pass_decorator(Context, ensure=True)


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@click.group()
@click.version_option(version=__version__, prog_name="topograph")
@click.option(
    "-i",
    "--input",
    "input_path",
    type=click.Path(exists=False, path_type=Path),
    default=DEFAULT_INPUT,
    help="Path to topology YAML file",
)
@click.option(
    "-s",
    "--style",
    "style_path",
    type=click.Path(exists=False, path_type=Path),
    envvar="TOPOGRAPH_STYLE",
    default=None,
    help="Path to style YAML file (default: built-in style)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@pass_context
def cli(ctx: Context, input_path: Path, style_path: Path | None, verbose: bool) -> None:
    """
    Topograph - Infrastructure topology diagrams.

    Validate topology declarations and render them as Graphviz
    diagrams grouped by category.
    """
    ctx.input_path = input_path
    ctx.style_path = style_path
    ctx.verbose = verbose
    setup_logging(verbose)


# Import and register subcommands
from topograph.cli.render import render
from topograph.cli.templates import templates
from topograph.cli.validate import validate

cli.add_command(render)
cli.add_command(templates)
cli.add_command(validate)


@cli.command()
@pass_context
def info(ctx: Context) -> None:
    """Show topology summary."""
    from rich.table import Table

    from topograph.generators.dot import connection_attributes
    from topograph.generators.labels import display_name

    topology = ctx.topology
    style = ctx.style

    console.print(f"\n[bold]Topograph v{__version__}[/bold]\n")
    console.print("[bold cyan]Topology Summary[/bold cyan]")
    console.print(f"  Path: {ctx.input_path}")
    console.print(f"  Entities: {len(topology)}")
    console.print(f"  Connections: {len(topology.connections)}")
    console.print(f"  Style: {ctx.style_path or 'built-in'}")

    if len(topology) > 0:
        table = Table(title="Entities by Category")
        table.add_column("Category", style="cyan")
        table.add_column("Cluster Label")
        table.add_column("Entities", justify="right")

        for category in topology.categories():
            count = sum(1 for e in topology if e.category == category)
            table.add_row(category or "-", display_name(category, style), str(count))

        console.print(table)

    if topology.connections:
        table = Table(title="Connections by Type")
        table.add_column("Type", style="cyan")
        table.add_column("Count", justify="right")
        table.add_column("Edge Style")

        for conn_type in topology.connection_types():
            count = sum(1 for c in topology.connections if c.type == conn_type)
            attrs = ", ".join(connection_attributes(conn_type, style)) or "-"
            table.add_row(conn_type or "-", str(count), attrs)

        console.print(table)


if __name__ == "__main__":
    cli()
