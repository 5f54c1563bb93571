"""Diagram rendering CLI command."""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape

from topograph.cli.main import Context, console, pass_context


@click.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write DOT to this file instead of stdout",
)
@click.option(
    "--png",
    "png_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also render a PNG with Graphviz 'dot'",
)
@click.option(
    "--no-validate",
    is_flag=True,
    help="Render even if the topology has validation errors",
)
@pass_context
def render(ctx: Context, output: Path | None, png_path: Path | None, no_validate: bool) -> None:
    """
    Render the topology as a Graphviz DOT diagram.

    DOT is written to stdout unless --output or --png is given.

    Examples:

        # DOT to stdout
        topograph -i infra.yml render

        # Pipe to Graphviz
        topograph -i infra.yml render | dot -Tpng > diagram.png

        # DOT file and PNG with a custom style
        topograph -i infra.yml -s style.yml render -o infra.dot --png infra.png
    """
    from topograph.core.errors import GraphvizError
    from topograph.core.validation import validate
    from topograph.generators.dot import generate_dot
    from topograph.graphviz import render_png

    topology = ctx.topology
    style = ctx.style

    if not no_validate:
        errors = validate(topology)
        if errors:
            console.print(f"[red bold]Topology has {len(errors)} error(s):[/red bold]")
            for err in errors:
                console.print(f"  [red]•[/red] {escape(err)}")
            console.print("Fix the errors or pass --no-validate to render anyway.")
            raise SystemExit(1)

    dot = generate_dot(topology, style)

    if output is None and png_path is None:
        click.echo(dot, nl=False)
        return

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(dot)
        console.print(f"[green]Generated:[/green] {output}")

    if png_path is not None:
        try:
            render_png(dot, png_path)
        except GraphvizError as e:
            raise click.ClickException(str(e)) from e
        console.print(f"[green]Generated:[/green] {png_path}")
