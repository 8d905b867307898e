#!/usr/bin/env python3
"""
Local Math Rendering CLI

Runs one expression through the same pipeline the bot uses and writes the PNG
to disk. Useful for checking a typst install without going through Discord.

Examples:\n

    render_math.py "x^2 + y^2 = z^2"                  # Writes rendered.png

    render_math.py "sum_(k=1)^n k" -o sum.png         # Custom output file

    render_math.py '$$$invalid$$$'                    # Shows the compiler's first error line
"""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from mathbot.contexts.rendering import Artifact, InputError, render_expression
from mathbot.contexts.rendering.renderer import RENDER_TIMEOUT_S, TYPST_COMPILER

app = typer.Typer(
    help="Render a typst math expression to PNG",
    add_completion=False,
)


@app.command()
def main(
    expression: Annotated[str, typer.Argument(help="Math expression (typst syntax)")],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Where to write the PNG"),
    ] = Path("rendered.png"),
    compiler: Annotated[
        str,
        typer.Option("--compiler", "-c", help="typst executable"),
    ] = TYPST_COMPILER,
    timeout: Annotated[
        Optional[float],
        typer.Option("--timeout", "-t", help="Seconds before typst is killed (0 = no limit)"),
    ] = RENDER_TIMEOUT_S,
):
    """Render EXPRESSION and save it, or report why it could not be rendered."""
    outcome = asyncio.run(render_expression(expression, compiler=compiler, timeout_s=timeout))

    if isinstance(outcome, Artifact):
        output.write_bytes(outcome.data)
        typer.secho(f"✓ Rendered {len(outcome.data)} bytes", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  PNG: {output}")
        raise typer.Exit(code=0)

    if isinstance(outcome, InputError):
        typer.secho("✗ Invalid typst math syntax", fg=typer.colors.RED, bold=True)
        typer.echo(f"  {outcome.message}")
        raise typer.Exit(code=1)

    typer.secho("✗ Rendering failed", fg=typer.colors.RED, bold=True)
    typer.echo(f"  {outcome.detail}")
    raise typer.Exit(code=2)


if __name__ == "__main__":
    app()
