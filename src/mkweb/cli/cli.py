"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mkweb.cli.commands import build_cmd


app = typer.Typer(name="mkweb", add_completion=False, help="Incremental static site builder")

app.command(name="build")(build_cmd)
