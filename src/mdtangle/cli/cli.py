"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdtangle.cli.commands import list_cmd, show_cmd, tangle_cmd


app = typer.Typer(name="mdtangle", no_args_is_help=True, help="Tangle named code blocks from literate markdown into files")

app.command(name="tangle")(tangle_cmd)
app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
