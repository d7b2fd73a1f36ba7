"""CLI entrypoint: Typer app definition and command registration"""

import typer

from diffview.cli.commands import compare_cmd, main_callback, show_cmd, stats_cmd


app = typer.Typer(name="diffview", no_args_is_help=True, help="Collapsible diff section viewer")

app.callback()(main_callback)
app.command(name="show")(show_cmd)
app.command(name="compare")(compare_cmd)
app.command(name="stats")(stats_cmd)
