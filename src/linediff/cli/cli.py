"""CLI entrypoint: Typer app definition and command registration"""

import typer

from linediff.cli.commands import compare_cmd, sample_cmd, stats_cmd


app = typer.Typer(name="linediff", no_args_is_help=True, help="Line-based text diff viewer")

app.command(name="compare")(compare_cmd)
app.command(name="stats")(stats_cmd)
app.command(name="sample")(sample_cmd)
